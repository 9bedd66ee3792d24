"""Stack exercises: brackets, min-stack, RPN, temperatures, fleets and histograms."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable, Iterator, Sequence

_CLOSING_TO_OPENING = {")": "(", "]": "[", "}": "{"}


def is_valid_parentheses(s: str) -> bool:
    """Return True if every closing bracket matches the most recent open one.

    Any character that is not a closing bracket is treated as an opener.
    """
    stack: list[str] = []
    for char in s:
        opener = _CLOSING_TO_OPENING.get(char)
        if opener is None:
            stack.append(char)
        elif not stack or stack.pop() != opener:
            return False
    return not stack


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []  # (value, minimum up to here)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest value currently on the stack."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate an integer expression in reverse Polish notation.

    Division truncates toward zero. Raises ValueError for malformed input and
    ZeroDivisionError when dividing by zero.
    """
    stack: list[int] = []
    for token in tokens:
        op = _OPERATORS.get(token)
        if op is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        b = stack.pop()
        a = stack.pop()
        stack.append(op(a, b))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def _balanced(prefix: str, opened: int, closed: int, n: int) -> Iterator[str]:
    if opened == n and closed == n:
        yield prefix
        return
    if opened < n:
        yield from _balanced(prefix + "(", opened + 1, closed, n)
    if closed < opened:
        yield from _balanced(prefix + ")", opened, closed + 1, n)


def generate_parenthesis(n: int) -> list[str]:
    """Return every well-formed string of ``n`` bracket pairs, in lexical order."""
    return list(_balanced("", 0, 0, n))


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days pass until a warmer one (0 if never)."""
    result = [0] * len(temperatures)
    waiting: list[int] = []
    for day, temp in enumerate(temperatures):
        while waiting and temp > temperatures[waiting[-1]]:
            earlier = waiting.pop()
            result[earlier] = day - earlier
        waiting.append(day)
    return result


def _arrival_time(distance: int, speed: int) -> float:
    if speed == 0:
        return math.inf
    return distance / speed


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Return how many fleets of cars arrive at ``target``.

    A car catching up with a slower one ahead joins its fleet. When several
    cars share a position, the last one listed counts.
    """
    times = {
        pos: _arrival_time(target - pos, spd)
        for pos, spd in zip(position, speed, strict=True)
    }
    fleets = 0
    lead_time: float | None = None
    for pos in sorted(times, reverse=True):
        time = times[pos]
        if lead_time is not None and time <= lead_time:
            continue
        lead_time = time
        fleets += 1
    return fleets


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle in the histogram."""
    best = 0
    stack: list[tuple[int, int]] = []  # (start index, height)
    for index, height in enumerate(heights):
        start = index
        while stack and height < stack[-1][1]:
            start, bar = stack.pop()
            best = max(best, bar * (index - start))
        stack.append((start, height))
    for start, bar in stack:
        best = max(best, bar * (len(heights) - start))
    return best