"""Array and hash-table exercises: duplicates, sums, anagrams, frequencies and more."""

from __future__ import annotations

import string
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence

_LOWERCASE = string.ascii_lowercase
_SUDOKU_DIGITS = frozenset("123456789")


def has_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for n in nums:
        if n in seen:
            return True
        seen.add(n)
    return False


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices of two distinct elements adding up to ``target``, or []."""
    last_index = {value: index for index, value in enumerate(nums)}
    for i, value in enumerate(nums):
        j = last_index.get(target - value)
        if j is not None and j != i:
            return [i, j]
    return []


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` uses exactly the same characters as ``s``."""
    return Counter(s) == Counter(t)


def _letter_signature(word: str) -> tuple[int, ...]:
    counts = Counter(word)
    stray = set(counts) - set(_LOWERCASE)
    if stray:
        raise ValueError(
            f"only lowercase ASCII letters are supported, got {sorted(stray)!r}"
        )
    return tuple(counts[letter] for letter in _LOWERCASE)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other.

    Words must consist of lowercase ASCII letters; anything else raises ValueError.
    """
    groups: defaultdict[tuple[int, ...], list[str]] = defaultdict(list)
    for word in strs:
        groups[_letter_signature(word)].append(word)
    return list(groups.values())


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first.

    Values with equal frequency come out in ascending order.
    """
    counts = Counter(nums)
    ranked = sorted(counts, key=lambda value: (-counts[value], value))
    return ranked[: max(k, 0)]


def encode(strs: Iterable[str]) -> str:
    """Encode strings as ``<length>#<text>`` chunks joined together."""
    return "".join(f"{len(s)}#{s}" for s in strs)


def decode(s: str) -> list[str]:
    """Decode a string produced by :func:`encode`.

    Raises ValueError if the text is not a valid encoding.
    """
    result: list[str] = []
    pos = 0
    while pos < len(s):
        sep = s.find("#", pos)
        if sep == -1:
            raise ValueError(f"missing '#' length separator at position {pos}")
        length = int(s[pos:sep])
        if length < 0:
            raise ValueError(f"negative length {length} at position {pos}")
        start = sep + 1
        result.append(s[start : start + length])
        pos = start + length
    return result


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other elements."""
    result = [1] * len(nums)
    prefix = 1
    for i, value in enumerate(nums):
        result[i] = prefix
        prefix *= value
    suffix = 1
    for i in reversed(range(len(nums))):
        result[i] *= suffix
        suffix *= nums[i]
    return result


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Check a 9x9 board ('.' for empty) for repeats in rows, columns and boxes.

    Filled cells must hold the digits 1 to 9.
    """
    rows = [set() for _ in range(9)]
    cols = [set() for _ in range(9)]
    boxes = [set() for _ in range(9)]
    for r, row in enumerate(board[:9]):
        for c, cell in enumerate(row[:9]):
            if cell == ".":
                continue
            if cell not in _SUDOKU_DIGITS:
                return False
            box = (r // 3) * 3 + c // 3
            if cell in rows[r] or cell in cols[c] or cell in boxes[box]:
                return False
            rows[r].add(cell)
            cols[c].add(cell)
            boxes[box].add(cell)
    return True


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        longest = max(longest, end - value + 1)
    return longest