"""Two-pointer exercises on strings and arrays."""

from __future__ import annotations

import string
from collections.abc import Iterable, Sequence

_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)


def is_palindrome(s: str) -> bool:
    """Return True if the ASCII letters and digits of ``s`` read the same both ways.

    Comparison ignores case; all other characters are skipped.
    """
    cleaned = [c.lower() for c in s if c in _ASCII_ALNUM]
    return cleaned == cleaned[::-1]


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return 1-based indices of two elements of a sorted list summing to target, or []."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return all distinct triplets, each in ascending order, that sum to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        wanted = -first
        left, right = i + 1, len(values) - 1
        while left < right:
            total = values[left] + values[right]
            if total == wanted:
                result.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < wanted:
                left += 1
            else:
                right -= 1
    return result


def max_area(heights: Sequence[int]) -> int:
    """Return the most water a container formed by two lines can hold."""
    best = 0
    left, right = 0, len(heights) - 1
    while left < right:
        best = max(best, min(heights[left], heights[right]) * (right - left))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map traps."""
    left, right = 0, len(height) - 1
    max_left = max_right = 0
    total = 0
    while left < right:
        if height[left] <= height[right]:
            max_left = max(max_left, height[left])
            total += max_left - height[left]
            left += 1
        else:
            max_right = max(max_right, height[right])
            total += max_right - height[right]
            right -= 1
    return total