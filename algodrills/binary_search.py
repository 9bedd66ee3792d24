"""Binary-search exercises: sorted lookups, rotated arrays, rates, medians and a timed store."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Sequence


def search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the ascending ``nums``, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return True if ``target`` is in a matrix whose rows, read in order, ascend."""
    if not matrix or not matrix[0]:
        return False
    last = len(matrix[0]) - 1
    low, high = 0, len(matrix) - 1
    while low <= high:
        mid = (low + high) // 2
        row = matrix[mid]
        if row[0] <= target <= row[last]:
            return search(row[: last + 1], target) != -1
        if target < row[0]:
            high = mid - 1
        else:
            low = mid + 1
    return False


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest whole speed that eats every pile within ``h`` hours.

    If even the largest pile size is too slow, that size is returned.
    Raises ValueError when there are no piles.
    """
    if not piles:
        raise ValueError("piles must not be empty")
    low, high = 1, max(piles)
    best = high
    while low <= high:
        mid = (low + high) // 2
        if _hours_needed(piles, mid) <= h:
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def find_min(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated ascending array.

    Raises ValueError when ``nums`` is empty.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = 0, len(nums) - 1
    best = nums[0]
    while low <= high:
        if nums[low] < nums[high]:
            best = min(best, nums[low])
            break
        mid = (low + high) // 2
        best = min(best, nums[mid])
        if nums[low] <= nums[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return best


def _min_index(nums: Sequence[int]) -> int:
    low, high = 0, len(nums) - 1
    smallest = 0
    while low <= high:
        if nums[low] < nums[high]:
            if nums[low] < nums[smallest]:
                smallest = low
            break
        mid = (low + high) // 2
        if nums[mid] < nums[smallest]:
            smallest = mid
        if nums[low] <= nums[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return smallest


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated ascending array of distinct values, or -1."""
    pivot = _min_index(nums)
    low, high = 0, len(nums) - 1
    if pivot != 0:
        if nums[low] <= target <= nums[pivot - 1]:
            high = pivot - 1
        elif nums[pivot] <= target <= nums[high]:
            low = pivot
        else:
            return -1
    while low <= high:
        mid = (low + high) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of two ascending arrays taken together.

    Raises ValueError when both arrays are empty.
    """
    a, b = list(nums1), list(nums2)
    if len(b) < len(a):
        a, b = b, a
    total = len(a) + len(b)
    if total == 0:
        raise ValueError("at least one array must be non-empty")
    half = total // 2
    low, high = 0, len(a) - 1
    while True:
        i = (low + high) // 2
        j = half - i - 2
        a_left = a[i] if i >= 0 else -math.inf
        a_right = a[i + 1] if i + 1 < len(a) else math.inf
        b_left = b[j] if j >= 0 else -math.inf
        b_right = b[j + 1] if j + 1 < len(b) else math.inf
        if a_left <= b_right and b_left <= a_right:
            if total % 2 == 1:
                return float(min(a_right, b_right))
            return (max(a_left, b_left) + min(a_right, b_right)) / 2.0
        if a_left > b_right:
            high = i - 1
        else:
            low = i + 1


class TimeMap:
    """A key-value store that keeps every value with the time it was set."""

    def __init__(self) -> None:
        self._timestamps: dict[str, list[int]] = {}
        self._values: dict[str, list[str]] = {}

    def set(self, key: str, value: str, timestamp: int) -> None:
        """Record ``value`` for ``key`` at ``timestamp``; timestamps must not decrease."""
        self._timestamps.setdefault(key, []).append(timestamp)
        self._values.setdefault(key, []).append(value)

    def get(self, key: str, timestamp: int) -> str:
        """Return the latest value set for ``key`` at or before ``timestamp``, or ''."""
        stamps = self._timestamps.get(key)
        if not stamps:
            return ""
        position = bisect_right(stamps, timestamp)
        if position == 0:
            return ""
        return self._values[key][position - 1]