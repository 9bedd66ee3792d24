"""Sliding-window exercises on prices and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one later sell (0 if none)."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price <= lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    longest = 0
    for end, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = end
        longest = max(longest, end - start + 1)
    return longest


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one character reachable with ``k`` replacements."""
    if k < 0:
        raise ValueError("k must not be negative")
    counts: Counter[str] = Counter()
    best = 0
    start = 0
    top = 0
    for end, char in enumerate(s):
        counts[char] += 1
        top = max(top, counts[char])
        while (end - start + 1) - top > k:
            counts[s[start]] -= 1
            start += 1
        best = max(best, end - start + 1)
    return best