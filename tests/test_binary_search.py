import math
import statistics

import pytest

from algodrills.binary_search import (
    TimeMap,
    find_median_sorted_arrays,
    find_min,
    min_eating_speed,
    search,
    search_matrix,
    search_rotated,
)

SORTED = [-1, 0, 3, 5, 9, 12]


def _rotations(values):
    return [values[k:] + values[:k] for k in range(len(values))]


@pytest.mark.parametrize("target", SORTED)
def test_search_finds_present_values(target):
    assert search(SORTED, target) == SORTED.index(target)


@pytest.mark.parametrize("target", [-5, 2, 4, 13])
def test_search_missing_returns_minus_one(target):
    assert search(SORTED, target) == -1


def test_search_empty():
    assert search([], 3) == -1


def test_search_with_duplicates_hits_matching_value():
    nums = [1, 2, 2, 2, 3]
    assert nums[search(nums, 2)] == 2


MATRIX = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]


@pytest.mark.parametrize("target", [v for row in MATRIX for v in row])
def test_search_matrix_present(target):
    assert search_matrix(MATRIX, target) is True


@pytest.mark.parametrize("target", [0, 2, 8, 13, 21, 61])
def test_search_matrix_absent(target):
    assert search_matrix(MATRIX, target) is False


def test_search_matrix_empty():
    assert search_matrix([], 1) is False
    assert search_matrix([[]], 1) is False


def test_min_eating_speed_worked_example():
    assert min_eating_speed([3, 6, 7, 11], 8) == 4


@pytest.mark.parametrize(
    "piles,h",
    [([30, 11, 23, 4, 20], 5), ([30, 11, 23, 4, 20], 6), ([1, 1, 1], 10), ([25], 3)],
)
def test_min_eating_speed_is_minimal(piles, h):
    speed = min_eating_speed(piles, h)
    assert sum(math.ceil(p / speed) for p in piles) <= h
    if speed > 1:
        assert sum(math.ceil(p / (speed - 1)) for p in piles) > h


def test_min_eating_speed_with_one_hour_per_pile_is_max():
    piles = [4, 9, 2]
    assert min_eating_speed(piles, len(piles)) == max(piles)


def test_min_eating_speed_empty_raises():
    with pytest.raises(ValueError):
        min_eating_speed([], 3)


@pytest.mark.parametrize("nums", _rotations([11, 13, 15, 17]) + _rotations([0, 1, 2, 4, 5, 6, 7]))
def test_find_min_over_rotations(nums):
    assert find_min(nums) == min(nums)


def test_find_min_single():
    assert find_min([7]) == 7


def test_find_min_empty_raises():
    with pytest.raises(ValueError):
        find_min([])


@pytest.mark.parametrize("nums", _rotations([0, 1, 2, 4, 5, 6, 7]))
def test_search_rotated_finds_every_value(nums):
    for value in nums:
        assert search_rotated(nums, value) == nums.index(value)


@pytest.mark.parametrize("nums", _rotations([0, 1, 2, 4, 5, 6, 7]))
def test_search_rotated_missing(nums):
    assert search_rotated(nums, 3) == -1
    assert search_rotated(nums, 8) == -1
    assert search_rotated(nums, -1) == -1


def test_search_rotated_empty():
    assert search_rotated([], 5) == -1


@pytest.mark.parametrize(
    "a,b",
    [
        ([1, 3], [2]),
        ([1, 2], [3, 4]),
        ([], [1]),
        ([2], []),
        ([1, 5, 9], [2, 3, 4, 10, 11]),
        ([-5, -1], [-3, 0, 8]),
        ([1, 1, 1], [1, 1]),
    ],
)
def test_median_matches_statistics(a, b):
    assert find_median_sorted_arrays(a, b) == pytest.approx(statistics.median(a + b))


def test_median_symmetric_in_arguments():
    a, b = [1, 4, 7], [2, 3, 9, 12]
    assert find_median_sorted_arrays(a, b) == find_median_sorted_arrays(b, a)


def test_median_both_empty_raises():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])


def test_time_map_returns_latest_at_or_before():
    store = TimeMap()
    store.set("foo", "bar", 1)
    assert store.get("foo", 1) == "bar"
    assert store.get("foo", 3) == "bar"
    store.set("foo", "bar2", 4)
    assert store.get("foo", 4) == "bar2"
    assert store.get("foo", 5) == "bar2"
    assert store.get("foo", 3) == "bar"


def test_time_map_before_first_and_unknown_key():
    store = TimeMap()
    store.set("alpha", "one", 10)
    assert store.get("alpha", 9) == ""
    assert store.get("beta", 100) == ""


def test_time_map_keys_are_independent():
    store = TimeMap()
    store.set("a", "x", 1)
    store.set("b", "y", 2)
    assert store.get("a", 5) == "x"
    assert store.get("b", 5) == "y"
    assert store.get("b", 1) == ""