"""
Unit tests for the in-place heap engine.
"""

import numpy as np
import pytest

from errors import InvalidRange
from heap import extract_root, heap_sort, heapify, is_heap, parent_index, sift_down, sift_up


def test_heap_sort_full_range():
    assert heap_sort([0, 9, 1, 8, 2, 7, 3, 6, 4, 5]) == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_heap_sort_sub_range_leaves_outside_untouched():
    assert heap_sort([0, 9, 1, 8, 2, 7, 3, 6, 4, 5], 2, 8) == [0, 9, 1, 2, 3, 6, 7, 8, 4, 5]


def test_heap_sort_sorts_in_place_and_returns_same_object():
    values = [3, 1, 2]
    result = heap_sort(values)
    assert result is values
    assert values == [1, 2, 3]


@pytest.mark.parametrize(
    "values",
    [
        [],
        [42],
        [7, 7, 7, 7, 7],
        [2, 1],
        [1, 2],
        [5, 4, 3, 2, 1],
        [-3, 0, -3, 8, 8, -1],
    ],
)
def test_heap_sort_small_cases(values):
    expected = sorted(values)
    assert heap_sort(list(values)) == expected


def test_heap_sort_large_random_sequence():
    rng = np.random.default_rng(17)
    values = rng.integers(-(2**31), 2**31, size=10_000).tolist()
    assert heap_sort(list(values)) == sorted(values)


def test_heap_sort_random_sub_ranges():
    rng = np.random.default_rng(1000)
    m = 200
    for _ in range(300):
        values = rng.integers(-1000, 1000, size=m).tolist()
        lo = int(rng.integers(0, m // 2))
        hi = int(rng.integers(lo, m + 1))
        expected = values[:lo] + sorted(values[lo:hi]) + values[hi:]
        heap_sort(values, lo, hi)
        assert values == expected


def test_heap_sort_idempotent_on_sorted_range():
    values = [9, 1, 2, 3, 4, 5, 0]
    heap_sort(values, 1, 6)
    snapshot = list(values)
    heap_sort(values, 1, 6)
    assert values == snapshot


@pytest.mark.parametrize("lo", [0, 3, 10])
def test_degenerate_ranges_are_untouched(lo):
    values = list(range(10, 0, -1))
    original = list(values)
    heap_sort(values, lo, lo)
    assert values == original
    if lo < len(values):
        heap_sort(values, lo, lo + 1)
        assert values == original


@pytest.mark.parametrize("lo, hi", [(-1, 3), (4, 3), (0, 11), (11, 11)])
def test_invalid_ranges_raise(lo, hi):
    values = list(range(10))
    with pytest.raises(InvalidRange):
        heap_sort(values, lo, hi)
    assert values == list(range(10))


@pytest.mark.parametrize("lo, i", [(0, 5), (0, 3), (-1, 1), (2, 1)])
def test_sift_up_rejects_index_outside_sequence(lo, i):
    values = [3, 1, 2]
    with pytest.raises(InvalidRange):
        sift_up(values, lo, i)
    assert values == [3, 1, 2]


@pytest.mark.parametrize(
    "size, lo, hi, i",
    [(2, 0, 5, None), (10, 2, 8, 0), (10, 2, 8, 8), (10, -1, 3, 0), (10, 5, 4, 5)],
)
def test_sift_down_rejects_bad_range_without_touching_values(size, lo, hi, i):
    values = list(range(size))
    with pytest.raises(InvalidRange):
        sift_down(values, lo, hi, i)
    assert values == list(range(size))


def test_sift_down_on_empty_range_is_noop():
    values = [1, 2, 3]
    assert sift_down(values, 1, 1) == 1
    assert values == [1, 2, 3]


def test_invalid_range_is_a_value_error():
    with pytest.raises(ValueError):
        heapify([1, 2, 3], 2, 1)


def test_heapify_establishes_max_heap_invariant():
    rng = np.random.default_rng(5)
    values = rng.integers(0, 50, size=101).tolist()
    lo, hi = 7, 93
    heapify(values, lo, hi)

    for i in range(lo + 1, hi):
        assert values[parent_index(lo, i)] >= values[i]
    assert is_heap(values, lo, hi)


def test_heapify_min_heap_with_reverse():
    values = [5, 3, 8, 1, 9, 2]
    heapify(values, reverse=True)
    assert values[0] == 1
    assert is_heap(values, reverse=True)
    assert not is_heap(values)


def test_is_heap_detects_violation():
    assert is_heap([9, 5, 8, 1, 2])
    assert not is_heap([1, 5, 8])
    # only the active range matters
    assert is_heap([1, 5, 8, 3, 2], 1, 5) is False
    assert is_heap([1, 8, 5, 3, 2], 1, 5)


def test_parent_index_is_relative_to_lo():
    assert parent_index(0, 1) == 0
    assert parent_index(0, 2) == 0
    assert parent_index(0, 6) == 2
    assert parent_index(4, 5) == 4
    assert parent_index(4, 10) == 6
    assert parent_index(4, 4) < 4


def test_sift_up_returns_resting_index():
    values = [3, 2, 1, 9]
    assert sift_up(values, 0, 3) == 0
    assert values == [9, 3, 1, 2]


def test_sift_up_stays_put_when_parent_ranks_higher():
    values = [9, 3, 1, 2]
    assert sift_up(values, 0, 3) == 3
    assert values == [9, 3, 1, 2]


def test_sift_down_prefers_right_child_on_tie():
    values = [(0, "root"), (5, "left"), (5, "right")]
    index = sift_down(values, 0, 3, key=lambda item: item[0])
    assert index == 2
    assert values == [(5, "right"), (5, "left"), (0, "root")]


def test_sift_down_respects_upper_bound():
    values = [1, 5, 9]
    # 9 is outside the active range [0, 2)
    assert sift_down(values, 0, 2) == 1
    assert values == [5, 1, 9]


def test_sift_down_from_inner_index():
    values = [10, 1, 9, 4, 3]
    assert sift_down(values, 0, 5, 1) == 3
    assert values == [10, 4, 9, 1, 3]


def test_extract_root_moves_maximum_to_boundary():
    values = [4, 7, 1, 9, 3]
    heapify(values)
    root = extract_root(values, 0, 5)
    assert root == 9
    assert values[4] == 9
    assert is_heap(values, 0, 4)


def test_extract_root_on_empty_range_raises():
    with pytest.raises(InvalidRange):
        extract_root([1, 2, 3], 1, 1)


def test_heap_sort_with_key_and_reverse():
    words = ["pear", "fig", "banana", "kiwi", "apple"]
    heap_sort(words, key=len)
    assert [len(w) for w in words] == [3, 4, 4, 5, 6]

    numbers = [3, 1, 4, 1, 5, 9, 2, 6]
    heap_sort(numbers, reverse=True)
    assert numbers == [9, 6, 5, 4, 3, 2, 1, 1]


def test_heap_sort_on_numpy_array():
    rng = np.random.default_rng(3)
    values = rng.normal(size=257)
    expected = np.sort(values)
    heap_sort(values)
    assert np.array_equal(values, expected)
