from collections import Counter
from itertools import permutations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dailydsa.arrays import (
    find_majority,
    next_permutation,
    push_zeros_to_end,
    reverse_in_place,
    rotate_left,
    second_largest,
    smallest_missing_positive,
)

positive_lists = st.lists(st.integers(min_value=1, max_value=50), min_size=2, max_size=30)
small_lists = st.lists(st.integers(min_value=0, max_value=6), min_size=1, max_size=6)


def test_second_largest_worked_example():
    assert second_largest([12, 35, 1, 10, 34, 1]) == 34


def test_second_largest_all_equal_returns_minus_one():
    assert second_largest([10, 10, 10]) == -1


def test_second_largest_empty_raises():
    with pytest.raises(ValueError):
        second_largest([])


@given(positive_lists)
def test_second_largest_invariant(values):
    result = second_largest(values)
    top = max(values)
    below = [v for v in values if v < top]
    if below:
        assert result in below
        assert all(v <= result for v in below)
    else:
        assert result == -1


@given(st.lists(st.integers(min_value=0, max_value=5), max_size=30))
def test_push_zeros_to_end_keeps_order(values):
    original = list(values)
    push_zeros_to_end(values)
    non_zero = [v for v in original if v != 0]
    assert values[: len(non_zero)] == non_zero
    assert all(v == 0 for v in values[len(non_zero) :])
    assert len(values) == len(original)


def test_push_zeros_to_end_without_zeros_is_unchanged():
    values = [10, 20, 30]
    push_zeros_to_end(values)
    assert values == [10, 20, 30]


@given(st.lists(st.integers(), max_size=30))
def test_reverse_in_place_twice_restores(values):
    original = list(values)
    reverse_in_place(values)
    if original:
        assert values[0] == original[-1]
        assert values[-1] == original[0]
    reverse_in_place(values)
    assert values == original


@given(st.lists(st.integers(), min_size=1, max_size=20), st.integers(min_value=0, max_value=100))
def test_rotate_left_round_trip(values, d):
    original = list(values)
    n = len(values)
    rotate_left(values, d)
    assert sorted(values) == sorted(original)
    assert values[0] == original[d % n]
    rotate_left(values, n - d % n)
    assert values == original


def test_rotate_left_by_length_is_identity():
    values = [7, 3, 9, 1]
    rotate_left(values, 4)
    assert values == [7, 3, 9, 1]


def test_rotate_left_negative_raises():
    with pytest.raises(ValueError):
        rotate_left([1, 2, 3], -1)


@given(small_lists)
def test_next_permutation_is_immediate_successor(values):
    original = list(values)
    next_permutation(values)
    assert sorted(values) == sorted(original)
    if original == sorted(original, reverse=True):
        assert values == sorted(original)
    else:
        assert values > original
        assert not any(original < list(p) < values for p in permutations(original))


def test_next_permutation_last_wraps_to_first():
    values = [3, 2, 1]
    next_permutation(values)
    assert values == [1, 2, 3]


def test_find_majority_worked_example():
    assert find_majority([2, 1, 5, 5, 5, 5, 6, 6, 6, 6, 6]) == [5, 6]


def test_find_majority_none():
    assert find_majority([1, 2, 3, 4, 5]) == []


def test_find_majority_empty():
    assert find_majority([]) == []


@given(st.lists(st.integers(min_value=-3, max_value=3), min_size=1, max_size=40))
def test_find_majority_invariant(values):
    result = find_majority(values)
    counts = Counter(values)
    n = len(values)
    assert result == sorted(result)
    assert all(counts[v] > n // 3 for v in result)
    assert all(v in result for v, c in counts.items() if c > n // 3)


def test_smallest_missing_positive_worked_example():
    assert smallest_missing_positive([2, -3, 4, 1, 1, 7]) == 3


def test_smallest_missing_positive_all_negative():
    assert smallest_missing_positive([-8, 0, -1, -4, -3]) == 1


@given(st.lists(st.integers(min_value=-10, max_value=20), min_size=1, max_size=30))
def test_smallest_missing_positive_invariant(values):
    original = list(values)
    result = smallest_missing_positive(values)
    assert result >= 1
    assert result not in values
    assert all(i in values for i in range(1, result))
    assert values == original