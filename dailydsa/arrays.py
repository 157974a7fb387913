"""Array algorithms: ordering, rotation, permutation and counting helpers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

__all__ = [
    "second_largest",
    "push_zeros_to_end",
    "reverse_in_place",
    "rotate_left",
    "next_permutation",
    "find_majority",
    "smallest_missing_positive",
]


def second_largest(values: Sequence[int]) -> int:
    """Return the largest value strictly below the maximum, or -1 if none exists.

    Intended for positive integers; -1 doubles as the "not found" marker.
    """
    if not values:
        raise ValueError("second_largest() requires a non-empty sequence")
    largest = values[0]
    runner_up = -1
    for value in values[1:]:
        if value > largest:
            runner_up, largest = largest, value
        elif runner_up < value < largest:
            runner_up = value
    return runner_up


def push_zeros_to_end(values: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the rest."""
    non_zero = [value for value in values if value != 0]
    values[:] = non_zero + [0] * (len(values) - len(non_zero))


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse the sequence in place."""
    values.reverse()


def rotate_left(values: MutableSequence[int], d: int) -> None:
    """Rotate the sequence left (counter-clockwise) by ``d`` steps in place."""
    if d < 0:
        raise ValueError("rotation count must not be negative")
    n = len(values)
    if n == 0 or d == 0:
        return
    d %= n
    values[:] = list(values[d:]) + list(values[:d])


def next_permutation(values: MutableSequence[int]) -> None:
    """Rearrange into the next lexicographic permutation in place.

    The last permutation wraps around to the lowest (ascending) order.
    """
    n = len(values)
    pivot = next((i for i in range(n - 2, -1, -1) if values[i] < values[i + 1]), None)
    if pivot is None:
        values.reverse()
        return
    successor = next(i for i in range(n - 1, pivot, -1) if values[i] > values[pivot])
    values[pivot], values[successor] = values[successor], values[pivot]
    values[pivot + 1 :] = list(reversed(values[pivot + 1 :]))


def find_majority(values: Sequence[int]) -> list[int]:
    """Return, in increasing order, the values occurring more than n/3 times."""
    n = len(values)
    if n == 0:
        return []
    if n == 1:
        return list(values)

    first = second = 0
    first_votes = second_votes = 0
    for value in values:
        if value == first:
            first_votes += 1
        elif value == second:
            second_votes += 1
        elif first_votes == 0:
            first, first_votes = value, 1
        elif second_votes == 0:
            second, second_votes = value, 1
        else:
            first_votes -= 1
            second_votes -= 1

    first_votes = second_votes = 0
    for value in values:
        if value == first:
            first_votes += 1
        elif value == second:
            second_votes += 1

    threshold = n // 3
    result = []
    if first_votes > threshold:
        result.append(first)
    if second_votes > threshold and second != first:
        result.append(second)
    return sorted(result)


def smallest_missing_positive(values: Sequence[int]) -> int:
    """Return the smallest positive integer that does not occur in ``values``."""
    present = set(values)
    return next(i for i in range(1, len(values) + 2) if i not in present)