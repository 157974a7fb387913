"""Profit, height and subarray optimisation problems."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

__all__ = [
    "max_profit_multiple",
    "max_profit_single",
    "min_height_difference",
    "max_product_subarray",
    "max_circular_subarray_sum",
]


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Return the best profit when any number of buy/sell transactions is allowed."""
    return sum(later - earlier for earlier, later in pairwise(prices) if later > earlier)


def max_profit_single(prices: Sequence[int]) -> int:
    """Return the best profit from at most one buy followed by one sell."""
    lowest = None
    best = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def min_height_difference(heights: Sequence[int], k: int) -> int:
    """Return the smallest possible spread after raising or lowering every height by ``k``.

    Heights may not become negative. The input is left untouched.
    """
    if not heights:
        raise ValueError("min_height_difference() requires at least one height")
    ordered = sorted(heights)
    if len(ordered) == 1:
        return 0
    answer = ordered[-1] - ordered[0]
    for previous, current in pairwise(ordered):
        if current - k < 0:
            continue
        low = min(ordered[0] + k, current - k)
        high = max(previous + k, ordered[-1] - k)
        answer = min(answer, high - low)
    return answer


def max_product_subarray(values: Sequence[int]) -> int:
    """Return the largest product of any non-empty contiguous subarray."""
    if not values:
        raise ValueError("max_product_subarray() requires a non-empty sequence")
    best = high = low = values[0]
    for value in values[1:]:
        candidates = (value, value * high, value * low)
        high, low = max(candidates), min(candidates)
        best = max(best, high)
    return best


def max_circular_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty subarray of a circular sequence."""
    if not values:
        raise ValueError("max_circular_subarray_sum() requires a non-empty sequence")
    total = 0
    running_max = running_min = 0
    best = worst = values[0]
    for value in values:
        running_max = max(running_max + value, value)
        best = max(best, running_max)
        running_min = min(running_min + value, value)
        worst = min(worst, running_min)
        total += value
    if worst == total:
        return best
    return max(best, total - worst)