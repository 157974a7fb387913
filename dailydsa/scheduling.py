"""Job sequencing and 0/1 knapsack."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

__all__ = ["job_sequencing", "knapsack"]


def job_sequencing(deadlines: Sequence[int], profits: Sequence[int]) -> tuple[int, int]:
    """Return ``(jobs_done, total_profit)`` for the most profitable unit-time schedule."""
    if len(deadlines) != len(profits):
        raise ValueError("deadlines and profits must have the same length")
    chosen: list[int] = []
    for deadline, profit in sorted(zip(deadlines, profits)):
        if deadline > len(chosen):
            heapq.heappush(chosen, profit)
        elif chosen and chosen[0] < profit:
            heapq.heapreplace(chosen, profit)
    return len(chosen), sum(chosen)


def knapsack(capacity: int, values: Sequence[int], weights: Sequence[int]) -> int:
    """Return the best total value of items fitting within ``capacity`` (each used at most once)."""
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]