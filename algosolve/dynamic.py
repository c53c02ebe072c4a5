"""Problems solved with dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["knapsack"]


def knapsack(profits: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the maximum profit of a 0/1 knapsack of the given capacity."""
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")

    best = [0] * (capacity + 1)
    for profit, weight in zip(profits, weights):
        previous = best[:]
        for room in range(weight, capacity + 1):
            best[room] = max(previous[room], previous[room - weight] + profit)
    return best[capacity]