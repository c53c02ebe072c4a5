"""Problems solved with greedy strategies."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = ["Item", "fractional_knapsack", "can_place_flowers", "lemonade_change"]


@dataclass(frozen=True)
class Item:
    """An item with a profit and a weight, which may be taken in part."""

    profit: int
    weight: int

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    def ratio(self) -> float:
        """Profit per unit of weight."""
        return self.profit / self.weight


def fractional_knapsack(items: Iterable[Item], capacity: int) -> float:
    """Return the best profit when items may be split, filling ``capacity``.

    Items are taken by decreasing profit ratio, ties broken by higher profit.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    ordered = sorted(items, key=lambda item: (-item.ratio(), -item.profit))
    total = 0.0
    remaining = capacity
    for item in ordered:
        if remaining >= item.weight:
            total += item.profit
            remaining -= item.weight
        else:
            total += remaining / item.weight * item.profit
            break
    return total


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit in the bed without any two adjacent."""
    bed = [0, *flowerbed, 0]
    for pos in range(1, len(bed) - 1):
        if bed[pos - 1] == bed[pos] == bed[pos + 1] == 0:
            bed[pos] = 1
            n -= 1
    return n <= 0


def lemonade_change(bills: Iterable[int]) -> bool:
    """Tell whether correct change can be given to every customer in turn.

    Each lemonade costs 5; bills other than 5 and 10 are treated as 20.
    """
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            tens += 1
            if not fives:
                return False
            fives -= 1
        elif fives and tens:
            fives -= 1
            tens -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True