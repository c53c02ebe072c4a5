"""Exhaustive search problems solved by backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

__all__ = [
    "combination_sum",
    "generate_parentheses",
    "subsets",
    "knapsack_max_value",
]


def combination_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every multiset drawn from ``nums`` (with repetition) summing to ``target``.

    Combinations appear in search order: each number is first taken as many
    times as possible before moving on to the next one.
    """
    pool = tuple(nums)
    if any(n <= 0 for n in pool):
        raise ValueError("combination_sum requires strictly positive numbers")

    def walk(start: int, remaining: int, chosen: tuple[int, ...]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if remaining < 0 or start >= len(pool):
            return
        value = pool[start]
        yield from walk(start, remaining - value, chosen + (value,))
        yield from walk(start + 1, remaining, chosen)

    return list(walk(0, target, ()))


def generate_parentheses(n: int) -> list[str]:
    """Return all well-formed strings of ``n`` pairs of parentheses."""

    def walk(opened: int, closed: int, prefix: str) -> Iterator[str]:
        if opened == closed == n:
            yield prefix
            return
        if opened < n:
            yield from walk(opened + 1, closed, prefix + "(")
        if closed < opened:
            yield from walk(opened, closed + 1, prefix + ")")

    return list(walk(0, 0, ""))


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``, those including an element listed first."""
    result: list[list[int]] = [[]]
    for value in reversed(nums):
        result = [[value, *rest] for rest in result] + result
    return result


def knapsack_max_value(
    values: Sequence[int], weights: Sequence[int], capacity: int
) -> int:
    """Return the best total value of a 0/1 knapsack found by exhaustive search."""
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    items = tuple(zip(values, weights))

    def best(index: int, weight: int, value: int) -> int:
        if index == len(items):
            return value
        item_value, item_weight = items[index]
        skip = best(index + 1, weight, value)
        if weight + item_weight <= capacity:
            return max(best(index + 1, weight + item_weight, value + item_value), skip)
        return skip

    return max(0, best(0, 0, 0))