"""Dynamic programming over item sets: 0/1 knapsack and minimum partition."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["knapsack", "min_partition_difference"]


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Largest total value of items whose total weight fits within ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def min_partition_difference(items: Sequence[int]) -> int:
    """Smallest absolute difference between the sums of two complementary subsets."""
    total = sum(items)
    reachable = {0}
    for item in items:
        reachable |= {subtotal + item for subtotal in reachable}
    return min(abs(total - 2 * subtotal) for subtotal in reachable)