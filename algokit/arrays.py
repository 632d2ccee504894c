"""Searching, rotating, summing and printing integer arrays."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "binary_search",
    "last_index_of",
    "max_subarray_sum",
    "rotate_left",
    "reversed_copy",
    "total_and_average",
    "format_items",
]


def binary_search(items: Sequence[int], target: int) -> bool:
    """True if ``target`` occurs in the ascending sequence ``items``."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            return True
        if target < items[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return False


def last_index_of(items: Sequence[int], target: int) -> int:
    """Index of the last occurrence of ``target``; ValueError if it is absent."""
    for index in range(len(items) - 1, -1, -1):
        if items[index] == target:
            return index
    raise ValueError(f"{target!r} is not in the sequence")


def max_subarray_sum(items: Sequence[int]) -> int:
    """Largest sum of a contiguous run, or 0 when every run is negative."""
    best = 0
    current = 0
    for value in items:
        current = max(value, current + value)
        best = max(best, current)
    return best


def rotate_left(items: Sequence[int], count: int) -> list[int]:
    """A copy of ``items`` rotated ``count`` places to the left."""
    values = list(items)
    if not values or count <= 0:
        return values
    shift = count % len(values)
    return values[shift:] + values[:shift]


def reversed_copy(items: Sequence[int]) -> list[int]:
    """A copy of ``items`` in reverse order."""
    return list(reversed(items))


def total_and_average(items: Sequence[int]) -> tuple[float, float]:
    """Sum and arithmetic mean of ``items`` as floats."""
    if not items:
        raise ValueError("cannot average an empty sequence")
    total = sum(items)
    return float(total), total / len(items)


def format_items(items: Sequence[int]) -> str:
    """Each item followed by a comma and a space."""
    return "".join(f"{item}, " for item in items)