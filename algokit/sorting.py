"""Comparison and distribution sorts over lists of integers."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

__all__ = [
    "bubble_sort",
    "bubble_sort_passes",
    "merge_sort",
    "quick_sort",
    "insertion_sort",
    "counting_sort",
    "radix_sort",
    "build_max_heap",
    "heap_sort",
]


def bubble_sort_passes(items: Sequence[int]) -> Iterator[list[int]]:
    """Yield a snapshot of the list after each bubble-sort pass that swapped.

    Sorting stops at the first pass without a swap, which yields nothing.
    """
    values = list(items)
    n = len(values)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            return
        yield list(values)


def bubble_sort(items: Sequence[int]) -> list[int]:
    """A sorted copy of ``items`` by bubble sort."""
    result = list(items)
    for snapshot in bubble_sort_passes(items):
        result = snapshot
    return result


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Sequence[int]) -> list[int]:
    """A sorted copy of ``items`` by stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values: list[int], low: int, high: int) -> int:
    """Partition ``values[low:high]`` around its first element; return the pivot's place."""
    pivot = values[low]
    i, j = low, high
    while True:
        i += 1
        while i < high and values[i] <= pivot:
            i += 1
        j -= 1
        while values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
        else:
            break
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(items: Sequence[int]) -> list[int]:
    """A sorted copy of ``items`` by quicksort with the first element as pivot."""
    values = list(items)
    pending = [(0, len(values))]
    while pending:
        low, high = pending.pop()
        if high - low > 1:
            split = _partition(values, low, high)
            pending.append((low, split))
            pending.append((split + 1, high))
    return values


def insertion_sort(items: Sequence[int]) -> list[int]:
    """A sorted copy of ``items`` by insertion sort."""
    values = list(items)
    for i in range(1, len(values)):
        key = values[i]
        j = i
        while j > 0 and values[j - 1] > key:
            values[j] = values[j - 1]
            j -= 1
        values[j] = key
    return values


def _require_non_negative(values: Sequence[int]) -> None:
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")


def counting_sort(items: Sequence[int]) -> list[int]:
    """A sorted copy of non-negative integers by stable counting sort."""
    values = list(items)
    if not values:
        return values
    _require_non_negative(values)
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    running = 0
    for key, count in enumerate(counts):
        running += count
        counts[key] = running
    result = [0] * len(values)
    for value in reversed(values):
        counts[value] -= 1
        result[counts[value]] = value
    return result


def _counting_pass(values: list[int], place: int) -> list[int]:
    counts = [0] * 10
    for value in values:
        counts[value // place % 10] += 1
    for digit in range(1, 10):
        counts[digit] += counts[digit - 1]
    result = [0] * len(values)
    for value in reversed(values):
        digit = value // place % 10
        counts[digit] -= 1
        result[counts[digit]] = value
    return result


def radix_sort(items: Sequence[int]) -> list[int]:
    """A sorted copy of non-negative integers by least-significant-digit radix sort."""
    values = list(items)
    if not values:
        return values
    _require_non_negative(values)
    largest = max(values)
    place = 1
    while largest // place > 0:
        values = _counting_pass(values, place)
        place *= 10
    return values


def build_max_heap(items: Sequence[int]) -> list[int]:
    """Arrange a copy of ``items`` as a max-heap by sifting each element up."""
    heap = list(items)
    for i in range(1, len(heap)):
        child = i
        while child:
            parent = (child - 1) // 2
            if heap[parent] < heap[child]:
                heap[parent], heap[child] = heap[child], heap[parent]
            child = parent
    return heap


def _sift_down(heap: list[int], root: int, end: int) -> None:
    while True:
        child = 2 * root + 1
        if child >= end:
            return
        if child + 1 < end and heap[child] < heap[child + 1]:
            child += 1
        if heap[root] >= heap[child]:
            return
        heap[root], heap[child] = heap[child], heap[root]
        root = child


def heap_sort(items: Sequence[int]) -> list[int]:
    """A sorted copy of ``items`` by heap sort on a max-heap."""
    heap = build_max_heap(items)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, 0, end)
    return heap