"""A binary min-heap of integers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

__all__ = ["MinHeap"]


class MinHeap:
    """Min-heap: ``pop_min`` always returns the smallest element pushed so far."""

    def __init__(self, elements: Iterable[int] = ()) -> None:
        self._items: list[int] = list(elements)
        heapq.heapify(self._items)

    def push(self, element: int) -> None:
        """Add an element to the heap."""
        heapq.heappush(self._items, element)

    def pop_min(self) -> int:
        """Remove and return the smallest element; IndexError if the heap is empty."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)