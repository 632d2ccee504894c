"""Singly linked and circular singly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["LinkedList", "CircularList"]


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list with in-place reversal and deletion by position."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for item in items:
            self.append(item)

    def push_front(self, data: Any) -> None:
        """Insert ``data`` at the head of the list."""
        self._head = _Node(data, self._head)
        self._size += 1

    def append(self, data: Any) -> None:
        """Insert ``data`` after the last node."""
        node = _Node(data)
        if self._head is None:
            self._head = node
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1

    def reverse(self) -> None:
        """Reverse the links in place, iteratively."""
        previous: _Node | None = None
        current = self._head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self._head = previous

    def reverse_recursive(self) -> None:
        """Reverse the links in place, by recursion down to the last node."""

        def relink(node: _Node) -> None:
            if node.next is None:
                self._head = node
                return
            relink(node.next)
            node.next.next = node
            node.next = None

        if self._head is not None:
            relink(self._head)

    def delete_at(self, index: int) -> Any:
        """Remove the node at ``index`` and return its data; IndexError if out of range."""
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        assert self._head is not None
        if index == 0:
            removed = self._head
            self._head = removed.next
        else:
            before = self._head
            for _ in range(index - 1):
                assert before.next is not None
                before = before.next
            removed = before.next
            assert removed is not None
            before.next = removed.next
        self._size -= 1
        return removed.data

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


class CircularList:
    """Circular singly linked list addressed through its tail node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.add_last(item)

    def _add_to_empty(self, data: Any) -> None:
        node = _Node(data)
        node.next = node
        self._tail = node

    def add_first(self, data: Any) -> None:
        """Insert ``data`` just after the tail, making it the first element."""
        if self._tail is None:
            self._add_to_empty(data)
        else:
            self._tail.next = _Node(data, self._tail.next)
        self._size += 1

    def add_last(self, data: Any) -> None:
        """Insert ``data`` after the tail and make it the new tail."""
        if self._tail is None:
            self._add_to_empty(data)
        else:
            node = _Node(data, self._tail.next)
            self._tail.next = node
            self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        first = self._tail.next
        node = first
        while True:
            assert node is not None
            yield node.data
            node = node.next
            if node is first:
                return

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"