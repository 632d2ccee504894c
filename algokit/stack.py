"""Stacks built from a linked chain of nodes and from a pair of queues."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

__all__ = ["StackEmptyError", "LinkedStack", "QueueStack"]


class StackEmptyError(IndexError):
    """Raised when an element is requested from an empty stack."""


@dataclass
class _Node:
    data: int
    next: _Node | None = None


class LinkedStack:
    """Last-in, first-out stack kept as a singly linked chain."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, data: int) -> None:
        """Put ``data`` on top of the stack."""
        self._top = _Node(data, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top element."""
        if self._top is None:
            raise StackEmptyError("pop from an empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> int:
        """Return the top element without removing it."""
        if self._top is None:
            raise StackEmptyError("peek at an empty stack")
        return self._top.data

    def is_empty(self) -> bool:
        """True if the stack holds no elements."""
        return self._top is None

    def __len__(self) -> int:
        return self._size


class QueueStack:
    """Stack realised with two first-in, first-out queues."""

    def __init__(self) -> None:
        self._main: deque[int] = deque()
        self._spare: deque[int] = deque()

    def _move_all_but_last(self) -> None:
        while len(self._main) > 1:
            self._spare.append(self._main.popleft())

    def _swap(self) -> None:
        self._main, self._spare = self._spare, self._main

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._main.append(value)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._main:
            raise StackEmptyError("pop from an empty stack")
        self._move_all_but_last()
        value = self._main.popleft()
        self._swap()
        return value

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._main:
            raise StackEmptyError("top of an empty stack")
        self._move_all_but_last()
        value = self._main.popleft()
        self._spare.append(value)
        self._swap()
        return value

    def __len__(self) -> int:
        return len(self._main)