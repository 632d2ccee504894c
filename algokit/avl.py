"""Self-balancing AVL binary search tree of integers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["AVLTree"]


@dataclass(eq=False)
class _AVLNode:
    value: int
    left: _AVLNode | None = None
    right: _AVLNode | None = None
    height: int = 1


def _height(node: _AVLNode | None) -> int:
    return node.height if node is not None else 0


def _update(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(root: _AVLNode) -> _AVLNode:
    pivot = root.left
    assert pivot is not None
    root.left = pivot.right
    pivot.right = root
    _update(root)
    _update(pivot)
    return pivot


def _rotate_left(root: _AVLNode) -> _AVLNode:
    pivot = root.right
    assert pivot is not None
    root.right = pivot.left
    pivot.left = root
    _update(root)
    _update(pivot)
    return pivot


def _rebalance(node: _AVLNode) -> _AVLNode:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            assert node.left is not None
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            assert node.right is not None
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: _AVLNode | None, value: int) -> _AVLNode:
    if node is None:
        return _AVLNode(value)
    if value > node.value:
        node.right = _insert(node.right, value)
    else:
        node.left = _insert(node.left, value)
    return _rebalance(node)


def _leftmost(node: _AVLNode) -> _AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: _AVLNode | None, value: int) -> _AVLNode | None:
    if node is None:
        return None
    if value > node.value:
        node.right = _delete(node.right, value)
    elif value < node.value:
        node.left = _delete(node.left, value)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _leftmost(node.right)
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    return _rebalance(node)


class AVLTree:
    """Binary search tree kept height-balanced; equal values go to the left."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _AVLNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` to the tree."""
        self._root = _insert(self._root, value)

    def delete(self, value: int) -> None:
        """Remove one occurrence of ``value``; nothing happens if it is absent."""
        self._root = _delete(self._root, value)

    def inorder(self) -> list[int]:
        """All values in ascending order."""
        result: list[int] = []
        stack: list[_AVLNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def height(self) -> int:
        """Number of levels in the tree; 0 when it is empty."""
        return _height(self._root)

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False