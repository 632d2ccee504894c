"""Unbalanced binary search tree and binary tree traversals."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["Node", "inorder", "preorder", "postorder", "BinarySearchTree"]


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    key: int
    left: Node | None = None
    right: Node | None = None


def inorder(node: Node | None) -> list[int]:
    """Keys in left, node, right order."""
    result: list[int] = []
    stack: list[Node] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.key)
        current = current.right
    return result


def preorder(node: Node | None) -> list[int]:
    """Keys in node, left, right order."""
    result: list[int] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        result.append(current.key)
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return result


def postorder(node: Node | None) -> list[int]:
    """Keys in left, right, node order."""
    result: list[int] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        result.append(current.key)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    result.reverse()
    return result


class BinarySearchTree:
    """Binary search tree without balancing; equal keys go to the right."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add ``key`` to the tree."""
        node = Node(key)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def _replace_child(self, parent: Node | None, old: Node, new: Node | None) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def delete(self, key: int) -> None:
        """Remove one node holding ``key``; nothing happens if it is absent."""
        parent: Node | None = None
        current = self.root
        while current is not None and current.key != key:
            parent = current
            current = current.left if key < current.key else current.right
        if current is None:
            return
        if current.left is not None and current.right is not None:
            successor_parent = current
            successor = current.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            current.key = successor.key
            parent, current = successor_parent, successor
        child = current.left if current.left is not None else current.right
        self._replace_child(parent, current, child)

    def __contains__(self, key: object) -> bool:
        current = self.root
        while current is not None:
            if key == current.key:
                return True
            current = current.left if key < current.key else current.right  # type: ignore[operator]
        return False

    def inorder(self) -> list[int]:
        """Keys in ascending order."""
        return inorder(self.root)

    def preorder(self) -> list[int]:
        """Keys in node, left, right order."""
        return preorder(self.root)

    def postorder(self) -> list[int]:
        """Keys in left, right, node order."""
        return postorder(self.root)