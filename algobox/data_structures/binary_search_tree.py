"""An unbalanced binary search tree for ordered values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


class BinarySearchTree(Generic[T]):
    """A binary search tree; equal values go to the right subtree."""

    def __init__(self) -> None:
        self._root: Optional[_Node[T]] = None

    def search(self, value: T) -> bool:
        """Return True if ``value`` is in the tree."""
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if node.value > value else node.right
        return False

    def insert(self, value: T) -> None:
        """Insert ``value`` at its place in the tree."""
        new = _Node(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def minimum(self) -> Optional[T]:
        """Return the smallest value, or None if the tree is empty."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> Optional[T]:
        """Return the largest value, or None if the tree is empty."""
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.value

    def floor(self, value: T) -> Optional[T]:
        """Return the largest value not greater than ``value``, or None."""
        best: Optional[T] = None
        node = self._root
        while node is not None:
            if node.value > value:
                node = node.left
            elif node.value < value:
                best = node.value
                node = node.right
            else:
                return node.value
        return best

    def ceil(self, value: T) -> Optional[T]:
        """Return the smallest value not less than ``value``, or None."""
        best: Optional[T] = None
        node = self._root
        while node is not None:
            if node.value < value:
                node = node.right
            elif node.value > value:
                best = node.value
                node = node.left
            else:
                return node.value
        return best

    def __iter__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right