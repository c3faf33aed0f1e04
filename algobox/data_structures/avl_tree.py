"""A set of ordered values kept in a self-balancing AVL tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    height: int = 1
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None

    @property
    def balance_factor(self) -> int:
        """Height of the right subtree minus height of the left subtree."""
        return _height(self.right) - _height(self.left)

    def update_height(self) -> None:
        self.height = 1 + max(_height(self.left), _height(self.right))


def _height(node: Optional[_Node[Any]]) -> int:
    return node.height if node is not None else 0


def _rotate_left(node: _Node[T]) -> _Node[T]:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    node.update_height()
    pivot.left = node
    pivot.update_height()
    return pivot


def _rotate_right(node: _Node[T]) -> _Node[T]:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    node.update_height()
    pivot.right = node
    pivot.update_height()
    return pivot


def _rebalance(node: _Node[T]) -> _Node[T]:
    """Restore the AVL property at ``node`` and return the subtree's new root."""
    node.update_height()
    factor = node.balance_factor
    if factor == -2:
        assert node.left is not None
        if node.left.balance_factor == 1:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor == 2:
        assert node.right is not None
        if node.right.balance_factor == -1:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node[T]], value: T) -> tuple[_Node[T], bool]:
    if node is None:
        return _Node(value), True
    if value == node.value:
        return node, False
    if value < node.value:
        node.left, inserted = _insert(node.left, value)
    else:
        node.right, inserted = _insert(node.right, value)
    return (_rebalance(node) if inserted else node), inserted


def _take_min(node: _Node[T]) -> tuple[Optional[_Node[T]], _Node[T]]:
    """Detach the smallest node; return the remaining subtree and that node."""
    if node.left is None:
        return node.right, node
    node.left, smallest = _take_min(node.left)
    return _rebalance(node), smallest


def _merge(left: _Node[T], right: _Node[T]) -> _Node[T]:
    rest, root = _take_min(right)
    root.left = left
    root.right = rest
    return _rebalance(root)


def _remove(node: Optional[_Node[T]], value: T) -> tuple[Optional[_Node[T]], bool]:
    if node is None:
        return None, False
    if value == node.value:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        return _merge(node.left, node.right), True
    if value < node.value:
        node.left, removed = _remove(node.left, value)
    else:
        node.right, removed = _remove(node.right, value)
    return (_rebalance(node) if removed else node), removed


class AVLTree(Generic[T]):
    """A set of ordered values, balanced so sibling heights differ by at most one."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: Optional[_Node[T]] = None
        self._length = 0
        for value in values:
            self.insert(value)

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False

    def insert(self, value: T) -> bool:
        """Add ``value``; return True if it was not already present."""
        self._root, inserted = _insert(self._root, value)
        if inserted:
            self._length += 1
        return inserted

    def remove(self, value: T) -> bool:
        """Remove ``value``; return True if it was present."""
        self._root, removed = _remove(self._root, value)
        if removed:
            self._length -= 1
        return removed

    def __len__(self) -> int:
        return self._length

    def _nodes(self) -> Iterator[_Node[T]]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def is_balanced(self) -> bool:
        """Return True if every node's subtrees differ in height by at most one."""
        return all(-1 <= node.balance_factor <= 1 for node in self._nodes())