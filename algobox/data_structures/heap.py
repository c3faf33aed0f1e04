"""A binary heap ordered by a comparison function."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Heap(Generic[T]):
    """A binary heap; ``comparator(a, b)`` is True when ``a`` should come out before ``b``.

    The heap is its own iterator: iterating pops values in heap order.
    """

    def __init__(self, comparator: Callable[[T, T], bool]) -> None:
        self._comparator = comparator
        self._items: list[T] = []

    # Positions below are 1-based: the parent of k is k // 2.
    def _before(self, i: int, j: int) -> bool:
        return self._comparator(self._items[i - 1], self._items[j - 1])

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i - 1], items[j - 1] = items[j - 1], items[i - 1]

    def _smallest_child(self, idx: int) -> int:
        left = 2 * idx
        right = left + 1
        if right > len(self._items):
            return left
        return left if self._before(left, right) else right

    def add(self, value: T) -> None:
        """Push ``value`` onto the heap."""
        self._items.append(value)
        idx = len(self._items)
        while idx // 2 > 0:
            parent = idx // 2
            if self._before(idx, parent):
                self._swap(idx, parent)
            idx = parent

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._items:
            raise StopIteration
        last = self._items.pop()
        if not self._items:
            return last
        top = self._items[0]
        self._items[0] = last
        idx = 1
        while 2 * idx <= len(self._items):
            child = self._smallest_child(idx)
            if not self._before(idx, child):
                self._swap(idx, child)
            idx = child
        return top


class MinHeap(Heap[T]):
    """A heap that yields its smallest value first."""

    def __init__(self) -> None:
        super().__init__(operator.lt)


class MaxHeap(Heap[T]):
    """A heap that yields its largest value first."""

    def __init__(self) -> None:
        super().__init__(operator.gt)