"""Searching a sequence for an item."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional


def binary_search(item: Any, arr: Sequence[Any]) -> Optional[int]:
    """Return the index of ``item`` in the sorted sequence ``arr``, or None."""
    left, right = 0, len(arr)
    while left < right:
        mid = left + (right - left) // 2
        candidate = arr[mid]
        if item < candidate:
            right = mid
        elif item > candidate:
            left = mid + 1
        else:
            return mid
    return None


def binary_search_rec(
    items: Sequence[Any], target: Any, left: int = 0, right: Optional[int] = None
) -> Optional[int]:
    """Recursively search ``items[left:right]`` for ``target``; return its index or None.

    ``right`` defaults to the length of ``items``.
    """
    if right is None:
        right = len(items)
    if left >= right:
        return None
    middle = left + (right - left) // 2
    candidate = items[middle]
    if target < candidate:
        return binary_search_rec(items, target, left, middle)
    if target > candidate:
        return binary_search_rec(items, target, middle + 1, right)
    return middle


def linear_search(item: Any, arr: Sequence[Any]) -> Optional[int]:
    """Return the index of the first element equal to ``item``, or None."""
    return next((i for i, data in enumerate(arr) if data == item), None)