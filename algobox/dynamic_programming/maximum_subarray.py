"""Largest sum of a contiguous subarray."""

from __future__ import annotations

from collections.abc import Sequence


def maximum_subarray(array: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``array``.

    Raises ValueError if ``array`` is empty.
    """
    if not array:
        raise ValueError("maximum_subarray needs at least one element")
    current = best = array[0]
    for value in array[1:]:
        current = current + value if current > 0 else value
        best = max(best, current)
    return best