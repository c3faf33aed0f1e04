"""Longest common subsequence and longest increasing run."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

S = TypeVar("S", bound=Sequence[Any])


def longest_common_subsequence(a: str, b: str) -> str:
    """Return a longest common subsequence of the strings ``a`` and ``b``."""
    lengths = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, ca in enumerate(a):
        for j, cb in enumerate(b):
            if ca == cb:
                lengths[i + 1][j + 1] = lengths[i][j] + 1
            else:
                lengths[i + 1][j + 1] = max(lengths[i][j + 1], lengths[i + 1][j])

    result = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif lengths[i - 1][j] > lengths[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(result))


def longest_continuous_increasing_subsequence(items: S) -> S:
    """Return the longest strictly increasing contiguous slice of ``items``.

    The earliest such slice wins a tie.
    """
    n = len(items)
    if n <= 1:
        return items[:]
    runs = [1] * n
    for i in range(n - 2, -1, -1):
        if items[i] < items[i + 1]:
            runs[i] = runs[i + 1] + 1
    start = max(range(n), key=runs.__getitem__)
    return items[start : start + runs[start]]