"""Longest palindromic substring with Manacher's algorithm."""

from __future__ import annotations

_GAP = "#"


def manacher(s: str) -> str:
    """Return the longest palindromic substring of ``s``.

    Among palindromes of equal length, the one with the rightmost centre wins.
    """
    if len(s) <= 1:
        return s

    chars = [_GAP]
    for c in s:
        chars.extend((c, _GAP))
    n = len(chars)

    lengths = [1] * n
    center = 0
    right = 0

    for i in range(n):
        if right > i > center:
            lengths[i] = min(right - i, lengths[2 * center - i])
            if lengths[i] + i >= right:
                center = i
                right = lengths[i] + i
                if right >= n - 1:
                    break
            else:
                continue

        radius = (lengths[i] - 1) // 2 + 1
        while i >= radius and i + radius <= n - 1 and chars[i - radius] == chars[i + radius]:
            lengths[i] += 2
            radius += 1

    best = max(reversed(range(n)), key=lengths.__getitem__)
    half = (lengths[best] - 1) // 2
    return "".join(chars[best - half : best + half + 1]).replace(_GAP, "")