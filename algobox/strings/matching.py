"""Substring search: Knuth-Morris-Pratt and Rabin-Karp.

Both work on the UTF-8 bytes of their arguments and report byte offsets.
"""

from __future__ import annotations

_PRIME = 101


def knuth_morris_pratt(text: str, pattern: str) -> list[int]:
    """Return the byte offsets in ``text`` where ``pattern`` starts, overlaps included."""
    if not text or not pattern:
        return []
    haystack = text.encode()
    needle = pattern.encode()

    partial = [0]
    for i in range(1, len(needle)):
        j = partial[i - 1]
        while j > 0 and needle[j] != needle[i]:
            j = partial[j - 1]
        partial.append(j + 1 if needle[j] == needle[i] else j)

    found = []
    j = 0
    for i, c in enumerate(haystack):
        while j > 0 and c != needle[j]:
            j = partial[j - 1]
        if c == needle[j]:
            j += 1
        if j == len(needle):
            found.append(i + 1 - j)
            j = partial[j - 1]
    return found


def _hash_bytes(data: bytes) -> int:
    if not data:
        raise ValueError("cannot hash an empty string")
    *body, last = data
    res = 0
    for i, c in enumerate(body):
        if i == 0:
            res = (c * 256) % _PRIME
        else:
            res = (((res + c) % _PRIME) * 256) % _PRIME
    return (res + last) % _PRIME


def rolling_hash(s: str) -> int:
    """Return the modulo-101 hash used by :func:`rabin_karp` for ``s``.

    Raises ValueError for an empty string.
    """
    return _hash_bytes(s.encode())


def rabin_karp(target: str, pattern: str) -> list[int]:
    """Return the byte offsets in ``target`` where ``pattern`` starts, overlaps included."""
    haystack = target.encode()
    needle = pattern.encode()
    if not haystack or not needle or len(needle) > len(haystack):
        return []
    pattern_hash = _hash_bytes(needle)
    width = len(needle)
    found = []
    for i in range(len(haystack) - width + 1):
        window = haystack[i : i + width]
        if _hash_bytes(window) == pattern_hash and window == needle:
            found.append(i)
    return found