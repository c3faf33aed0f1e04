"""The Vigenère cipher."""

from __future__ import annotations

import string
from itertools import cycle


def vigenere(plain_text: str, key: str) -> str:
    """Rotate each ASCII letter by the next letter of ``key``, keeping its case.

    Only ASCII letters of the key count, and they are read case-blind. Other
    characters of the text pass through and do not use up a key letter. With
    no usable key letters the text comes back unchanged.
    """
    letters = [c.lower() for c in key if c in string.ascii_letters]
    if not letters:
        return plain_text
    shifts = cycle(ord(c) - ord("a") for c in letters)

    def rotate(c: str) -> str:
        if c in string.ascii_lowercase:
            first = ord("a")
        elif c in string.ascii_uppercase:
            first = ord("A")
        else:
            return c
        return chr(first + (ord(c) - first + next(shifts)) % 26)

    return "".join(rotate(c) for c in plain_text)