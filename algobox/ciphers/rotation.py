"""Letter-rotation ciphers: Caesar and ROT13."""

from __future__ import annotations

import string

_ROT13_TABLE = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    "NOPQRSTUVWXYZABCDEFGHIJKLM" "nopqrstuvwxyzabcdefghijklm",
)


def another_rot13(text: str) -> str:
    """Apply ROT13 to ASCII letters, keeping their case; other characters pass through."""
    return text.translate(_ROT13_TABLE)


def caesar(cipher: str, shift: int) -> str:
    """Rotate every ASCII letter by ``shift`` places, keeping its case."""

    def rotate(c: str) -> str:
        if c in string.ascii_lowercase:
            first = ord("a")
        elif c in string.ascii_uppercase:
            first = ord("A")
        else:
            return c
        return chr(first + (ord(c) - first + shift) % 26)

    return "".join(rotate(c) for c in cipher)


def rot13(text: str) -> str:
    """Upper-case the text, then apply ROT13 to the letters A to Z."""
    return text.upper().translate(_ROT13_TABLE)