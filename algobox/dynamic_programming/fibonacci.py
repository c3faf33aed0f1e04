"""Fibonacci numbers, with F(0) = F(1) = 1."""

from __future__ import annotations


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, where F(0) = F(1) = 1, iteratively."""
    _check(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return b


def _recursive(n: int, previous: int, current: int) -> int:
    if n == 0:
        return current
    return _recursive(n - 1, current, current + previous)


def recursive_fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, where F(0) = F(1) = 1, recursively."""
    _check(n)
    return _recursive(n, 0, 1)