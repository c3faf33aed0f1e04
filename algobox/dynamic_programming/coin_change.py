"""Fewest coins that make up an amount."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional


def coin_change(coins: Sequence[int], amount: int) -> Optional[int]:
    """Return the fewest coins from ``coins`` that add up to ``amount``.

    Every denomination may be used any number of times. Returns None if the
    amount cannot be made up.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    best: list[Optional[int]] = [None] * (amount + 1)
    best[0] = 0
    for total in range(amount + 1):
        for coin in coins:
            if coin > total:
                continue
            previous = best[total - coin]
            if previous is None:
                continue
            current = best[total]
            if current is None or previous + 1 < current:
                best[total] = previous + 1
    return best[amount]