"""The 0/1 knapsack problem."""

from __future__ import annotations

from collections.abc import Sequence


def _table(capacity: int, weights: Sequence[int], values: Sequence[int]) -> list[list[int]]:
    """Row i, column j: best value with items 1..i and capacity j."""
    table = [[0] * (capacity + 1)]
    for weight, value in zip(weights, values):
        above = table[-1]
        row = [0] * (capacity + 1)
        for j in range(1, capacity + 1):
            if weight <= j:
                row[j] = max(value + above[j - weight], above[j])
            else:
                row[j] = above[j]
        table.append(row)
    return table


def _chosen(weights: Sequence[int], table: list[list[int]], capacity: int) -> list[int]:
    items = []
    j = capacity
    for i in range(len(weights), 0, -1):
        if table[i][j] > table[i - 1][j]:
            items.append(i)
            j -= weights[i - 1]
    items.reverse()
    return items


def knapsack(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> tuple[int, int, list[int]]:
    """Solve the 0/1 knapsack problem.

    Returns ``(best value, total weight, item numbers)``, where the item numbers
    count from 1 in ascending order. Raises ValueError if ``weights`` and
    ``values`` differ in length.
    """
    if len(weights) != len(values):
        raise ValueError(
            "Number of items in the list of weights doesn't match "
            "the number of items in the list of values!"
        )
    table = _table(capacity, weights, values)
    items = _chosen(weights, table, capacity)
    total_weight = sum(weights[i - 1] for i in items)
    return table[len(weights)][capacity], total_weight, items