"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
from collections.abc import Mapping
from typing import Any, Optional, TypeVar

V = TypeVar("V")
E = TypeVar("E")


def dijkstra(
    graph: Mapping[V, Mapping[V, E]], start: V
) -> dict[V, Optional[tuple[V, E]]]:
    """Shortest distances from ``start`` in a directed graph with non-negative weights.

    ``graph`` maps each vertex to a mapping of its successors and edge weights;
    every vertex must be a key. Returns a dict that maps every reachable vertex
    to ``(predecessor, distance)``; the start maps to None. Raises KeyError if
    ``start`` is not in the graph.
    """
    ans: dict[V, Optional[tuple[V, E]]] = {start: None}
    queue: list[tuple[Any, V, V]] = []

    for new, weight in graph[start].items():
        ans[new] = (start, weight)
        heapq.heappush(queue, (weight, new, start))

    while queue:
        dist_new, new, prev = heapq.heappop(queue)
        if ans[new] != (prev, dist_new):
            continue
        for nxt, weight in graph[new].items():
            if nxt in ans:
                entry = ans[nxt]
                if entry is None or dist_new + weight >= entry[1]:
                    continue
            ans[nxt] = (new, weight + dist_new)
            heapq.heappush(queue, (weight + dist_new, nxt, new))

    return ans