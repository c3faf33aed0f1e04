"""Minimum spanning trees with Prim's algorithm."""

from __future__ import annotations

import heapq
from collections.abc import Mapping
from typing import Any, TypeVar

V = TypeVar("V")
E = TypeVar("E")


def _add_edge(graph: dict[V, dict[V, E]], v1: V, v2: V, cost: E) -> None:
    graph.setdefault(v1, {})[v2] = cost
    graph.setdefault(v2, {})[v1] = cost


def prim(graph: Mapping[V, Mapping[V, E]]) -> dict[V, dict[V, E]]:
    """Minimum spanning tree grown from the smallest vertex; empty for an empty graph."""
    if not graph:
        return {}
    return prim_with_start(graph, min(graph))


def prim_with_start(
    graph: Mapping[V, Mapping[V, E]], start: V
) -> dict[V, dict[V, E]]:
    """Minimum spanning tree of the component of an undirected graph holding ``start``.

    The graph and the result map each vertex to its neighbours and edge costs,
    with every edge stored in both directions.
    """
    mst: dict[V, dict[V, E]] = {start: {}}
    queue: list[tuple[Any, V, V]] = [(cost, v, start) for v, cost in graph[start].items()]
    heapq.heapify(queue)

    while queue:
        cost, target, prev = heapq.heappop(queue)
        if target in mst:
            continue
        _add_edge(mst, prev, target, cost)
        for v, c in graph[target].items():
            if v not in mst:
                heapq.heappush(queue, (c, v, target))

    return mst