"""Single-source shortest paths with the Bellman-Ford algorithm."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, TypeVar

V = TypeVar("V")
E = TypeVar("E")

Graph = Mapping[V, Mapping[V, E]]

_MISSING: Any = object()


def bellman_ford(
    graph: Mapping[V, Mapping[V, E]], start: V
) -> Optional[dict[V, Optional[tuple[V, E]]]]:
    """Shortest distances from ``start`` in a directed, weighted graph.

    ``graph`` maps each vertex to a mapping of its successors and edge weights.
    Returns None if a negative cycle is found. Otherwise returns a dict that
    maps every reachable vertex to ``(predecessor, distance)``. The start has
    no predecessor and maps to None.
    """
    ans: dict[V, Optional[tuple[V, E]]] = {start: None}
    order = sorted(graph)

    for _ in range(1, len(graph)):
        for u in order:
            if u not in ans:
                continue
            entry_u = ans[u]
            dist_u = entry_u[1] if entry_u is not None else None
            edges = graph[u]
            for v in sorted(edges):
                d = edges[v]
                if v in ans:
                    entry_v = ans[v]
                    if entry_v is None:
                        # v is the start: a short way back means a negative loop
                        if dist_u is not None and dist_u >= -d:
                            continue
                        if d > d + d:
                            return None
                        continue
                    dist_v = entry_v[1]
                    longer = (dist_u + d >= dist_v) if dist_u is not None else (d >= dist_v)
                    if longer:
                        continue
                ans[v] = (u, dist_u + d if dist_u is not None else d)

    for u in order:
        edges = graph[u]
        for v in sorted(edges):
            d = edges[v]
            entry_u = ans.get(u, _MISSING)
            entry_v = ans.get(v, _MISSING)
            if entry_u is _MISSING or entry_v is _MISSING:
                continue
            if entry_u is None and entry_v is None:
                if d > d + d:
                    return None
            elif entry_u is None:
                if d < entry_v[1]:
                    return None
            elif entry_v is None:
                if entry_u[1] < -d:
                    return None
            elif entry_u[1] + d < entry_v[1]:
                return None

    return ans