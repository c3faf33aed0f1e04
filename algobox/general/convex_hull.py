"""Convex hull of points in the plane with the Graham scan."""

from __future__ import annotations

import math
from collections.abc import Iterable

Point = tuple[float, float]


def _sort_by_min_angle(points: list[Point], origin: Point) -> list[Point]:
    ox, oy = origin

    def key(p: Point) -> tuple[float, float, Point]:
        dx, dy = p[0] - ox, p[1] - oy
        return (math.atan2(dy, dx), math.hypot(dy, dx), p)

    return sorted(points, key=key)


def _cross(a: Point, b: Point, c: Point) -> float:
    """Z coordinate of the cross product of vectors ab and ac."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1])


def convex_hull_graham(points: Iterable[Point]) -> list[Point]:
    """Return the convex hull of ``points``, counter-clockwise.

    The hull starts at the point with the lowest y (then lowest x). Collinear
    points on the hull are kept, the nearest first. With three or fewer points
    they are all returned, sorted by angle.
    """
    pts = [(x, y) for x, y in points]
    if not pts:
        return []
    origin = min(pts, key=lambda p: (p[1], p[0]))
    ordered = _sort_by_min_angle(pts, origin)
    if len(ordered) <= 3:
        return ordered

    stack: list[Point] = []
    for point in ordered:
        while len(stack) > 1 and _cross(stack[-2], stack[-1], point) < 0.0:
            stack.pop()
        stack.append(point)
    return stack