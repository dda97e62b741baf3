"""Convex hull keeping collinear boundary points, and polygon area."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from cpnotebook.geometry import Point, ccw


def convex_hull(points: Iterable[Point]) -> list[Point]:
    """Counter-clockwise hull from the lowest point, including every boundary point."""
    pts = list(points)
    if not pts:
        return []
    pivot = min(pts, key=lambda p: (p.y, p.x))
    pts.remove(pivot)

    def compare(a: Point, b: Point) -> int:
        turn = ccw(pivot, a, b)
        if turn:
            return -turn
        da, db = (a - pivot).square_length(), (b - pivot).square_length()
        return (da > db) - (da < db)

    ordered = [pivot] + sorted(pts, key=cmp_to_key(compare))

    # Points on the final ray are walked outward-in so they stay on the hull.
    p = len(ordered) - 1
    while p >= 0 and ccw(pivot, ordered[p], ordered[-1]) == 0:
        p -= 1
    ordered[p + 1 :] = ordered[p + 1 :][::-1]

    hull: list[Point] = []
    for point in ordered:
        while len(hull) >= 2 and ccw(hull[-2], hull[-1], point) < 0:
            hull.pop()
        hull.append(point)
    return hull


def polygon_area(points: Iterable[Point]) -> float:
    """Area of a simple polygon given by its vertices in order."""
    pts = list(points)
    if not pts:
        return 0.0
    twice = sum(a.cross(b) for a, b in zip(pts, pts[1:] + pts[:1]))
    return abs(twice) * 0.5