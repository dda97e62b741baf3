"""Planar points, lines and segment predicates."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _sign(value: float) -> int:
    if value == 0:
        return 0
    return 1 if value > 0 else -1


@dataclass(frozen=True, order=True)
class Point:
    """A point or vector in the plane; ordered by ``x`` then ``y``."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def square_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        return self.x * other.y - self.y * other.x

    def angle(self, other: Point) -> float:
        """Signed angle from this vector to ``other``, in ``(-pi, pi]``."""
        return math.atan2(self.cross(other), self.dot(other))

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)


@dataclass(frozen=True)
class Line:
    """The line ``a*x + b*y + c = 0``."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0

    def eval(self, p: Point) -> float:
        return self.a * p.x + self.b * p.y + self.c


def dist(a: Point, b: Point) -> float:
    return (b - a).length()


def square_dist(a: Point, b: Point) -> float:
    return (b - a).square_length()


def orientation(a: Point, b: Point) -> int:
    """Sign of the cross product ``a x b``."""
    return _sign(a.cross(b))


def ccw(p: Point, a: Point, b: Point) -> int:
    """1 if ``p, a, b`` turn counter-clockwise, -1 if clockwise, 0 if collinear."""
    return _sign((a - p).cross(b - p))


def line_side(line: Line, point: Point) -> int:
    """Sign of the cross product of the line's direction with ``point``."""
    return _sign(Point(-line.b, line.a).cross(point))


def _line_with_normal(normal: Point, through: Point) -> Line:
    if normal.x < 0:
        normal = -normal
    return Line(normal.x, normal.y, -(normal.x * through.x + normal.y * through.y))


def line_through(a: Point, b: Point) -> Line:
    """Line through two points, normalised so that its ``a`` is non-negative."""
    direction = b - a
    return _line_with_normal(Point(-direction.y, direction.x), a)


def perpendicular_line(point: Point, line: Line) -> Line:
    """Line through ``point`` perpendicular to ``line``."""
    return _line_with_normal(Point(-line.b, line.a), point)


def on_segment(a: Point, b: Point, c: Point) -> bool:
    """Whether ``a`` lies in the bounding box of segment ``bc``."""
    return min(b.x, c.x) <= a.x <= max(b.x, c.x) and min(b.y, c.y) <= a.y <= max(b.y, c.y)


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Whether the closed segments ``ab`` and ``cd`` share a point."""
    o1 = orientation(b - a, c - a)
    o2 = orientation(b - a, d - a)
    o3 = orientation(d - c, a - c)
    o4 = orientation(d - c, b - c)
    if o1 != o2 and o3 != o4:
        return True
    return (
        (o1 == 0 and on_segment(c, a, b))
        or (o2 == 0 and on_segment(d, a, b))
        or (o3 == 0 and on_segment(a, c, d))
        or (o4 == 0 and on_segment(b, c, d))
    )


def distance_to_line(point: Point, line: Line) -> float:
    return abs(line.eval(point)) / math.hypot(line.a, line.b)


def obtuse(a: Point, b: Point, c: Point) -> bool:
    """Whether the angle at ``b`` in triangle ``abc`` is obtuse."""
    return (b - a).square_length() + (b - c).square_length() < (c - a).square_length()


def distance_to_segment(point: Point, a: Point, b: Point) -> float:
    if a == b:
        return dist(point, a)
    if obtuse(point, a, b) or obtuse(point, b, a):
        return min(dist(point, a), dist(point, b))
    return distance_to_line(point, line_through(a, b))


def segment_distance(a: Point, b: Point, c: Point, d: Point) -> float:
    """Smallest endpoint-to-segment distance between segments ``ab`` and ``cd``."""
    return min(
        distance_to_segment(a, c, d),
        distance_to_segment(b, c, d),
        distance_to_segment(c, a, b),
        distance_to_segment(d, a, b),
    )