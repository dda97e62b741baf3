import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpnotebook.geometry import (
    Line,
    Point,
    ccw,
    dist,
    distance_to_line,
    distance_to_segment,
    line_side,
    line_through,
    obtuse,
    on_segment,
    orientation,
    perpendicular_line,
    segment_distance,
    segments_intersect,
    square_dist,
)

coords = st.integers(-100, 100)
points = st.builds(Point, coords, coords)


def test_length():
    assert Point(3, 4).length() == 5.0


@given(coords, coords)
def test_square_length_matches_length(x, y):
    p = Point(x, y)
    assert p.square_length() == pytest.approx(p.length() ** 2)
    assert p.square_length() == x * x + y * y


@given(coords, coords, coords, coords)
def test_dot_and_cross_symmetry(ax, ay, bx, by):
    a = Point(ax, ay)
    b = Point(bx, by)
    assert a.dot(b) == b.dot(a)
    assert a.cross(b) == -b.cross(a)
    assert a.dot(b) == ax * bx + ay * by


def test_angle_quarter_turn():
    assert Point(1, 0).angle(Point(0, 1)) == pytest.approx(math.pi / 2)
    assert Point(0, 1).angle(Point(1, 0)) == pytest.approx(-math.pi / 2)


@given(points, points)
def test_arithmetic_round_trip(a, b):
    assert (a + b) - b == a
    assert a + (-a) == Point(0, 0)


def test_ordering_is_lexicographic():
    assert Point(1, 2) < Point(1, 3)
    assert Point(0, 5) < Point(1, 0)
    assert Point(2, 0) > Point(1, 9)


@given(points, points)
def test_distances(a, b):
    assert dist(a, b) == pytest.approx(dist(b, a))
    assert square_dist(a, b) == pytest.approx(dist(a, b) ** 2)


def test_ccw_signs():
    o, e1, e2 = Point(0, 0), Point(1, 0), Point(0, 1)
    assert ccw(o, e1, e2) == 1
    assert ccw(o, e2, e1) == -1
    assert ccw(o, e1, Point(5, 0)) == 0


@given(points, points)
def test_orientation_agrees_with_ccw(a, b):
    assert orientation(a, b) == ccw(Point(0, 0), a, b)


@given(points, points)
def test_line_through_contains_both_points(a, b):
    line = line_through(a, b)
    assert line.eval(a) == 0
    assert line.eval(b) == 0
    assert line.a >= 0


@given(points, points, points)
def test_perpendicular_line(a, b, p):
    line = line_through(a, b)
    perp = perpendicular_line(p, line)
    assert perp.eval(p) == 0
    assert line.a * perp.a + line.b * perp.b == 0


def test_line_side():
    line = line_through(Point(0, 0), Point(1, 0))
    assert line_side(line, Point(0, 1)) == -line_side(line, Point(0, -1))
    assert line_side(line, Point(0, 1)) != 0
    assert line_side(line, Point(5, 0)) == 0


def test_on_segment():
    assert on_segment(Point(1, 1), Point(0, 0), Point(2, 2))
    assert not on_segment(Point(3, 3), Point(0, 0), Point(2, 2))


@pytest.mark.parametrize(
    "a, b, c, d, expected",
    [
        ((0, 0), (2, 2), (0, 2), (2, 0), True),
        ((0, 0), (2, 0), (0, 1), (2, 1), False),
        ((0, 0), (1, 0), (1, 0), (1, 5), True),
        ((0, 0), (3, 0), (2, 0), (5, 0), True),
        ((0, 0), (1, 0), (2, 0), (3, 0), False),
    ],
)
def test_segments_intersect(a, b, c, d, expected):
    assert segments_intersect(Point(*a), Point(*b), Point(*c), Point(*d)) is expected


def test_distance_to_line():
    line = line_through(Point(0, 0), Point(1, 0))
    assert distance_to_line(Point(3, 2), line) == pytest.approx(2.0)
    assert distance_to_line(Point(3, 2), Line(0, 1, 0)) == pytest.approx(2.0)


def test_obtuse():
    assert obtuse(Point(1, 0), Point(0, 0), Point(-1, 1))
    assert not obtuse(Point(1, 0), Point(0, 0), Point(0, 1))


@given(points, points, points)
def test_distance_to_segment_bounds(p, a, b):
    if a == b:
        b = b + Point(1, 0)
    d = distance_to_segment(p, a, b)
    assert d <= min(dist(p, a), dist(p, b)) + 1e-9
    assert d >= distance_to_line(p, line_through(a, b)) - 1e-9


def test_distance_to_segment_beyond_endpoint():
    assert distance_to_segment(Point(5, 0), Point(0, 0), Point(3, 0)) == pytest.approx(2.0)


def test_segment_distance_parallel():
    d = segment_distance(Point(0, 0), Point(4, 0), Point(1, 3), Point(2, 3))
    assert d == pytest.approx(3.0)