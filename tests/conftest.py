"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from mergehull.geometry.point import Point


# Sample point sets

SQUARE = [Point(0, 0), Point(0, 2), Point(2, 0), Point(2, 2)]

SQUARE_WITH_CENTER = SQUARE + [Point(1, 1)]

COLLINEAR_ROW = [Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0)]

TRIANGLE = [Point(0, 0), Point(1, 1), Point(2, 0)]

# Regular 16-gon of radius 10 with points scattered well inside it
CIRCLE = [
    Point(10 * math.cos(2 * math.pi * k / 16), 10 * math.sin(2 * math.pi * k / 16))
    for k in range(16)
]
CIRCLE_INTERIOR = [
    Point(0.0, 0.0),
    Point(3.5, -1.25),
    Point(-4.0, 2.5),
    Point(1.0, 4.75),
    Point(-2.25, -3.5),
    Point(4.5, 3.0),
]


def rotate_to_min(points) -> list[Point]:
    """Rotate a cyclic sequence so it starts at its smallest point."""
    pts = list(points)
    i = pts.index(min(pts))
    return pts[i:] + pts[:i]


@pytest.fixture
def square() -> list[Point]:
    return list(SQUARE)


@pytest.fixture
def square_with_center() -> list[Point]:
    return list(SQUARE_WITH_CENTER)


@pytest.fixture
def collinear_row() -> list[Point]:
    return list(COLLINEAR_ROW)


@pytest.fixture
def circle_cloud() -> list[Point]:
    return CIRCLE + CIRCLE_INTERIOR
