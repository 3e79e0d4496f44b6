"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from mergehull.geometry.contour import Contour
from mergehull.geometry.point import Point, Turn, turn


def as_points(points: Iterable[Any] | NDArray[np.float64]) -> list[Point]:
    """Coerce Points, (x, y) pairs or an Nx2 array into a list of Points."""
    if isinstance(points, np.ndarray):
        if points.size == 0:
            return []
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"points must be an Nx2 array, got shape {points.shape}")
        return [Point(x, y) for x, y in points.tolist()]
    return [Point.of(p) for p in points]


def contour_to_array(contour: Contour) -> NDArray[np.float64]:
    """Nx2 array of contour vertices."""
    return contour.to_array()


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over the implicitly closed ring. Positive = CCW, Negative = CW."""
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def winding_direction(points: NDArray[np.float64]) -> int:
    """Return 1 for CCW, -1 for CW, 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def is_collinear(points: Iterable[Point]) -> bool:
    """Every consecutive triple is collinear."""
    pts = list(points)
    return all(
        turn(pts[i], pts[i + 1], pts[i + 2]) == Turn.COLLINEAR for i in range(len(pts) - 2)
    )


def is_convex(contour: Contour) -> bool:
    """No right turn at any three cyclically consecutive vertices."""
    n = len(contour)
    if n < 3:
        return True
    return all(
        turn(contour[i], contour[(i + 1) % n], contour[(i + 2) % n]) != Turn.RIGHT
        for i in range(n)
    )


def contains_point(contour: Contour, point: Point) -> bool:
    """True if ``point`` lies on or inside a counter-clockwise convex contour.

    Checks the point against every directed edge. For a collinear path the
    test degenerates to "on the supporting line".
    """
    n = len(contour)
    if n == 1:
        return contour[0] == point
    return all(turn(contour[i], contour[(i + 1) % n], point) != Turn.RIGHT for i in range(n))
