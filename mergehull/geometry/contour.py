"""Contour — an immutable polygon boundary, its builder and a cyclic cursor.

A contour never changes after construction. All accumulation happens in a
ContourBuilder, which hands its points over to a new Contour.

Usage:
    builder = ContourBuilder()
    builder.add_point(Point(0, 0))
    builder.add_point(Point(1, 0))
    contour = builder.get_result()

    circ = contour.circulator()
    circ.decrement()          # wraps to the last vertex
    circ.point                # Point(x=1, y=0)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from mergehull.geometry.point import Point


class Contour:
    """Ordered, fixed sequence of boundary points."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: tuple[Point, ...] = tuple(points)

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def vertices_num(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Contour):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        inner = ", ".join(f"({p.x}, {p.y})" for p in self._points)
        return f"Contour([{inner}])"

    def circulator(self, index: int = 0) -> ContourCirculator:
        return ContourCirculator(self, index)

    def to_array(self) -> NDArray[np.float64]:
        """Nx2 array of (x, y)."""
        if not self._points:
            return np.empty((0, 2))
        return np.array([(p.x, p.y) for p in self._points], dtype=np.float64)


class ContourBuilder:
    """Accumulates points for a new Contour."""

    def __init__(self) -> None:
        self._points: list[Point] = []

    def add_point(self, point: Point) -> None:
        self._points.append(point)

    def get_result(self) -> Contour:
        """Move the accumulated points into a Contour. The builder is left empty."""
        points, self._points = self._points, []
        return Contour(points)


class ContourCirculator:
    """Cyclic, bidirectional cursor over a contour.

    Holds a reference to the contour and an index; stepping wraps around both
    ends. Two circulators are equal when they point at the same position of
    the same contour object.
    """

    __slots__ = ("contour", "index")

    def __init__(self, contour: Contour, index: int = 0) -> None:
        if len(contour) == 0:
            raise ValueError("Cannot circulate over an empty contour")
        self.contour = contour
        self.index = index % len(contour)

    @property
    def point(self) -> Point:
        return self.contour[self.index]

    def increment(self) -> ContourCirculator:
        self.index = (self.index + 1) % len(self.contour)
        return self

    def decrement(self) -> ContourCirculator:
        self.index = (self.index - 1) % len(self.contour)
        return self

    def next(self) -> ContourCirculator:
        return ContourCirculator(self.contour, self.index + 1)

    def prev(self) -> ContourCirculator:
        return ContourCirculator(self.contour, self.index - 1)

    def copy(self) -> ContourCirculator:
        return ContourCirculator(self.contour, self.index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContourCirculator):
            return NotImplemented
        return self.contour is other.contour and self.index == other.index

    __hash__ = None  # mutable cursor

    def __repr__(self) -> str:
        return f"ContourCirculator(index={self.index}, point={self.point!r})"
