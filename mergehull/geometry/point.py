"""Point, displacement vector and the orientation predicate. No engine imports."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Vector:
    """Displacement between two points."""

    dx: float
    dy: float

    def cross(self, other: Vector) -> float:
        """2D cross product. Only the sign is meaningful to callers."""
        return self.dx * other.dy - self.dy * other.dx


@dataclass(frozen=True, order=True)
class Point:
    """Immutable 2D point, ordered lexicographically by (x, y)."""

    x: float
    y: float

    def __sub__(self, other: Point) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __iter__(self):
        yield self.x
        yield self.y

    @classmethod
    def of(cls, obj: Any) -> Point:
        """Coerce a Point, an (x, y) pair or a numpy row into a Point."""
        if isinstance(obj, Point):
            return obj
        x, y = obj
        # unwrap numpy scalars
        return cls(x.item() if hasattr(x, "item") else x, y.item() if hasattr(y, "item") else y)


class Turn(enum.IntEnum):
    COLLINEAR = 0
    LEFT = 1
    RIGHT = 2


def _sign(value: float) -> int:
    if value == 0:
        return 0
    return -1 if value < 0 else 1


def turn(a: Point, b: Point, c: Point) -> Turn:
    """Where ``c`` lies relative to the directed line ``a -> b``.

    Uses the exact sign of the cross product; there is no epsilon, so integer
    and exactly representable coordinates give exact answers.
    """
    sign = _sign((b - a).cross(c - a))
    if sign < 0:
        return Turn.RIGHT
    if sign > 0:
        return Turn.LEFT
    return Turn.COLLINEAR
