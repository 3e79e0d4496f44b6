"""Geometry primitives for the merge hull engine."""

from mergehull.geometry.contour import Contour, ContourBuilder, ContourCirculator
from mergehull.geometry.point import Point, Turn, Vector, turn

__all__ = [
    "Contour",
    "ContourBuilder",
    "ContourCirculator",
    "Point",
    "Turn",
    "Vector",
    "turn",
]
