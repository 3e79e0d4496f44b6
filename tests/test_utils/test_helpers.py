"""Tests for the numpy-facing geometry helpers."""

from __future__ import annotations

import numpy as np
import pytest

from mergehull.geometry.contour import Contour
from mergehull.geometry.point import Point
from mergehull.utils.geometry import (
    as_points,
    contains_point,
    contour_to_array,
    is_collinear,
    is_convex,
    signed_area,
    winding_direction,
)

CCW_SQUARE = Contour([Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)])


def test_as_points_from_pairs():
    assert as_points([(0, 1), [2, 3]]) == [Point(0, 1), Point(2, 3)]


def test_as_points_from_array():
    pts = as_points(np.array([[0, 1], [2, 3]]))
    assert pts == [Point(0, 1), Point(2, 3)]


def test_as_points_rejects_bad_shape():
    with pytest.raises(ValueError):
        as_points(np.zeros((3, 3)))


def test_contour_to_array_round_trip():
    arr = contour_to_array(CCW_SQUARE)
    assert arr.shape == (4, 2)
    assert as_points(arr) == list(CCW_SQUARE)


def test_signed_area_and_winding():
    arr = CCW_SQUARE.to_array()
    assert signed_area(arr) == pytest.approx(4.0)
    assert winding_direction(arr) == 1
    assert signed_area(arr[::-1]) == pytest.approx(-4.0)
    assert winding_direction(arr[::-1]) == -1
    assert winding_direction(np.array([[0.0, 0.0], [1.0, 1.0]])) == 0


def test_is_collinear():
    assert is_collinear([Point(0, 0), Point(1, 2), Point(2, 4)])
    assert is_collinear([Point(0, 0), Point(5, 5)])
    assert not is_collinear([Point(0, 0), Point(1, 0), Point(1, 1)])


def test_is_convex():
    assert is_convex(CCW_SQUARE)
    dented = Contour([Point(0, 0), Point(2, 0), Point(1, 1), Point(2, 2), Point(0, 2)])
    assert not is_convex(dented)


def test_contains_point():
    assert contains_point(CCW_SQUARE, Point(1, 1))
    assert contains_point(CCW_SQUARE, Point(2, 1))  # on an edge
    assert contains_point(CCW_SQUARE, Point(0, 0))  # a vertex
    assert not contains_point(CCW_SQUARE, Point(3, 1))


def test_contains_point_single_vertex():
    single = Contour([Point(1, 1)])
    assert contains_point(single, Point(1, 1))
    assert not contains_point(single, Point(1, 2))
