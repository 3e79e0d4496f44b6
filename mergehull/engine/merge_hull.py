"""Divide driver — sort, split in half, hull each half, merge.

Usage:
    from mergehull.engine import merge_hull

    hull = merge_hull([(0, 0), (2, 0), (2, 2), (0, 2), (1, 1)])
    list(hull)  # counter-clockwise corners, (1, 1) dropped
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Union

from mergehull.engine.config import HullConfig
from mergehull.engine.merge import merge
from mergehull.geometry.contour import Contour, ContourBuilder
from mergehull.geometry.point import Point
from mergehull.utils.geometry import as_points

logger = logging.getLogger(__name__)

_Scheduled = Union[Future, tuple]


class InsufficientPointsError(ValueError):
    """Raised when fewer than two points are given to merge_hull."""


def merge_hull(points: Iterable[Any], config: HullConfig | None = None) -> Contour:
    """Convex hull of ``points`` as a counter-clockwise contour.

    Accepts Points, (x, y) pairs or an Nx2 array. Two points come back sorted
    as given, even if they coincide. Larger inputs have coincident points
    collapsed before the recursion. If every point lies on one line the result
    is the sorted points read as a there-and-back path.
    """
    pts = as_points(points)
    if len(pts) < 2:
        raise InsufficientPointsError(
            f"not enough points to build convex hull: need at least 2, got {len(pts)}"
        )
    config = config or HullConfig()

    # The locators need distinct points once a merge happens.
    pts = sorted(pts) if len(pts) == 2 else sorted(set(pts))

    if config.parallel and len(pts) >= max(config.parallel_threshold, 3):
        with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            hull = _collect(_schedule(pts, executor, config.parallel_threshold))
    else:
        hull = _merge_hull_impl(pts, 0, len(pts))

    logger.debug("Hull of %d points has %d vertices", len(pts), len(hull))
    return hull


def _merge_hull_impl(pts: Sequence[Point], beg: int, end: int) -> Contour:
    distance = end - beg
    if distance <= 2:
        builder = ContourBuilder()
        for i in range(beg, end):
            builder.add_point(pts[i])
        return builder.get_result()

    middle = beg + distance // 2
    left_contour = _merge_hull_impl(pts, beg, middle)
    right_contour = _merge_hull_impl(pts, middle, end)
    return merge(left_contour, right_contour)


def _schedule(pts: Sequence[Point], executor: ThreadPoolExecutor, threshold: int) -> _Scheduled:
    """Split like _merge_hull_impl, handing sub-ranges below threshold to workers."""
    if len(pts) < threshold or len(pts) <= 2:
        return executor.submit(_merge_hull_impl, pts, 0, len(pts))
    middle = len(pts) // 2
    return (
        _schedule(pts[:middle], executor, threshold),
        _schedule(pts[middle:], executor, threshold),
    )


def _collect(node: _Scheduled) -> Contour:
    if isinstance(node, tuple):
        left, right = node
        return merge(_collect(left), _collect(right))
    return node.result()
