"""Merge step — join two hulls along their upper and lower common tangents.

Both inputs are hulls of point sets separated in lexicographic order: every
point of ``a`` is less than every point of ``b``. Each input is either a
counter-clockwise convex polygon or a collinear path (sorted points read as a
cycle: out to the far end, then the closing edge back).
"""

from __future__ import annotations

import logging

from mergehull.geometry.contour import Contour, ContourBuilder, ContourCirculator
from mergehull.geometry.point import Point, Turn, turn

logger = logging.getLogger(__name__)


def _is_tangent_at(p1: Point, p2: Point, p3: Point) -> bool:
    return turn(p1, p2, p3) != Turn.RIGHT


def find_tangent(retreating: ContourCirculator, advancing: ContourCirculator) -> None:
    """Move both circulators in place until they span a common tangent.

    ``retreating`` steps backwards and ``advancing`` steps forwards while the
    neighbour in their direction of travel lies right of the segment between
    them. Both hulls end up on or left of ``retreating -> advancing``.
    """

    def retreating_ok() -> bool:
        return _is_tangent_at(retreating.point, advancing.point, retreating.prev().point)

    def advancing_ok() -> bool:
        return _is_tangent_at(retreating.point, advancing.point, advancing.next().point)

    while not (retreating_ok() and advancing_ok()):
        while not retreating_ok():
            retreating.decrement()
        while not advancing_ok():
            advancing.increment()


def set_leftmost(current: ContourCirculator) -> None:
    """Advance to the vertex strictly less than both of its neighbours."""
    prev, nxt = current.prev(), current.next()
    if prev == current and current == nxt:
        return

    while not (current.point < prev.point and current.point < nxt.point):
        current.increment()
        prev.increment()
        nxt.increment()


def set_rightmost(current: ContourCirculator) -> None:
    """Advance to the vertex strictly greater than both of its neighbours."""
    prev, nxt = current.prev(), current.next()
    if prev == current and current == nxt:
        return

    while not (current.point > prev.point and current.point > nxt.point):
        current.increment()
        prev.increment()
        nxt.increment()


def is_on_one_line(*contours: Contour) -> bool:
    """True if the concatenated points of all contours lie on a single line.

    Consecutive triples are tested, which covers the whole sequence as long as
    consecutive points are distinct.
    """
    points = [p for contour in contours for p in contour]
    if len(points) <= 2:
        return True
    return all(
        turn(points[i], points[i + 1], points[i + 2]) == Turn.COLLINEAR
        for i in range(len(points) - 2)
    )


def build_oneline_contour(a: Contour, b: Contour) -> Contour:
    """Concatenate two collinear paths, each read once around from its leftmost point."""
    builder = ContourBuilder()
    for contour in (a, b):
        circ = contour.circulator()
        set_leftmost(circ)
        end = circ.prev()
        while circ != end:
            builder.add_point(circ.point)
            circ.increment()
        builder.add_point(end.point)
    return builder.get_result()


def _add_oneline_arc(builder: ContourBuilder, beg: ContourCirculator, end: ContourCirculator) -> None:
    # Out-and-back path: if the end is one step ahead, the arc is the long way round.
    beg = beg.copy()
    step = ContourCirculator.decrement if beg.next() == end else ContourCirculator.increment
    while beg != end:
        builder.add_point(beg.point)
        step(beg)
    builder.add_point(end.point)


def _add_convex_arc(builder: ContourBuilder, beg: ContourCirculator, end: ContourCirculator) -> None:
    beg = beg.copy()
    while beg != end:
        builder.add_point(beg.point)
        beg.increment()
    builder.add_point(end.point)


def add_arc(
    builder: ContourBuilder,
    contour: Contour,
    beg: ContourCirculator,
    end: ContourCirculator,
) -> None:
    """Append the boundary of ``contour`` from ``beg`` to ``end`` inclusive."""
    if is_on_one_line(contour):
        _add_oneline_arc(builder, beg, end)
    else:
        _add_convex_arc(builder, beg, end)


def merge(a: Contour, b: Contour) -> Contour:
    """Merge the hulls of two lexicographically separated point sets."""
    if is_on_one_line(a, b):
        return build_oneline_contour(a, b)

    circ_a = a.circulator()
    circ_b = b.circulator()

    # Lower tangent: a retreats clockwise, b advances counter-clockwise.
    set_rightmost(circ_a)
    set_leftmost(circ_b)
    find_tangent(circ_a, circ_b)
    a_down, b_down = circ_a.copy(), circ_b.copy()

    # Upper tangent: roles swapped.
    set_rightmost(circ_a)
    set_leftmost(circ_b)
    find_tangent(circ_b, circ_a)
    a_up, b_up = circ_a.copy(), circ_b.copy()

    logger.debug(
        "Merged %d+%d vertices: lower tangent %s-%s, upper tangent %s-%s",
        len(a),
        len(b),
        a_down.point,
        b_down.point,
        a_up.point,
        b_up.point,
    )

    builder = ContourBuilder()
    add_arc(builder, a, a_up, a_down)
    add_arc(builder, b, b_down, b_up)
    return builder.get_result()
