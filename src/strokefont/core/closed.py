"""Outlines for closed strokes.

A closed stroke is normally a filled shape: its path (closing segment
included) is flattened and becomes one contour, and the stroke thickness is
ignored. Ring mode instead outlines the path with the stroke thickness, like
a letter O drawn with a pen.
"""

from collections.abc import Sequence

from strokefont.core.geometry import (
    dedupe_points,
    flatten_anchor_path,
    signed_area,
    simplify_closed,
)
from strokefont.core.offset import offset_polyline
from strokefont.domain import AnchorPoint, Contour, Point

# Inner contour only when the shape is wider than this many half-widths
RING_HOLE_FACTOR = 2.5


def _close_ring(points: Sequence[Point], epsilon: float, dedup_tolerance: float) -> list[Point]:
    ring = dedupe_points(points, dedup_tolerance, closed=True)
    if len(ring) < 3:
        return []
    if epsilon > 0:
        ring = simplify_closed(ring, epsilon)
    return ring if len(ring) >= 3 else []


def _oriented(points: list[Point], positive: bool) -> list[Point]:
    """Return points wound with the requested signed-area sign."""
    if (signed_area(points) > 0) != positive:
        return points[::-1]
    return points


def flatten_closed_stroke(
    anchors: Sequence[AnchorPoint],
    tolerance: float,
    epsilon: float,
    dedup_tolerance: float = 0.0,
    max_depth: int = 16,
) -> Contour | None:
    """Flatten a closed anchor path into a single fill contour.

    Args:
        anchors: Anchors of the path, already in the target space
        tolerance: Bezier flattening tolerance
        epsilon: Douglas-Peucker epsilon for the ring (0 disables)
        dedup_tolerance: Distance under which consecutive points merge
        max_depth: Maximum subdivision depth per segment

    Returns:
        The contour, or None when fewer than 3 distinct points remain
    """
    if len(anchors) < 2:
        return None

    polyline = flatten_anchor_path(anchors, closed=True, tolerance=tolerance, max_depth=max_depth)
    ring = _close_ring(polyline, epsilon, dedup_tolerance)
    if not ring:
        return None
    return Contour(points=ring)


def build_ring(
    anchors: Sequence[AnchorPoint],
    half_width: float,
    tolerance: float,
    epsilon: float,
    dedup_tolerance: float = 0.0,
    miter_limit: float = 2.0,
    max_depth: int = 16,
) -> list[Contour]:
    """Outline a closed path as a ring of the given half width.

    The outer boundary is wound like an open-stroke ribbon (positive signed
    area in Y-down space). The inner boundary is wound the other way so it
    cuts a hole, and is only emitted when the shape's smaller bounding
    dimension exceeds RING_HOLE_FACTOR half-widths. Narrower shapes come out
    solid.

    Returns:
        [outer] or [outer, inner]; empty when the path is unusable
    """
    if len(anchors) < 2 or half_width <= 0:
        return []

    polyline = flatten_anchor_path(anchors, closed=True, tolerance=tolerance, max_depth=max_depth)
    centerline = dedupe_points(polyline, max(dedup_tolerance, 1e-12), closed=True)
    if len(centerline) < 3:
        return []

    left, right = offset_polyline(centerline, half_width, closed=True, miter_limit=miter_limit)
    if abs(signed_area(left)) >= abs(signed_area(right)):
        outer_points, inner_points = left, right
    else:
        outer_points, inner_points = right, left

    outer = _close_ring(outer_points, epsilon, dedup_tolerance)
    if not outer:
        return []
    contours = [Contour(points=_oriented(outer, positive=True))]

    box = Contour(points=centerline).bounding_box()
    if min(box[2] - box[0], box[3] - box[1]) > RING_HOLE_FACTOR * half_width:
        inner = _close_ring(inner_points, epsilon, dedup_tolerance)
        if inner:
            contours.append(Contour(points=_oriented(inner, positive=False)))

    return contours
