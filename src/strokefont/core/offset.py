"""Offset-contour builder for open (centerline) strokes.

An open stroke is a centerline polyline plus a thickness. Its filled outline
is a ribbon: the centerline offset by half the thickness to both sides,
joined by caps at the two ends.

Coordinates here are in a Y-down space (editor or em space). The normal of a
segment direction (dx, dy) is (dy, -dx), the visual left side. With that
choice every ribbon has positive signed area in Y-down space regardless of
the direction the stroke was drawn in, which becomes clockwise winding once
the Y axis is flipped into font space.

Join policy: interior vertices are offset along the bisector of the two
adjacent segment normals, scaled by 1 / cos(half turn) so straight-edged
corners keep their width, and capped at miter_limit half-widths. With
miter_limit=1.0 every rail point lies exactly half the thickness from the
centerline.
"""

import math
from collections.abc import Sequence

from strokefont.core.geometry import (
    dedupe_points,
    douglas_peucker,
    flatten_anchor_path,
    unit_direction,
)
from strokefont.domain import AnchorPoint, Contour, Linecap, Point

# Below this bisector length the two normals cancel out (a hairpin turn)
_HAIRPIN_EPSILON = 1e-9
# Floor for deduplication so zero-length segments never reach unit_direction
_MIN_DEDUP = 1e-12


def _normal(direction: tuple[float, float]) -> tuple[float, float]:
    dx, dy = direction
    return dy, -dx


def _shift(point: Point, vector: tuple[float, float], amount: float) -> Point:
    return Point(point.x + vector[0] * amount, point.y + vector[1] * amount)


def segment_directions(points: Sequence[Point], closed: bool = False) -> list[tuple[float, float]]:
    """Unit directions of consecutive segments.

    Points must already be deduplicated. A closed polyline also yields the
    direction of the segment from the last point back to the first.
    """
    n = len(points)
    count = n if closed else n - 1
    directions: list[tuple[float, float]] = []
    for i in range(count):
        direction = unit_direction(points[i], points[(i + 1) % n])
        if direction is None:
            raise ValueError("Zero-length segment in deduplicated polyline")
        directions.append(direction)
    return directions


def _join_offset(
    incoming: tuple[float, float],
    outgoing: tuple[float, float],
    miter_limit: float,
) -> tuple[tuple[float, float], float]:
    """Offset direction and scale for an interior vertex.

    Returns:
        (unit offset direction, scale in half-widths)
    """
    n0 = _normal(incoming)
    n1 = _normal(outgoing)
    mx = n0[0] + n1[0]
    my = n0[1] + n1[1]
    length = math.hypot(mx, my)

    if length < _HAIRPIN_EPSILON:
        return n0, 1.0

    # |n0 + n1| = 2 cos(half turn), so 1 / cos(half turn) = 2 / length
    return (mx / length, my / length), min(2.0 / length, miter_limit)


def offset_polyline(
    points: Sequence[Point],
    half_width: float,
    closed: bool = False,
    miter_limit: float = 2.0,
) -> tuple[list[Point], list[Point]]:
    """Offset a deduplicated polyline to both sides.

    Args:
        points: Polyline with at least 2 distinct consecutive points
        half_width: Offset distance
        closed: Treat the polyline as a ring (every vertex is interior)
        miter_limit: Cap on the interior join scale

    Returns:
        (left rail, right rail), both in centerline order
    """
    directions = segment_directions(points, closed)
    n = len(points)
    left: list[Point] = []
    right: list[Point] = []

    for i, point in enumerate(points):
        if closed:
            offset, scale = _join_offset(directions[i - 1], directions[i], miter_limit)
        elif i == 0:
            offset, scale = _normal(directions[0]), 1.0
        elif i == n - 1:
            offset, scale = _normal(directions[-1]), 1.0
        else:
            offset, scale = _join_offset(directions[i - 1], directions[i], miter_limit)

        left.append(_shift(point, offset, half_width * scale))
        right.append(_shift(point, offset, -half_width * scale))

    return left, right


def _arc(
    center: Point,
    start_normal: tuple[float, float],
    tangent: tuple[float, float],
    radius: float,
    segments: int,
) -> list[Point]:
    """Interior points of a semicircle from center+normal to center-normal.

    The arc bulges along tangent. Its two endpoints are excluded because
    they coincide with the rail ends.
    """
    points = []
    for k in range(1, segments):
        theta = math.pi * k / segments
        c = math.cos(theta)
        s = math.sin(theta)
        points.append(
            Point(
                center.x + radius * (c * start_normal[0] + s * tangent[0]),
                center.y + radius * (c * start_normal[1] + s * tangent[1]),
            )
        )
    return points


def build_dot(center: Point, half_width: float, linecap: Linecap, segments: int = 8) -> Contour | None:
    """Outline of a zero-length open stroke.

    Round caps give a disc of radius half_width, square caps an axis-aligned
    square of side 2 * half_width, butt caps nothing.
    """
    if linecap == Linecap.ROUND:
        steps = 2 * segments
        return Contour(
            points=[
                Point(
                    center.x + half_width * math.cos(2 * math.pi * k / steps),
                    center.y + half_width * math.sin(2 * math.pi * k / steps),
                )
                for k in range(steps)
            ]
        )
    if linecap == Linecap.SQUARE:
        h = half_width
        return Contour(
            points=[
                Point(center.x - h, center.y - h),
                Point(center.x + h, center.y - h),
                Point(center.x + h, center.y + h),
                Point(center.x - h, center.y + h),
            ]
        )
    return None


def build_ribbon(
    centerline: Sequence[Point],
    half_width: float,
    linecap: Linecap,
    simplify_epsilon: float = 0.0,
    dedup_tolerance: float = 0.0,
    round_cap_segments: int = 8,
    miter_limit: float = 2.0,
) -> Contour | None:
    """Build the filled ribbon contour of an open centerline.

    The contour runs: left rail forward, end cap, right rail reversed, start
    cap. Each rail is simplified on its own before the caps are attached, so
    cap geometry is never simplified away.

    Args:
        centerline: Flattened centerline polyline
        half_width: Half of the (weight-scaled) stroke thickness
        linecap: Resolved cap shape
        simplify_epsilon: Douglas-Peucker epsilon for the rails (0 disables)
        dedup_tolerance: Distance under which consecutive points merge
        round_cap_segments: Pieces per round cap semicircle
        miter_limit: Cap on the interior join scale

    Returns:
        The ribbon contour, or None when the stroke yields no geometry
    """
    if not (math.isfinite(half_width) and half_width > 0):
        return None

    points = dedupe_points(centerline, max(dedup_tolerance, _MIN_DEDUP))
    if not points:
        return None
    if len(points) < 2:
        return build_dot(points[0], half_width, linecap, round_cap_segments)

    left, right = offset_polyline(points, half_width, closed=False, miter_limit=miter_limit)

    if simplify_epsilon > 0:
        left = douglas_peucker(left, simplify_epsilon)
        right = douglas_peucker(right, simplify_epsilon)

    start_dir = segment_directions(points[:2])[0]
    end_dir = segment_directions(points[-2:])[0]
    back = (-start_dir[0], -start_dir[1])

    end_cap: list[Point] = []
    start_cap: list[Point] = []

    if linecap == Linecap.SQUARE:
        left[-1] = _shift(left[-1], end_dir, half_width)
        right[-1] = _shift(right[-1], end_dir, half_width)
        left[0] = _shift(left[0], back, half_width)
        right[0] = _shift(right[0], back, half_width)
    elif linecap == Linecap.ROUND:
        end_cap = _arc(points[-1], _normal(end_dir), end_dir, half_width, round_cap_segments)
        start_normal = _normal(start_dir)
        start_cap = _arc(
            points[0],
            (-start_normal[0], -start_normal[1]),
            back,
            half_width,
            round_cap_segments,
        )

    contour_points = [*left, *end_cap, *reversed(right), *start_cap]
    if len(contour_points) < 3:
        return None
    return Contour(points=contour_points)


def outline_open_stroke(
    anchors: Sequence[AnchorPoint],
    half_width: float,
    linecap: Linecap,
    flatten_tolerance: float,
    simplify_epsilon: float = 0.0,
    dedup_tolerance: float = 0.0,
    round_cap_segments: int = 8,
    miter_limit: float = 2.0,
    max_depth: int = 16,
) -> Contour | None:
    """Flatten an open anchor path and build its ribbon.

    Args:
        anchors: Anchors of the centerline, already in the target space
        half_width: Half of the (weight-scaled) stroke thickness
        linecap: Resolved cap shape
        flatten_tolerance: Bezier flattening tolerance

    Returns:
        The ribbon contour, or None when the stroke yields no geometry
    """
    if len(anchors) < 2:
        return None
    centerline = flatten_anchor_path(anchors, closed=False, tolerance=flatten_tolerance, max_depth=max_depth)
    return build_ribbon(
        centerline,
        half_width,
        linecap,
        simplify_epsilon=simplify_epsilon,
        dedup_tolerance=dedup_tolerance,
        round_cap_segments=round_cap_segments,
        miter_limit=miter_limit,
    )
