"""Geometric operations for outline generation.

This module provides core mathematical utilities for:
- Signed area calculation (shoelace formula)
- Bezier curve flattening
- Flattening anchor paths (anchors with optional handles) into polylines
- Point deduplication
- Douglas-Peucker polyline simplification

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from strokefont.core._bezier import flatten_cubic as _flatten_cubic
from strokefont.core._bezier import flatten_quadratic as _flatten_quadratic
from strokefont.domain import AnchorPoint, Point


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])
        1.0
        >>> signed_area([p1, p4, p3, p2])
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def unit_direction(start: Point, end: Point) -> tuple[float, float] | None:
    """Unit vector pointing from start to end.

    Returns:
        (dx, dy) tuple, or None for a zero-length segment
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length < 1e-12:
        return None
    return dx / length, dy / length


def bezier_flatten(points: list[Point], tolerance: float, max_depth: int = 16) -> list[Point]:
    """Convert Bezier curve to line segments using recursive subdivision.

    Handles both quadratic (3 points) and cubic (4 points) Bezier curves.
    Uses recursive subdivision until the curve is flat enough (within tolerance).

    Args:
        points: Control points of the Bezier curve (3 for quadratic, 4 for cubic)
        tolerance: Maximum distance from true curve
        max_depth: Maximum number of subdivision levels

    Returns:
        List of points forming line segments that approximate the curve

    Raises:
        ValueError: If points list is not of length 2, 3 or 4
    """
    if len(points) == 2:
        # Already a line segment
        return list(points)
    elif len(points) == 3:
        return _flatten_quadratic(points, tolerance, max_depth)
    elif len(points) == 4:
        return _flatten_cubic(points, tolerance, max_depth)
    else:
        raise ValueError(f"Expected 2-4 points for Bezier curve, got {len(points)}")


def segment_control_points(start: AnchorPoint, end: AnchorPoint) -> list[Point]:
    """Control polygon of the segment between two anchors.

    Both handles present gives a cubic, exactly one gives a quadratic and
    none gives a straight line.
    """
    if start.handle_out is not None and end.handle_in is not None:
        return [start.position, start.handle_out, end.handle_in, end.position]
    if start.handle_out is not None:
        return [start.position, start.handle_out, end.position]
    if end.handle_in is not None:
        return [start.position, end.handle_in, end.position]
    return [start.position, end.position]


def flatten_anchor_path(
    anchors: Sequence[AnchorPoint],
    closed: bool,
    tolerance: float,
    max_depth: int = 16,
) -> list[Point]:
    """Flatten a path of anchors into a polyline.

    Args:
        anchors: Anchors of the path, in order
        closed: Whether a segment joins the last anchor back to the first
        tolerance: Bezier flattening tolerance
        max_depth: Maximum subdivision depth per segment

    Returns:
        Polyline points. Shared segment joints appear once; a closed path
        does not repeat its first point at the end.
    """
    n = len(anchors)
    if n == 0:
        return []
    if n == 1:
        return [anchors[0].position]

    segment_count = n if closed else n - 1
    result = [anchors[0].position]

    for i in range(segment_count):
        control = segment_control_points(anchors[i], anchors[(i + 1) % n])
        result.extend(bezier_flatten(control, tolerance, max_depth)[1:])

    if closed:
        result.pop()

    return result


def dedupe_points(points: Sequence[Point], tolerance: float, closed: bool = False) -> list[Point]:
    """Drop consecutive points closer than tolerance.

    Args:
        points: Input polyline
        tolerance: Points within this distance of the previous kept point are dropped
        closed: Also drop trailing points that coincide with the first point

    Returns:
        Deduplicated list of points
    """
    result: list[Point] = []
    for point in points:
        if result and distance(result[-1], point) <= tolerance:
            continue
        result.append(point)

    if closed:
        while len(result) > 1 and distance(result[-1], result[0]) <= tolerance:
            result.pop()

    return result


def perpendicular_distance(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Distance from a point to a line segment.

    Projects the point onto the segment's line and clamps to its endpoints.
    A zero-length segment degrades to point distance.
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y
    segment_length_sq = dx * dx + dy * dy

    if segment_length_sq < 1e-20:
        return distance(point, seg_start)

    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    return math.hypot(point.x - (seg_start.x + t * dx), point.y - (seg_start.y + t * dy))


def douglas_peucker(points: Sequence[Point], epsilon: float) -> list[Point]:
    """Simplify an open polyline with the Douglas-Peucker algorithm.

    Endpoints are always kept. Every dropped point lies within epsilon of
    the simplified polyline.

    Args:
        points: Polyline to simplify
        epsilon: Maximum allowed deviation

    Returns:
        Simplified polyline (a subsequence of the input)
    """
    n = len(points)
    if n <= 2:
        return list(points)

    keep = [False] * n
    keep[0] = keep[n - 1] = True
    stack = [(0, n - 1)]

    while stack:
        first, last = stack.pop()
        max_dist = 0.0
        max_idx = first

        for i in range(first + 1, last):
            d = perpendicular_distance(points[i], points[first], points[last])
            if d > max_dist:
                max_dist = d
                max_idx = i

        if max_dist > epsilon:
            keep[max_idx] = True
            stack.append((first, max_idx))
            stack.append((max_idx, last))

    return [p for p, kept in zip(points, keep) if kept]


def simplify_closed(points: Sequence[Point], epsilon: float) -> list[Point]:
    """Simplify a closed ring with Douglas-Peucker.

    The ring is opened at its first point, simplified, and closed again, so
    the result never has more points than the input.

    Args:
        points: Ring points (first point not repeated)
        epsilon: Maximum allowed deviation

    Returns:
        Simplified ring (first point not repeated)
    """
    if len(points) <= 3:
        return list(points)

    ring = [*points, points[0]]
    return douglas_peucker(ring, epsilon)[:-1]
