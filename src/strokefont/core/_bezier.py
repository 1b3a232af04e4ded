"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for bezier_flatten.
Not intended for public use.
"""

import math

from strokefont.domain import Point


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_quadratic(points: list[Point], tolerance: float, depth: int = 16) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance between curve and chord
        depth: Remaining subdivision levels

    Returns:
        List of points approximating the curve, endpoints included
    """
    p0, p1, p2 = points

    # Curve point at t=0.5
    curve_mid_x = 0.25 * p0.x + 0.5 * p1.x + 0.25 * p2.x
    curve_mid_y = 0.25 * p0.y + 0.5 * p1.y + 0.25 * p2.y

    # Chord midpoint
    line_mid_x = (p0.x + p2.x) / 2
    line_mid_y = (p0.y + p2.y) / 2

    distance = math.hypot(curve_mid_x - line_mid_x, curve_mid_y - line_mid_y)

    # NaN distances fail the comparison, so the depth guard also ends recursion
    if distance <= tolerance or depth <= 0:
        return [p0, p2]

    # Subdivide at t=0.5
    mid = Point(curve_mid_x, curve_mid_y)
    left = flatten_quadratic([p0, _midpoint(p0, p1), mid], tolerance, depth - 1)
    right = flatten_quadratic([mid, _midpoint(p1, p2), p2], tolerance, depth - 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 16) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance between curve and chord
        depth: Remaining subdivision levels

    Returns:
        List of points approximating the curve, endpoints included
    """
    p0, p1, p2, p3 = points

    # A cubic stays within 3/4 of its farthest control point's distance from the chord
    control_dev = max(
        _distance_to_chord(p1, p0, p3),
        _distance_to_chord(p2, p0, p3),
    )

    if 0.75 * control_dev <= tolerance or depth <= 0:
        return [p0, p3]

    # First level
    q1 = _midpoint(p0, p1)
    q2 = _midpoint(p1, p2)
    q3 = _midpoint(p2, p3)

    # Second level
    r1 = _midpoint(q1, q2)
    r2 = _midpoint(q2, q3)

    # Third level (midpoint)
    mid = _midpoint(r1, r2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth - 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth - 1)

    return left[:-1] + right


def _distance_to_chord(point: Point, start: Point, end: Point) -> float:
    """Distance from a control point to the infinite chord line."""
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length < 1e-12:
        return math.hypot(point.x - start.x, point.y - start.y)
    return abs((point.x - start.x) * dy - (point.y - start.y) * dx) / length
