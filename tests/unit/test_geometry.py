"""Unit tests for geometry primitives."""

import math

import pytest

from strokefont.core.geometry import (
    bezier_flatten,
    dedupe_points,
    douglas_peucker,
    flatten_anchor_path,
    perpendicular_distance,
    signed_area,
    simplify_closed,
    unit_direction,
)
from strokefont.domain import AnchorPoint, Point


def _distance_to_polyline(point: Point, polyline: list[Point]) -> float:
    return min(
        perpendicular_distance(point, polyline[i], polyline[i + 1])
        for i in range(len(polyline) - 1)
    )


class TestSignedArea:
    """Tests for the shoelace area."""

    def test_unit_square(self) -> None:
        """Counter-clockwise (in Y-up terms) square has area +1."""
        square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        assert signed_area(square) == pytest.approx(1.0)

    def test_reversed_square(self) -> None:
        """Reversing the order flips the sign."""
        square = [Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0)]
        assert signed_area(square) == pytest.approx(-1.0)

    def test_degenerate(self) -> None:
        """Fewer than 3 points have no area."""
        assert signed_area([Point(0, 0), Point(1, 1)]) == 0.0


class TestUnitDirection:
    """Tests for unit_direction."""

    def test_normalized(self) -> None:
        dx, dy = unit_direction(Point(0, 0), Point(3, 4))
        assert dx == pytest.approx(0.6)
        assert dy == pytest.approx(0.8)

    def test_zero_length(self) -> None:
        assert unit_direction(Point(1, 1), Point(1, 1)) is None


class TestBezierFlatten:
    """Tests for Bezier flattening."""

    def test_line_passthrough(self) -> None:
        """Two points are returned as is."""
        points = [Point(0, 0), Point(1, 1)]
        assert bezier_flatten(points, 0.01) == points

    def test_quadratic_endpoints_and_monotonic_x(self) -> None:
        """Quadratic flattening keeps endpoints and subdivides the arch."""
        p0, p1, p2 = Point(0, 0), Point(0.5, 1), Point(1, 0)
        result = bezier_flatten([p0, p1, p2], 0.001)

        assert result[0] == p0
        assert result[-1] == p2
        assert len(result) > 3
        xs = [p.x for p in result]
        assert xs == sorted(xs)

    def test_quadratic_points_lie_on_curve(self) -> None:
        """Every emitted point of a symmetric arch is on the curve y = 2x(1-x)."""
        result = bezier_flatten([Point(0, 0), Point(0.5, 1), Point(1, 0)], 0.001)
        for p in result:
            assert p.y == pytest.approx(2 * p.x * (1 - p.x), abs=1e-9)

    def test_cubic_tolerance_respected(self) -> None:
        """Chord midpoints stay close to the true curve."""
        control = [Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0)]
        tolerance = 0.002
        result = bezier_flatten(control, tolerance)

        assert result[0] == control[0]
        assert result[-1] == control[-1]
        # The apex of this cubic is at y = 0.75
        assert max(p.y for p in result) == pytest.approx(0.75, abs=tolerance)

    def test_flat_cubic_is_single_segment(self) -> None:
        """A cubic with collinear control points needs no subdivision."""
        control = [Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0)]
        assert bezier_flatten(control, 0.01) == [Point(0, 0), Point(3, 0)]

    def test_depth_bounds_recursion(self) -> None:
        """A zero depth budget returns the chord."""
        control = [Point(0, 0), Point(0.5, 10), Point(1, 0)]
        assert bezier_flatten(control, 1e-9, max_depth=0) == [Point(0, 0), Point(1, 0)]

    def test_invalid_point_count(self) -> None:
        with pytest.raises(ValueError, match="Expected 2-4 points"):
            bezier_flatten([Point(0, 0)], 0.1)


class TestFlattenAnchorPath:
    """Tests for anchor path flattening."""

    def test_straight_open_path(self) -> None:
        anchors = [AnchorPoint(0, 0), AnchorPoint(1, 0), AnchorPoint(1, 1)]
        result = flatten_anchor_path(anchors, closed=False, tolerance=0.01)
        assert result == [Point(0, 0), Point(1, 0), Point(1, 1)]

    def test_closed_path_does_not_repeat_start(self) -> None:
        anchors = [AnchorPoint(0, 0), AnchorPoint(1, 0), AnchorPoint(0, 1)]
        result = flatten_anchor_path(anchors, closed=True, tolerance=0.01)
        assert result == [Point(0, 0), Point(1, 0), Point(0, 1)]

    def test_single_handle_makes_quadratic(self) -> None:
        """One handle is enough to curve the segment."""
        anchors = [
            AnchorPoint(0, 0, handle_out=Point(0.5, 1)),
            AnchorPoint(1, 0),
        ]
        result = flatten_anchor_path(anchors, closed=False, tolerance=0.001)
        assert len(result) > 2
        assert max(p.y for p in result) == pytest.approx(0.5, abs=0.001)

    def test_incoming_handle_alone_also_curves(self) -> None:
        anchors = [
            AnchorPoint(0, 0),
            AnchorPoint(1, 0, handle_in=Point(0.5, 1)),
        ]
        result = flatten_anchor_path(anchors, closed=False, tolerance=0.001)
        assert len(result) > 2

    def test_joints_not_duplicated(self) -> None:
        """Consecutive curved segments share their joint once."""
        anchors = [
            AnchorPoint(0, 0, handle_out=Point(0, 1)),
            AnchorPoint(1, 0, handle_in=Point(1, 1), handle_out=Point(1, -1)),
            AnchorPoint(2, 0, handle_in=Point(2, -1)),
        ]
        result = flatten_anchor_path(anchors, closed=False, tolerance=0.01)
        assert result.count(Point(1, 0)) == 1

    def test_single_anchor(self) -> None:
        assert flatten_anchor_path([AnchorPoint(0.3, 0.4)], closed=False, tolerance=0.01) == [
            Point(0.3, 0.4)
        ]


class TestDedupePoints:
    """Tests for point deduplication."""

    def test_drops_consecutive_duplicates(self) -> None:
        points = [Point(0, 0), Point(0, 0), Point(1, 0), Point(1, 0.0001)]
        assert dedupe_points(points, 0.001) == [Point(0, 0), Point(1, 0)]

    def test_closed_drops_wraparound_duplicate(self) -> None:
        points = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 0)]
        assert dedupe_points(points, 0.0, closed=True) == points[:3]

    def test_keeps_distinct_points(self) -> None:
        points = [Point(0, 0), Point(1, 0), Point(0, 0)]
        assert dedupe_points(points, 0.001) == points


class TestDouglasPeucker:
    """Tests for polyline simplification."""

    def test_collinear_points_removed(self) -> None:
        points = [Point(0, 0), Point(1, 0), Point(2, 0)]
        assert douglas_peucker(points, 0.1) == [Point(0, 0), Point(2, 0)]

    def test_significant_point_kept(self) -> None:
        points = [Point(0, 0), Point(1, 1), Point(2, 0)]
        assert douglas_peucker(points, 0.5) == points

    def test_endpoints_always_kept(self) -> None:
        points = [Point(0, 0), Point(0.5, 0.01), Point(1, 0)]
        result = douglas_peucker(points, 10.0)
        assert result == [Point(0, 0), Point(1, 0)]

    def test_dropped_points_within_epsilon(self) -> None:
        """Every input point lies within epsilon of the simplified polyline."""
        points = [Point(i / 50, 0.03 * math.sin(i / 3)) for i in range(51)]
        epsilon = 0.01
        result = douglas_peucker(points, epsilon)

        assert len(result) < len(points)
        for p in points:
            assert _distance_to_polyline(p, result) <= epsilon + 1e-12

    def test_short_input_unchanged(self) -> None:
        assert douglas_peucker([Point(0, 0), Point(1, 1)], 1.0) == [Point(0, 0), Point(1, 1)]


class TestSimplifyClosed:
    """Tests for ring simplification."""

    def test_square_with_edge_midpoint(self) -> None:
        ring = [Point(0, 0), Point(0.5, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        assert simplify_closed(ring, 0.01) == [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]

    def test_never_grows(self) -> None:
        ring = [Point(math.cos(k * math.pi / 20), math.sin(k * math.pi / 20)) for k in range(40)]
        for epsilon in (0.0, 0.001, 0.01, 0.1):
            assert len(simplify_closed(ring, epsilon)) <= len(ring)

    def test_triangle_untouched(self) -> None:
        triangle = [Point(0, 0), Point(1, 0), Point(0, 1)]
        assert simplify_closed(triangle, 1.0) == triangle
