"""Unit tests for closed-stroke outlines."""

import math

import pytest

from strokefont.core.closed import RING_HOLE_FACTOR, build_ring, flatten_closed_stroke
from strokefont.domain import AnchorPoint, Point


@pytest.fixture
def square_anchors() -> list[AnchorPoint]:
    return [AnchorPoint(0, 0), AnchorPoint(1, 0), AnchorPoint(1, 1), AnchorPoint(0, 1)]


@pytest.fixture
def circle_anchors() -> list[AnchorPoint]:
    """Four-anchor cubic approximation of a circle of radius 0.4 at (0.5, 0.5)."""
    k = 0.5523 * 0.4
    c, r = 0.5, 0.4
    return [
        AnchorPoint(c + r, c, handle_in=Point(c + r, c - k), handle_out=Point(c + r, c + k)),
        AnchorPoint(c, c + r, handle_in=Point(c + k, c + r), handle_out=Point(c - k, c + r)),
        AnchorPoint(c - r, c, handle_in=Point(c - r, c + k), handle_out=Point(c - r, c - k)),
        AnchorPoint(c, c - r, handle_in=Point(c - k, c - r), handle_out=Point(c + k, c - r)),
    ]


class TestFlattenClosedStroke:
    """Tests for filled closed strokes."""

    def test_square_is_its_own_points(self, square_anchors: list[AnchorPoint]) -> None:
        """A straight-edged closed path comes back unchanged."""
        contour = flatten_closed_stroke(square_anchors, tolerance=0.00025, epsilon=0.0005)

        assert contour is not None
        assert contour.points == [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]

    def test_closing_segment_curved(self) -> None:
        """The segment from the last anchor back to the first is flattened too."""
        anchors = [
            AnchorPoint(0, 0),
            AnchorPoint(1, 0, handle_out=Point(1, 1)),
            AnchorPoint(0, 1, handle_out=Point(-0.5, 0.5)),
        ]
        contour = flatten_closed_stroke(anchors, tolerance=0.001, epsilon=0.0)

        assert contour is not None
        assert min(p.x for p in contour.points) < -0.1

    def test_too_few_points(self) -> None:
        assert flatten_closed_stroke([AnchorPoint(0, 0), AnchorPoint(1, 1)], 0.001, 0.0) is None

    def test_duplicate_points_collapse(self) -> None:
        anchors = [AnchorPoint(0, 0), AnchorPoint(1, 0), AnchorPoint(1, 0), AnchorPoint(0, 0)]
        assert flatten_closed_stroke(anchors, 0.001, 0.0, dedup_tolerance=1e-6) is None

    def test_single_anchor(self) -> None:
        assert flatten_closed_stroke([AnchorPoint(0.5, 0.5)], 0.001, 0.0) is None

    def test_simplification_never_adds_points(self, circle_anchors: list[AnchorPoint]) -> None:
        full = flatten_closed_stroke(circle_anchors, tolerance=0.0001, epsilon=0.0)
        assert full is not None

        for epsilon in (0.0001, 0.001, 0.01):
            simplified = flatten_closed_stroke(circle_anchors, tolerance=0.0001, epsilon=epsilon)
            assert simplified is not None
            assert len(simplified) <= len(full)

    def test_simplification_area_change_bounded(self, circle_anchors: list[AnchorPoint]) -> None:
        """Area changes by at most perimeter x epsilon."""
        epsilon = 0.005
        full = flatten_closed_stroke(circle_anchors, tolerance=0.0001, epsilon=0.0)
        simplified = flatten_closed_stroke(circle_anchors, tolerance=0.0001, epsilon=epsilon)

        assert full is not None and simplified is not None
        perimeter = 2 * math.pi * 0.4
        assert abs(full.area() - simplified.area()) <= perimeter * epsilon
        assert len(simplified) < len(full)


class TestBuildRing:
    """Tests for ring outlines of closed strokes."""

    def test_square_ring(self, square_anchors: list[AnchorPoint]) -> None:
        """A wide square gives an outer boundary and an opposite-wound hole."""
        contours = build_ring(square_anchors, 0.05, tolerance=0.001, epsilon=0.0)

        assert len(contours) == 2
        outer, inner = contours
        assert outer.signed_area() == pytest.approx(1.1 * 1.1)
        assert inner.signed_area() == pytest.approx(-(0.9 * 0.9))

    def test_narrow_shape_has_no_hole(self) -> None:
        """Shapes thinner than the hole threshold come out solid."""
        anchors = [AnchorPoint(0, 0), AnchorPoint(1, 0), AnchorPoint(1, 0.1), AnchorPoint(0, 0.1)]
        assert 0.1 <= RING_HOLE_FACTOR * 0.05

        contours = build_ring(anchors, 0.05, tolerance=0.001, epsilon=0.0)

        assert len(contours) == 1
        assert contours[0].signed_area() > 0

    def test_winding_independent_of_path_direction(self, square_anchors: list[AnchorPoint]) -> None:
        reversed_square = list(reversed(square_anchors))
        contours = build_ring(reversed_square, 0.05, tolerance=0.001, epsilon=0.0)

        assert len(contours) == 2
        assert contours[0].signed_area() > 0
        assert contours[1].signed_area() < 0

    def test_curved_ring(self, circle_anchors: list[AnchorPoint]) -> None:
        contours = build_ring(circle_anchors, 0.05, tolerance=0.0005, epsilon=0.0005)

        assert len(contours) == 2
        outer, inner = contours
        assert outer.area() == pytest.approx(math.pi * 0.45**2, rel=0.02)
        assert inner.area() == pytest.approx(math.pi * 0.35**2, rel=0.02)

    def test_unusable(self) -> None:
        assert build_ring([AnchorPoint(0, 0), AnchorPoint(1, 0)], 0.05, 0.001, 0.0) == []
        assert build_ring([AnchorPoint(0, 0)], 0.05, 0.001, 0.0) == []
