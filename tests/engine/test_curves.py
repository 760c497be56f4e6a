"""Tests for edge geometry: anchors, flattening, dashing, and arrowheads."""

from __future__ import annotations

import pytest

from blockgraph.config.models import LayoutConfig
from blockgraph.domain.geometry import Point
from blockgraph.engine.curves import (
    arrowhead,
    control_points,
    cubic_point,
    dash_polyline,
    edge_anchors,
    flatten_cubic,
    path_length,
)


class TestAnchors:
    def test_right_middle_to_left_middle(self) -> None:
        start, end = edge_anchors(Point(50, 50), Point(230, 150), LayoutConfig())
        assert start == Point(190, 80)
        assert end == Point(230, 180)

    def test_control_points_at_mid_x(self) -> None:
        c1, c2 = control_points(Point(190, 80), Point(230, 180))
        assert c1 == Point(210, 80)
        assert c2 == Point(210, 180)


class TestCubic:
    def test_endpoints(self) -> None:
        p0, p1, p2, p3 = Point(0, 0), Point(5, 0), Point(5, 10), Point(10, 10)
        assert cubic_point(p0, p1, p2, p3, 0.0) == p0
        assert cubic_point(p0, p1, p2, p3, 1.0) == p3

    def test_flatten_sample_count(self) -> None:
        points = flatten_cubic(Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0), 8)
        assert len(points) == 9
        assert points[0] == Point(0, 0)
        assert points[-1] == Point(3, 0)


class TestDashPolyline:
    def test_straight_line_pattern(self) -> None:
        dashes = dash_polyline((Point(0, 0), Point(40, 0)), 5, 3)
        assert len(dashes) == 5
        assert [d[0].x for d in dashes] == [0, 8, 16, 24, 32]
        assert all(path_length(d) == pytest.approx(5) for d in dashes)

    def test_last_dash_cut_at_end(self) -> None:
        dashes = dash_polyline((Point(0, 0), Point(10, 0)), 5, 3)
        assert len(dashes) == 2
        assert dashes[-1][-1] == Point(10, 0)
        assert path_length(dashes[-1]) == pytest.approx(2)

    def test_dashes_follow_flattened_curve(self) -> None:
        curve = flatten_cubic(Point(0, 0), Point(50, 0), Point(50, 100), Point(100, 100), 64)
        dashes = dash_polyline(curve, 5, 3)
        total = path_length(curve)
        assert len(dashes) == pytest.approx(total / 8, abs=1)
        assert dashes[0][0] == Point(0, 0)

    def test_zero_length_path(self) -> None:
        assert dash_polyline((Point(3, 3), Point(3, 3)), 5, 3) == []
        assert dash_polyline((Point(3, 3),), 5, 3) == []


class TestArrowhead:
    def test_fixed_right_pointing_triangle(self) -> None:
        tip, upper, lower = arrowhead(Point(230, 80), 8)
        assert tip == Point(230, 80)
        assert upper == Point(222, 76)
        assert lower == Point(222, 84)
