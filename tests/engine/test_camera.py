"""Tests for camera state, transitions, hit-testing, and the interaction controller."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from blockgraph.config.models import CameraConfig, LayoutConfig
from blockgraph.domain.geometry import Point, Rect
from blockgraph.engine.camera import (
    CameraState,
    InteractionController,
    ViewState,
    hit_test,
    needs_repaint,
    pan_by,
    toggle_selection,
    zoom_by,
    zoom_label,
    zoom_step,
)
from blockgraph.engine.layout import layout
from tests.conftest import make_node

CAMERA = CameraConfig()
LAYOUT = LayoutConfig()


class TestCameraState:
    def test_screen_mapping(self) -> None:
        camera = CameraState(pan=Point(10, 20), scale=2.0)
        assert camera.to_screen(Point(5, 5)) == Point(20, 30)
        assert camera.to_world(Point(20, 30)) == Point(5, 5)

    def test_screen_rect(self) -> None:
        camera = CameraState(pan=Point(10, 0), scale=0.5)
        assert camera.screen_rect(Rect(100, 100, 140, 60)) == Rect(60, 50, 70, 30)


class TestTransitions:
    def test_pan_accumulates_without_bounds(self) -> None:
        camera = pan_by(CameraState(), Point(-5000, 20))
        camera = pan_by(camera, Point(-5000, 20))
        assert camera.pan == Point(-10000, 40)

    def test_zoom_by_clamps(self) -> None:
        assert zoom_by(CameraState(), 10.0, CAMERA).scale == 2.0
        assert zoom_by(CameraState(), 0.01, CAMERA).scale == 0.5

    def test_zoom_step(self) -> None:
        assert zoom_step(CameraState(), 1, CAMERA).scale == pytest.approx(1.1)
        assert zoom_step(CameraState(), -1, CAMERA).scale == pytest.approx(0.9)

    @given(
        st.lists(
            st.one_of(
                st.floats(min_value=0.01, max_value=100.0),
                st.sampled_from(["in", "out", "reset"]),
            ),
            max_size=50,
        )
    )
    def test_scale_always_within_limits(self, ops: list[float | str]) -> None:
        controller = InteractionController()
        for op in ops:
            if op == "in":
                controller.zoom_in()
            elif op == "out":
                controller.zoom_out()
            elif op == "reset":
                controller.reset_view()
            else:
                controller.zoom_by(float(op))
            assert 0.5 <= controller.camera.scale <= 2.0

    def test_toggle_selection(self) -> None:
        assert toggle_selection(None, "a") == "a"
        assert toggle_selection("a", "a") is None
        assert toggle_selection("a", "b") == "b"

    def test_zoom_label(self) -> None:
        assert zoom_label(1.0) == "100%"
        assert zoom_label(0.5) == "50%"
        assert zoom_label(1.999) == "199%"

    def test_needs_repaint(self) -> None:
        state = ViewState()
        assert needs_repaint(None, state)
        assert not needs_repaint(state, ViewState())
        assert needs_repaint(state, ViewState(hovered_id="a"))
        assert needs_repaint(state, ViewState(camera=CameraState(scale=1.5)))


class TestHitTest:
    def test_hit_inside_node(self) -> None:
        nodes = [make_node("a")]
        positions = {"a": Point(50, 50)}
        assert hit_test(Point(60, 60), nodes, positions, CameraState(), LAYOUT) == "a"
        assert hit_test(Point(10, 10), nodes, positions, CameraState(), LAYOUT) is None

    def test_hit_respects_camera_transform(self) -> None:
        nodes = [make_node("a")]
        positions = {"a": Point(50, 50)}
        camera = CameraState(pan=Point(100, 0), scale=2.0)
        # World rect (50, 50, 140, 60) maps to screen (200, 100, 280, 120).
        assert hit_test(Point(210, 110), nodes, positions, camera, LAYOUT) == "a"
        assert hit_test(Point(60, 60), nodes, positions, camera, LAYOUT) is None

    def test_topmost_node_wins(self) -> None:
        nodes = [make_node("under"), make_node("over")]
        positions = {"under": Point(0, 0), "over": Point(20, 20)}
        assert hit_test(Point(30, 30), nodes, positions, CameraState(), LAYOUT) == "over"

    def test_unpositioned_node_never_hit(self) -> None:
        assert hit_test(Point(0, 0), [make_node("a")], {}, CameraState(), LAYOUT) is None


class TestInteractionController:
    @pytest.fixture
    def controller(self) -> InteractionController:
        nodes = [make_node("core_a", "core"), make_node("feat_b", "feature")]
        controller = InteractionController(CAMERA, LAYOUT)
        controller.set_scene(nodes, layout(nodes, LAYOUT))
        return controller

    def test_initial_state(self, controller: InteractionController) -> None:
        assert controller.camera == CameraState()
        assert controller.hovered_id is None
        assert controller.selected_id is None
        assert controller.zoom_label == "100%"

    def test_pan_reports_change(self, controller: InteractionController) -> None:
        assert controller.pan(10, 0)
        assert not controller.pan(0, 0)

    def test_zoom_at_limit_reports_no_change(self, controller: InteractionController) -> None:
        controller.zoom_by(5.0)
        assert not controller.zoom_in()
        assert controller.zoom_label == "200%"

    def test_reset_view(self, controller: InteractionController) -> None:
        controller.pan(40, 40)
        controller.zoom_out()
        assert controller.reset_view()
        assert controller.camera == CameraState()

    def test_reset_keeps_selection(self, controller: InteractionController) -> None:
        controller.select("core_a")
        controller.reset_view()
        assert controller.selected_id == "core_a"

    def test_select_twice_clears(self, controller: InteractionController) -> None:
        controller.select("core_a")
        assert controller.selected_id == "core_a"
        controller.select("core_a")
        assert controller.selected_id is None

    def test_select_other_replaces(self, controller: InteractionController) -> None:
        controller.select("core_a")
        controller.select("feat_b")
        assert controller.selected_id == "feat_b"

    def test_hover_exit_only_clears_own_hover(self, controller: InteractionController) -> None:
        controller.hover_enter("core_a")
        controller.hover_enter("feat_b")
        assert not controller.hover_exit("core_a")
        assert controller.hovered_id == "feat_b"
        assert controller.hover_exit("feat_b")
        assert controller.hovered_id is None

    def test_pointer_move_hovers_node(self, controller: InteractionController) -> None:
        assert controller.pointer_move(Point(60, 60))
        assert controller.hovered_id == "core_a"
        assert controller.pointer_move(Point(0, 0))
        assert controller.hovered_id is None

    def test_pointer_exit(self, controller: InteractionController) -> None:
        controller.pointer_move(Point(240, 60))
        assert controller.hovered_id == "feat_b"
        controller.pointer_exit()
        assert controller.hovered_id is None

    def test_tap_toggles_selection(self, controller: InteractionController) -> None:
        assert controller.tap(Point(240, 60))
        assert controller.selected_id == "feat_b"
        assert controller.tap(Point(240, 60))
        assert controller.selected_id is None

    def test_tap_on_empty_canvas_keeps_selection(
        self, controller: InteractionController
    ) -> None:
        controller.select("core_a")
        assert not controller.tap(Point(1000, 1000))
        assert controller.selected_id == "core_a"

    def test_tap_after_pan_uses_transform(self, controller: InteractionController) -> None:
        controller.pan(500, 0)
        assert not controller.tap(Point(60, 60))
        assert controller.tap(Point(560, 60))
        assert controller.selected_id == "core_a"
