"""Camera and interaction state — pan, zoom, hover, selection.

State is held in frozen value objects and changed through pure transition
functions. :class:`InteractionController` is the single owner that applies
those transitions in response to pointer and stepper events, and reports
whether the visible state changed so callers can skip redundant repaints.

Screen mapping: ``screen = world * scale + pan``. Hit-testing uses the
same mapping as drawing, so what is hit is exactly what is seen.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace

from blockgraph.config.models import CameraConfig, LayoutConfig
from blockgraph.domain.geometry import ORIGIN, Point, Rect
from blockgraph.domain.graph import GraphNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CameraState:
    """Pan offset (screen units) and uniform zoom factor."""

    pan: Point = ORIGIN
    scale: float = 1.0

    def to_screen(self, world: Point) -> Point:
        return Point(world.x * self.scale + self.pan.x, world.y * self.scale + self.pan.y)

    def to_world(self, screen: Point) -> Point:
        return Point((screen.x - self.pan.x) / self.scale, (screen.y - self.pan.y) / self.scale)

    def screen_rect(self, world: Rect) -> Rect:
        top_left = self.to_screen(Point(world.left, world.top))
        return Rect(top_left.x, top_left.y, world.width * self.scale, world.height * self.scale)


@dataclass(frozen=True)
class ViewState:
    """Everything that affects a rendered frame besides the graph itself."""

    camera: CameraState = CameraState()
    hovered_id: str | None = None
    selected_id: str | None = None


def clamp_scale(value: float, config: CameraConfig) -> float:
    return max(config.min_scale, min(config.max_scale, value))


def pan_by(camera: CameraState, delta: Point) -> CameraState:
    """Unbounded pan."""
    return replace(camera, pan=camera.pan + delta)


def zoom_by(camera: CameraState, factor: float, config: CameraConfig) -> CameraState:
    """Multiplicative zoom, e.g. from a pinch gesture."""
    return replace(camera, scale=clamp_scale(camera.scale * factor, config))


def zoom_step(camera: CameraState, steps: int, config: CameraConfig) -> CameraState:
    """Additive zoom by ``steps * zoom_step`` (negative steps zoom out)."""
    return replace(camera, scale=clamp_scale(camera.scale + steps * config.zoom_step, config))


def reset_camera() -> CameraState:
    return CameraState()


def toggle_selection(selected_id: str | None, node_id: str) -> str | None:
    """Tapping the selected node clears selection; any other node replaces it."""
    return None if selected_id == node_id else node_id


def needs_repaint(previous: ViewState | None, current: ViewState) -> bool:
    return previous != current


def zoom_label(scale: float) -> str:
    """Percent label shown beside the zoom stepper, truncated toward zero."""
    return f"{int(scale * 100)}%"


def hit_test(
    screen_point: Point,
    nodes: Sequence[GraphNode],
    positions: Mapping[str, Point],
    camera: CameraState,
    layout: LayoutConfig,
) -> str | None:
    """Return the id of the topmost node under *screen_point*, if any.

    Nodes are drawn in list order, so later nodes sit on top and are
    tested first. Unpositioned nodes are never hit.
    """
    for node in reversed(nodes):
        pos = positions.get(node.id)
        if pos is None:
            continue
        world = Rect(pos.x, pos.y, layout.node_width, layout.node_height)
        if camera.screen_rect(world).contains(screen_point):
            return node.id
    return None


class InteractionController:
    """Owns camera, hover, and selection state for one diagram.

    Every mutator returns True when the visible :class:`ViewState` changed.
    Scene data (nodes and positions) can be swapped on reload without
    touching camera or interaction state.
    """

    def __init__(
        self,
        camera_config: CameraConfig | None = None,
        layout_config: LayoutConfig | None = None,
    ) -> None:
        self._camera_config = camera_config or CameraConfig()
        self._layout_config = layout_config or LayoutConfig()
        self._state = ViewState()
        self._nodes: Sequence[GraphNode] = ()
        self._positions: Mapping[str, Point] = {}

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def camera(self) -> CameraState:
        return self._state.camera

    @property
    def hovered_id(self) -> str | None:
        return self._state.hovered_id

    @property
    def selected_id(self) -> str | None:
        return self._state.selected_id

    @property
    def zoom_label(self) -> str:
        return zoom_label(self._state.camera.scale)

    def set_scene(self, nodes: Sequence[GraphNode], positions: Mapping[str, Point]) -> None:
        """Replace the hit-testable scene after a data reload."""
        self._nodes = nodes
        self._positions = positions

    def _apply(self, new_state: ViewState) -> bool:
        changed = new_state != self._state
        self._state = new_state
        return changed

    # ------------------------------------------------------------------
    # Camera
    # ------------------------------------------------------------------

    def pan(self, dx: float, dy: float) -> bool:
        return self._apply(replace(self._state, camera=pan_by(self.camera, Point(dx, dy))))

    def zoom_by(self, factor: float) -> bool:
        camera = zoom_by(self.camera, factor, self._camera_config)
        return self._apply(replace(self._state, camera=camera))

    def zoom_in(self) -> bool:
        camera = zoom_step(self.camera, 1, self._camera_config)
        return self._apply(replace(self._state, camera=camera))

    def zoom_out(self) -> bool:
        camera = zoom_step(self.camera, -1, self._camera_config)
        return self._apply(replace(self._state, camera=camera))

    def reset_view(self) -> bool:
        return self._apply(replace(self._state, camera=reset_camera()))

    # ------------------------------------------------------------------
    # Hover and selection
    # ------------------------------------------------------------------

    def node_at(self, screen_point: Point) -> str | None:
        return hit_test(
            screen_point, self._nodes, self._positions, self.camera, self._layout_config
        )

    def hover_enter(self, node_id: str) -> bool:
        return self._apply(replace(self._state, hovered_id=node_id))

    def hover_exit(self, node_id: str) -> bool:
        """Clear hover, unless another node has already taken it over."""
        if self._state.hovered_id != node_id:
            return False
        return self._apply(replace(self._state, hovered_id=None))

    def pointer_move(self, screen_point: Point) -> bool:
        return self._apply(replace(self._state, hovered_id=self.node_at(screen_point)))

    def pointer_exit(self) -> bool:
        return self._apply(replace(self._state, hovered_id=None))

    def select(self, node_id: str) -> bool:
        selected = toggle_selection(self._state.selected_id, node_id)
        logger.debug("selection changed: %s -> %s", self._state.selected_id, selected)
        return self._apply(replace(self._state, selected_id=selected))

    def tap(self, screen_point: Point) -> bool:
        """Toggle selection of the node under the pointer; empty canvas is a no-op."""
        node_id = self.node_at(screen_point)
        if node_id is None:
            return False
        return self.select(node_id)
