"""GraphService — CLI-facing operations over a DependencyGraphView.

Each operation loads a fresh view from the block provider, performs one
action, and reports the outcome as a ServiceResult. Block-file failures
become ``ok=False`` results.
"""

from __future__ import annotations

from typing import Any

import structlog

from blockgraph.config.models import GraphConfig
from blockgraph.domain.geometry import Point
from blockgraph.engine.drawing import RecordingSurface
from blockgraph.engine.layout import diagram_bounds
from blockgraph.engine.render import node_style
from blockgraph.infrastructure.blockfile import BlockFileError
from blockgraph.services.adapter import BlockProvider, BlockResolver
from blockgraph.services.result import ErrorCode, ServiceResult
from blockgraph.services.viewer import DependencyGraphView, show_dependency_graph

log = structlog.get_logger(__name__)


def summarize_view(view: DependencyGraphView) -> dict[str, Any]:
    """Plain-data summary of what the diagram currently shows."""
    header = view.header()
    snap = view.snapshot
    state = view.controller.state
    node_legend, edge_legend = view.legend()

    items: list[dict[str, Any]] = []
    for node in snap.nodes:
        pos = view.positions.get(node.id)
        style = node_style(node, snap.cycle_node_ids, state.hovered_id, state.selected_id)
        items.append(
            {
                "id": node.id,
                "name": node.name,
                "category": node.category.value,
                "enabled": node.is_enabled,
                "x": pos.x if pos else None,
                "y": pos.y if pos else None,
                "in_cycle": node.id in snap.cycle_node_ids,
                "badge": style.badge,
            }
        )

    return {
        "header": {
            "cycle_badge": header.cycle_badge,
            "issue_badge": header.issue_badge,
            "has_issues": header.has_issues,
        },
        "node_count": len(snap.nodes),
        "edge_count": len(snap.edges),
        "cycles": [c.path for c in snap.result.cycles],
        "legend": {
            "nodes": [{"label": e.label, "color": e.color.hex} for e in node_legend],
            "edges": [
                {"label": e.label, "color": e.color.hex, "dashed": e.dashed} for e in edge_legend
            ],
        },
        "zoom": view.zoom_label,
        "items": items,
    }


class SummaryHost:
    """Modal host that captures a summary of the view instead of looping on input."""

    def __init__(self) -> None:
        self.summary: dict[str, Any] | None = None
        self.warnings: list[str] = []

    def run_modal(self, view: DependencyGraphView) -> None:
        self.summary = summarize_view(view)
        self.warnings = [w.message for w in view.snapshot.result.warnings]


class GraphService:
    """Show, lay out, inspect, and render the block dependency diagram."""

    def __init__(
        self,
        provider: BlockProvider,
        *,
        config: GraphConfig | None = None,
        resolver: BlockResolver | None = None,
    ) -> None:
        self._provider = provider
        self._config = config or GraphConfig()
        self._resolver = resolver

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _open(self) -> DependencyGraphView:
        return DependencyGraphView(self._provider, resolver=self._resolver, config=self._config)

    @staticmethod
    def _load_error(op: str, exc: BlockFileError) -> ServiceResult:
        log.warning("block load failed", op=op, code=exc.code, message=exc.message)
        return ServiceResult.failure(op, exc.code, exc.message, exc.detail)

    @staticmethod
    def _not_found(op: str, node_id: str) -> ServiceResult:
        return ServiceResult.failure(
            op, ErrorCode.NOT_FOUND, f"Node '{node_id}' not found in graph", {"id": node_id}
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def show(self) -> ServiceResult:
        """Present the diagram and return what it displayed."""
        host = SummaryHost()
        try:
            show_dependency_graph(
                self._provider, host, resolver=self._resolver, config=self._config
            )
        except BlockFileError as exc:
            return self._load_error("show", exc)
        return ServiceResult.success("show", host.summary or {}, host.warnings)

    def layout(self) -> ServiceResult:
        """Report every node's world position and the diagram bounds."""
        try:
            view = self._open()
        except BlockFileError as exc:
            return self._load_error("layout", exc)

        xs = sorted({p.x for p in view.positions.values()})
        items = [
            {
                "id": node_id,
                "x": pos.x,
                "y": pos.y,
                "column": xs.index(pos.x),
            }
            for node_id, pos in view.positions.items()
        ]
        bounds = diagram_bounds(view.positions, self._config.layout)
        data: dict[str, Any] = {
            "count": len(items),
            "columns": len(xs),
            "items": items,
            "bounds": (
                None
                if bounds is None
                else {
                    "left": bounds.left,
                    "top": bounds.top,
                    "width": bounds.width,
                    "height": bounds.height,
                }
            ),
        }
        return ServiceResult.success("layout", data)

    def inspect(self, node_id: str) -> ServiceResult:
        """Build the inspector text for one node."""
        try:
            view = self._open()
        except BlockFileError as exc:
            return self._load_error("inspect", exc)

        text = view.tooltip(node_id)
        if text is None:
            return self._not_found("inspect", node_id)
        return ServiceResult.success("inspect", {"id": node_id, "text": text})

    def frame(
        self,
        *,
        pan: tuple[float, float] = (0.0, 0.0),
        zoom: float | None = None,
        hover: str | None = None,
        select: str | None = None,
        pointer: tuple[float, float] | None = None,
        tap: tuple[float, float] | None = None,
    ) -> ServiceResult:
        """Apply camera/interaction inputs, render one frame, and count the commands.

        Inputs apply in order: pan, zoom, pointer move, tap, hover, select.
        *pointer* and *tap* are screen points and go through hit-testing.
        """
        try:
            view = self._open()
        except BlockFileError as exc:
            return self._load_error("frame", exc)

        for node_id in (hover, select):
            if node_id is not None and view.node(node_id) is None:
                return self._not_found("frame", node_id)

        controller = view.controller
        controller.pan(*pan)
        if zoom is not None:
            controller.zoom_by(zoom)
        if pointer is not None:
            controller.pointer_move(Point(*pointer))
        if tap is not None:
            controller.tap(Point(*tap))
        if hover is not None:
            controller.hover_enter(hover)
        if select is not None:
            controller.select(select)

        surface = RecordingSurface()
        view.paint(surface)
        camera = controller.camera
        log.debug("frame rendered", commands=len(surface.commands), scale=camera.scale)

        tooltip = view.hovered_tooltip()
        data: dict[str, Any] = {
            "zoom": view.zoom_label,
            "scale": camera.scale,
            "pan": [camera.pan.x, camera.pan.y],
            "hovered": controller.hovered_id,
            "selected": controller.selected_id,
            "total": len(surface.commands),
            "commands": surface.kind_counts(),
        }
        if tooltip is not None:
            data["tooltip"] = tooltip
        return ServiceResult.success("frame", data)

