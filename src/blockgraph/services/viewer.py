"""DependencyGraphView — the self-contained diagram presented to a host.

The view loads blocks from a provider, resolves them, lays them out, and
owns the :class:`InteractionController`. Data flows one way: provider ->
resolver -> layout (on each reload) -> renderer (on each paint).
Camera, hover, and selection survive reloads.

Hosts present the view through :func:`show_dependency_graph`, which
returns nothing once the host's modal loop ends.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from blockgraph.config.models import GraphConfig
from blockgraph.domain.geometry import Point
from blockgraph.domain.graph import GraphNode
from blockgraph.engine.camera import InteractionController, ViewState, needs_repaint
from blockgraph.engine.drawing import Surface
from blockgraph.engine.layout import PositionMap, layout
from blockgraph.engine.palette import EDGE_LEGEND, NODE_LEGEND, LegendEntry
from blockgraph.engine.render import render
from blockgraph.engine.tooltip import describe
from blockgraph.infrastructure.resolver import DependencyResolver
from blockgraph.services.adapter import BlockProvider, BlockResolver, GraphSnapshot, load_snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderStatus:
    """Badges shown above the diagram."""

    cycle_count: int
    issue_count: int
    has_issues: bool

    @property
    def cycle_badge(self) -> str | None:
        """``"<n> cycle(s)"``, or None when nothing is highlighted."""
        return f"{self.cycle_count} cycle(s)" if self.cycle_count else None

    @property
    def issue_badge(self) -> str:
        return f"{self.issue_count} issue(s)" if self.has_issues else "Valid"


class DependencyGraphView:
    """Interactive dependency diagram over a live block provider."""

    def __init__(
        self,
        provider: BlockProvider,
        *,
        resolver: BlockResolver | None = None,
        config: GraphConfig | None = None,
    ) -> None:
        self._provider = provider
        self._resolver = resolver or DependencyResolver()
        self.config = config or GraphConfig()
        self.controller = InteractionController(self.config.camera, self.config.layout)
        self._positions: PositionMap = {}
        self._last_painted: ViewState | None = None
        self._closed = False
        self.reload()

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    def reload(self) -> None:
        """Recompute graph, resolver result, and layout from the provider."""
        blocks = self._provider()
        self._snapshot: GraphSnapshot = load_snapshot(blocks, self._resolver)
        self._positions = layout(self._snapshot.nodes, self.config.layout)
        self.controller.set_scene(self._snapshot.nodes, self._positions)
        self._last_painted = None
        logger.debug(
            "graph loaded: %d nodes, %d edges, %d in cycles",
            len(self._snapshot.nodes),
            len(self._snapshot.edges),
            len(self._snapshot.cycle_node_ids),
        )

    @property
    def snapshot(self) -> GraphSnapshot:
        return self._snapshot

    @property
    def positions(self) -> PositionMap:
        return self._positions

    @property
    def closed(self) -> bool:
        return self._closed

    def node(self, node_id: str) -> GraphNode | None:
        return self.snapshot.data.node(node_id)

    # ------------------------------------------------------------------
    # Chrome
    # ------------------------------------------------------------------

    def header(self) -> HeaderStatus:
        snap = self.snapshot
        return HeaderStatus(
            cycle_count=len(snap.result.cycles) if snap.cycle_node_ids else 0,
            issue_count=snap.result.issue_count,
            has_issues=snap.result.has_issues,
        )

    @staticmethod
    def legend() -> tuple[tuple[LegendEntry, ...], tuple[LegendEntry, ...]]:
        """Node legend and edge legend."""
        return NODE_LEGEND, EDGE_LEGEND

    @property
    def zoom_label(self) -> str:
        return self.controller.zoom_label

    def tooltip(self, node_id: str) -> str | None:
        node = self.node(node_id)
        if node is None:
            return None
        data = self.snapshot.data
        return describe(
            node,
            self.snapshot.cycle_node_ids,
            data.incoming_edges(node_id),
            data.outgoing_edges(node_id),
        )

    def hovered_tooltip(self) -> str | None:
        hovered = self.controller.hovered_id
        return self.tooltip(hovered) if hovered else None

    def node_at(self, screen_point: Point) -> str | None:
        return self.controller.node_at(screen_point)

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------

    def paint(self, surface: Surface) -> None:
        """Render the current frame onto *surface*."""
        snap = self.snapshot
        state = self.controller.state
        render(
            surface,
            snap.nodes,
            snap.edges,
            self._positions,
            snap.cycle_node_ids,
            state.camera,
            state.hovered_id,
            state.selected_id,
            self.config,
        )
        self._last_painted = state

    def paint_if_changed(self, surface: Surface) -> bool:
        """Paint only when the view state differs from the last painted frame."""
        if not needs_repaint(self._last_painted, self.controller.state):
            return False
        self.paint(surface)
        return True

    def close(self) -> None:
        self._closed = True


class ModalHost(Protocol):
    """Host-side presenter: runs the view until the user dismisses it."""

    def run_modal(self, view: DependencyGraphView) -> None: ...


def show_dependency_graph(
    provider: BlockProvider,
    host: ModalHost,
    *,
    resolver: BlockResolver | None = None,
    config: GraphConfig | None = None,
) -> None:
    """Open the dependency diagram for *provider*'s blocks as a modal view."""
    view = DependencyGraphView(provider, resolver=resolver, config=config)
    try:
        host.run_modal(view)
    finally:
        view.close()
