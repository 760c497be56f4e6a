"""Renderer — turns a graph snapshot plus view state into draw commands.

Pure with respect to its inputs: nothing here mutates the graph, the
positions, or the view state. Paint order is fixed: one camera transform
for the whole frame, then every edge, then every node, so nodes always
occlude edges.

Elements without positions (an unpositioned node, or an edge with an
unpositioned endpoint) are skipped.
"""

from __future__ import annotations

import logging
import textwrap
from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass

from blockgraph.config.models import GraphConfig
from blockgraph.domain.geometry import Point, Rect
from blockgraph.domain.graph import GraphEdge, GraphNode
from blockgraph.domain.types import DependencyType
from blockgraph.engine import palette
from blockgraph.engine.camera import CameraState
from blockgraph.engine.curves import (
    arrowhead,
    control_points,
    dash_polyline,
    edge_anchors,
    flatten_cubic,
)
from blockgraph.engine.drawing import (
    DrawText,
    FillCircle,
    FillPolygon,
    FillRoundRect,
    PopTransform,
    PushTransform,
    StrokeCubic,
    StrokePolyline,
    StrokeRoundRect,
    Surface,
)
from blockgraph.engine.palette import Color

logger = logging.getLogger(__name__)

# Average glyph advance as a fraction of the font size, for label wrapping.
_CHAR_WIDTH_RATIO = 0.6
_BADGE_RADIUS = 8.0


# ── Styling rules ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class EdgeStyle:
    color: Color
    width: float
    dashed: bool
    in_cycle: bool


@dataclass(frozen=True)
class NodeStyle:
    border: Color
    fill: Color
    stroke_width: float
    glow: bool
    text_color: Color
    badge: str | None  # "error", "hidden", or None


def is_cycle_edge(edge: GraphEdge, cycle_node_ids: Collection[str]) -> bool:
    """A ``requires`` edge whose endpoints are both cycle members."""
    return (
        edge.type == DependencyType.REQUIRES
        and edge.source in cycle_node_ids
        and edge.target in cycle_node_ids
    )


def edge_style(
    edge: GraphEdge,
    cycle_node_ids: Collection[str],
    config: GraphConfig | None = None,
) -> EdgeStyle:
    cfg = (config or GraphConfig()).edges
    in_cycle = is_cycle_edge(edge, cycle_node_ids)
    return EdgeStyle(
        color=palette.CYCLE_RED if in_cycle else palette.EDGE_COLORS[edge.type],
        width=cfg.cycle_stroke_width if in_cycle else cfg.stroke_width,
        dashed=edge.type.is_dashed,
        in_cycle=in_cycle,
    )


def node_style(
    node: GraphNode,
    cycle_node_ids: Collection[str],
    hovered_id: str | None = None,
    selected_id: str | None = None,
    config: GraphConfig | None = None,
) -> NodeStyle:
    """Resolve node colors: cycle beats enabled-category beats disabled-grey."""
    cfg = (config or GraphConfig()).nodes
    in_cycle = node.id in cycle_node_ids
    hovered = node.id == hovered_id
    selected = node.id == selected_id

    if in_cycle:
        border = palette.CYCLE_RED
        fill = border.with_opacity(palette.NODE_FILL_OPACITY)
    elif node.is_enabled:
        border = palette.CATEGORY_COLORS[node.category]
        fill = border.with_opacity(palette.NODE_FILL_OPACITY)
    else:
        border = palette.GREY
        fill = border.with_opacity(palette.DISABLED_FILL_OPACITY)

    if selected:
        width = cfg.selected_stroke_width
    elif hovered:
        width = cfg.hover_stroke_width
    else:
        width = cfg.stroke_width

    if in_cycle:
        badge: str | None = "error"
    elif not node.is_enabled:
        badge = "hidden"
    else:
        badge = None

    text_color = palette.WHITE
    if not node.is_enabled:
        text_color = text_color.with_opacity(palette.DIMMED_TEXT_OPACITY)

    return NodeStyle(
        border=border,
        fill=fill,
        stroke_width=width,
        glow=hovered or selected,
        text_color=text_color,
        badge=badge,
    )


def wrap_label(text: str, max_width: float, font_size: float, max_lines: int) -> tuple[str, ...]:
    """Greedy word wrap within *max_width*, ellipsized past *max_lines*."""
    max_chars = max(1, int(max_width // (font_size * _CHAR_WIDTH_RATIO)))
    return tuple(textwrap.wrap(text, width=max_chars, max_lines=max_lines, placeholder="…"))


# ── Frame ─────────────────────────────────────────────────────────────


def render(
    surface: Surface,
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    positions: Mapping[str, Point],
    cycle_node_ids: Collection[str],
    camera: CameraState,
    hovered_id: str | None = None,
    selected_id: str | None = None,
    config: GraphConfig | None = None,
) -> None:
    """Paint one frame onto *surface*."""
    cfg = config or GraphConfig()
    surface.draw(PushTransform(translate=camera.pan, scale=camera.scale))
    for edge in edges:
        _draw_edge(surface, edge, positions, cycle_node_ids, cfg)
    for node in nodes:
        _draw_node(surface, node, positions, cycle_node_ids, hovered_id, selected_id, cfg)
    surface.draw(PopTransform())


def _draw_edge(
    surface: Surface,
    edge: GraphEdge,
    positions: Mapping[str, Point],
    cycle_node_ids: Collection[str],
    cfg: GraphConfig,
) -> None:
    source = positions.get(edge.source)
    target = positions.get(edge.target)
    if source is None or target is None:
        logger.debug("skipping edge %s -> %s: endpoint not laid out", edge.source, edge.target)
        return

    style = edge_style(edge, cycle_node_ids, cfg)
    start, end = edge_anchors(source, target, cfg.layout)
    c1, c2 = control_points(start, end)

    if style.dashed:
        curve = flatten_cubic(start, c1, c2, end, cfg.edges.curve_samples)
        for dash in dash_polyline(curve, cfg.edges.dash_length, cfg.edges.gap_length):
            surface.draw(StrokePolyline(points=dash, color=style.color, width=style.width))
    else:
        surface.draw(
            StrokeCubic(
                start=start, control1=c1, control2=c2, end=end,
                color=style.color, width=style.width,
            )
        )

    surface.draw(FillPolygon(points=arrowhead(end, cfg.edges.arrow_size), color=style.color))


def _draw_node(
    surface: Surface,
    node: GraphNode,
    positions: Mapping[str, Point],
    cycle_node_ids: Collection[str],
    hovered_id: str | None,
    selected_id: str | None,
    cfg: GraphConfig,
) -> None:
    pos = positions.get(node.id)
    if pos is None:
        logger.debug("skipping node %s: not laid out", node.id)
        return

    lay, ncfg = cfg.layout, cfg.nodes
    rect = Rect(pos.x, pos.y, lay.node_width, lay.node_height)
    style = node_style(node, cycle_node_ids, hovered_id, selected_id, cfg)

    if style.glow:
        surface.draw(
            FillRoundRect(
                rect=rect.inflate(ncfg.glow_inflate),
                radius=ncfg.corner_radius,
                color=style.border.with_opacity(palette.GLOW_OPACITY),
                blur=ncfg.glow_blur,
            )
        )
    surface.draw(FillRoundRect(rect=rect, radius=ncfg.corner_radius, color=style.fill))
    surface.draw(
        StrokeRoundRect(
            rect=rect, radius=ncfg.corner_radius, color=style.border, width=style.stroke_width
        )
    )

    label_width = lay.node_width - ncfg.label_padding
    lines = wrap_label(node.name, label_width, ncfg.font_size, ncfg.label_max_lines)
    if lines:
        surface.draw(
            DrawText(
                lines=lines,
                center=rect.center,
                max_width=label_width,
                color=style.text_color,
                font_size=ncfg.font_size,
            )
        )

    if style.badge is not None:
        center = Point(rect.right - 10, rect.top + 10)
        surface.draw(
            FillCircle(center=center, radius=_BADGE_RADIUS, color=style.border, glyph=style.badge)
        )
