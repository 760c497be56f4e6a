"""Layered layout — one column per non-empty category.

Columns follow the fixed category order; empty categories consume no
column. Within a column, nodes keep their input order, top to bottom.
Positions are recomputed from scratch on every call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from blockgraph.config.models import LayoutConfig
from blockgraph.domain.geometry import Point, Rect
from blockgraph.domain.graph import GraphNode
from blockgraph.domain.types import CATEGORY_ORDER, BlockCategory

logger = logging.getLogger(__name__)

type PositionMap = dict[str, Point]


def group_by_category(nodes: Iterable[GraphNode]) -> dict[BlockCategory, list[GraphNode]]:
    """Bucket nodes by category, preserving input order within each bucket."""
    buckets: dict[BlockCategory, list[GraphNode]] = {}
    for node in nodes:
        buckets.setdefault(node.category, []).append(node)
    return buckets


def layout(nodes: Sequence[GraphNode], config: LayoutConfig | None = None) -> PositionMap:
    """Assign a top-left world position to every node.

    With default spacing, category populations ``[2, 0, 3, 1]`` produce
    columns at x = 50, 230, 410: the empty ``feature`` bucket is skipped
    without advancing the column cursor.
    """
    cfg = config or LayoutConfig()
    buckets = group_by_category(nodes)
    positions: PositionMap = {}

    current_x = cfg.margin_x
    columns = 0
    for category in CATEGORY_ORDER:
        bucket = buckets.get(category)
        if not bucket:
            continue
        current_y = cfg.margin_y
        for node in bucket:
            positions[node.id] = Point(current_x, current_y)
            current_y += cfg.vertical_spacing
        current_x += cfg.horizontal_spacing
        columns += 1

    logger.debug("layout computed: %d nodes in %d columns", len(positions), columns)
    return positions


def node_rect(position: Point, config: LayoutConfig | None = None) -> Rect:
    """World-space bounding rectangle of a node placed at *position*."""
    cfg = config or LayoutConfig()
    return Rect(position.x, position.y, cfg.node_width, cfg.node_height)


def diagram_bounds(positions: PositionMap, config: LayoutConfig | None = None) -> Rect | None:
    """Smallest rectangle enclosing every laid-out node, or None if empty."""
    if not positions:
        return None
    cfg = config or LayoutConfig()
    left = min(p.x for p in positions.values())
    top = min(p.y for p in positions.values())
    right = max(p.x for p in positions.values()) + cfg.node_width
    bottom = max(p.y for p in positions.values()) + cfg.node_height
    return Rect(left, top, right - left, bottom - top)
