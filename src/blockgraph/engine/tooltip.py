"""Per-node inspector text."""

from __future__ import annotations

from collections.abc import Collection, Iterable

from blockgraph.domain.graph import GraphEdge, GraphNode
from blockgraph.domain.types import DependencyType

CYCLE_WARNING = "⚠ Part of circular dependency"


def describe(
    node: GraphNode,
    cycle_node_ids: Collection[str],
    incoming: Iterable[GraphEdge],
    outgoing: Iterable[GraphEdge],
) -> str:
    """Build the hover/inspector summary for *node*.

    Sections appear in a fixed order (name, status, category, cycle
    warning, "Depends on", "Required by"); sections without entries are
    left out entirely. Only ``requires`` edges are listed, by raw id.
    """
    lines = [
        node.name,
        f"Status: {'Enabled' if node.is_enabled else 'Disabled'}",
        f"Category: {node.category.display_name}",
    ]
    if node.id in cycle_node_ids:
        lines.append(CYCLE_WARNING)

    depends_on = [e.target for e in outgoing if e.type == DependencyType.REQUIRES]
    if depends_on:
        lines.extend(["", "Depends on:"])
        lines.extend(f"  → {target}" for target in depends_on)

    required_by = [e.source for e in incoming if e.type == DependencyType.REQUIRES]
    if required_by:
        lines.extend(["", "Required by:"])
        lines.extend(f"  ← {source}" for source in required_by)

    return "\n".join(lines)
