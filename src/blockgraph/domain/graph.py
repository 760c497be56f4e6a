"""Graph snapshot and resolver result models.

A snapshot is rebuilt from scratch whenever the block list changes;
nothing here is mutated after construction.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from blockgraph.domain.types import BlockCategory, DependencyType


class GraphNode(BaseModel):
    """A block as seen by the graph: identity plus display attributes."""

    model_config = {"frozen": True}

    id: str
    name: str
    category: BlockCategory
    is_enabled: bool = True


class GraphEdge(BaseModel):
    """A directed, typed relationship between two node ids.

    Serialized with ``from``/``to`` keys. Parallel edges between the same
    pair are allowed and drawn independently.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    type: DependencyType
    description: str | None = None


class DependencyCycle(BaseModel):
    """Node ids along a closed chain of ``requires`` edges."""

    model_config = {"frozen": True}

    path: list[str]

    def __str__(self) -> str:
        if not self.path:
            return "Cycle: (empty)"
        return "Cycle: " + " → ".join([*self.path, self.path[0]])


class MissingDependency(BaseModel):
    """An enabled block requires a block that is absent or disabled."""

    model_config = {"frozen": True}

    block_id: str
    required_block_id: str
    reason: str | None = None


class ResolverConflict(BaseModel):
    """Two enabled blocks that declare a conflict."""

    model_config = {"frozen": True}

    block_id_a: str
    block_id_b: str
    description: str
    severity: int = 2  # 0=info, 1=warning, 2=error, 3=critical

    @property
    def is_blocking(self) -> bool:
        return self.severity >= 2


class ResolverWarning(BaseModel):
    """Non-critical finding about a single block."""

    model_config = {"frozen": True}

    block_id: str
    message: str
    category: str = "general"


class ResolverResult(BaseModel):
    """Outcome of dependency resolution.

    Only the cycle membership and the issue counts are consumed by the
    viewer; the remaining fields are carried for display.
    """

    model_config = {"frozen": True}

    is_valid: bool = True
    sorted_block_ids: list[str] = Field(default_factory=list)
    cycles: list[DependencyCycle] = Field(default_factory=list)
    missing_dependencies: list[MissingDependency] = Field(default_factory=list)
    conflicts: list[ResolverConflict] = Field(default_factory=list)
    warnings: list[ResolverWarning] = Field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        return bool(self.cycles or self.conflicts or self.warnings or self.missing_dependencies)

    @property
    def issue_count(self) -> int:
        """Missing dependencies plus conflicts (cycles are counted separately)."""
        return len(self.missing_dependencies) + len(self.conflicts)


class ResolverGraphData(BaseModel):
    """Nodes and edges handed to the viewer, with edge lookups."""

    model_config = {"frozen": True}

    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)

    def incoming_edges(self, node_id: str) -> list[GraphEdge]:
        return [e for e in self.edges if e.target == node_id]

    def outgoing_edges(self, node_id: str) -> list[GraphEdge]:
        return [e for e in self.edges if e.source == node_id]

    def edges_of_type(self, edge_type: DependencyType) -> list[GraphEdge]:
        return [e for e in self.edges if e.type == edge_type]

    def node(self, node_id: str) -> GraphNode | None:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None


def cycle_node_ids(result: ResolverResult) -> frozenset[str]:
    """Union of every cycle path — the set of highlighted node ids."""
    members: set[str] = set()
    for cycle in result.cycles:
        members.update(cycle.path)
    return frozenset(members)
