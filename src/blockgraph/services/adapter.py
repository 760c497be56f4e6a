"""Graph data adapter — resolver output to the viewer's input shape.

The resolver is an external collaborator; anything with the two
:class:`BlockResolver` methods will do.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from blockgraph.domain.blocks import Block
from blockgraph.domain.graph import (
    GraphEdge,
    GraphNode,
    ResolverGraphData,
    ResolverResult,
    cycle_node_ids,
)

type BlockProvider = Callable[[], Sequence[Block]]


class BlockResolver(Protocol):
    def visualization_data(self, blocks: Sequence[Block]) -> ResolverGraphData: ...

    def resolve(self, blocks: Sequence[Block]) -> ResolverResult: ...


@dataclass(frozen=True)
class GraphSnapshot:
    """Everything the viewer draws for one block list."""

    data: ResolverGraphData
    result: ResolverResult
    cycle_node_ids: frozenset[str]

    @property
    def nodes(self) -> list[GraphNode]:
        return self.data.nodes

    @property
    def edges(self) -> list[GraphEdge]:
        return self.data.edges


def to_snapshot(data: ResolverGraphData, result: ResolverResult) -> GraphSnapshot:
    """Pass nodes and edges through unchanged; derive the highlight set."""
    return GraphSnapshot(data=data, result=result, cycle_node_ids=cycle_node_ids(result))


def load_snapshot(blocks: Sequence[Block], resolver: BlockResolver) -> GraphSnapshot:
    return to_snapshot(resolver.visualization_data(blocks), resolver.resolve(blocks))
