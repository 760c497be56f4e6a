"""DependencyResolver — networkx-backed analysis of a block list.

Rebuilt per call from the blocks it is given; no state survives between
calls. Cycles are searched in the ``requires`` subgraph only.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import networkx as nx

from blockgraph.domain.blocks import Block
from blockgraph.domain.graph import (
    DependencyCycle,
    GraphEdge,
    GraphNode,
    MissingDependency,
    ResolverConflict,
    ResolverGraphData,
    ResolverResult,
    ResolverWarning,
)
from blockgraph.domain.types import DependencyType

logger = logging.getLogger(__name__)

type _Graph = nx.DiGraph


class DependencyResolver:
    """Computes visualization data and dependency issues for blocks."""

    def visualization_data(self, blocks: Sequence[Block]) -> ResolverGraphData:
        """One node per block, one edge per declared dependency, in input order."""
        nodes = [
            GraphNode(id=b.id, name=b.name, category=b.category, is_enabled=b.enabled)
            for b in blocks
        ]
        edges = [
            GraphEdge(source=b.id, target=d.target, type=d.type, description=d.description)
            for b in blocks
            for d in b.dependencies
        ]
        return ResolverGraphData(nodes=nodes, edges=edges)

    def resolve(self, blocks: Sequence[Block]) -> ResolverResult:
        """Report cycles, missing requirements, conflicts, and suggestions."""
        if not blocks:
            return ResolverResult()

        by_id = {b.id: b for b in blocks}
        g = self._requires_graph(blocks)

        cycles = [DependencyCycle(path=list(c)) for c in nx.simple_cycles(g)]
        missing = self._missing_dependencies(blocks, by_id)
        conflicts = self._conflicts(blocks, by_id)
        warnings = self._warnings(blocks, by_id)

        is_valid = not cycles and not missing and not any(c.is_blocking for c in conflicts)
        sorted_ids = list(nx.topological_sort(g.reverse(copy=False))) if not cycles else []

        logger.debug(
            "resolved %d blocks: cycles=%d missing=%d conflicts=%d warnings=%d",
            len(blocks),
            len(cycles),
            len(missing),
            len(conflicts),
            len(warnings),
        )
        return ResolverResult(
            is_valid=is_valid,
            sorted_block_ids=sorted_ids,
            cycles=cycles,
            missing_dependencies=missing,
            conflicts=conflicts,
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _requires_graph(blocks: Sequence[Block]) -> _Graph:
        """DiGraph of ``requires`` edges between known blocks (dependent -> dependency)."""
        g: _Graph = nx.DiGraph()
        g.add_nodes_from(b.id for b in blocks)
        known = set(g.nodes)
        for block in blocks:
            for dep in block.dependencies:
                if dep.type == DependencyType.REQUIRES and dep.target in known:
                    g.add_edge(block.id, dep.target)
        return g

    @staticmethod
    def _missing_dependencies(
        blocks: Sequence[Block], by_id: dict[str, Block]
    ) -> list[MissingDependency]:
        missing: list[MissingDependency] = []
        for block in blocks:
            if not block.enabled:
                continue
            for dep in block.dependencies:
                if dep.type != DependencyType.REQUIRES:
                    continue
                required = by_id.get(dep.target)
                if required is None:
                    reason = dep.description
                elif not required.enabled:
                    reason = f"{dep.target} is disabled but required"
                else:
                    continue
                missing.append(
                    MissingDependency(
                        block_id=block.id, required_block_id=dep.target, reason=reason
                    )
                )
        return missing

    @staticmethod
    def _conflicts(blocks: Sequence[Block], by_id: dict[str, Block]) -> list[ResolverConflict]:
        """Conflicts between two enabled blocks, one per unordered pair."""
        seen: set[frozenset[str]] = set()
        conflicts: list[ResolverConflict] = []
        for block in blocks:
            if not block.enabled:
                continue
            for dep in block.dependencies:
                if dep.type != DependencyType.CONFLICTS:
                    continue
                other = by_id.get(dep.target)
                if other is None or not other.enabled:
                    continue
                key = frozenset((block.id, dep.target))
                if key in seen:
                    continue
                seen.add(key)
                conflicts.append(
                    ResolverConflict(
                        block_id_a=block.id,
                        block_id_b=dep.target,
                        description=dep.description or "Blocks conflict with each other",
                    )
                )
        return conflicts

    @staticmethod
    def _warnings(blocks: Sequence[Block], by_id: dict[str, Block]) -> list[ResolverWarning]:
        warnings: list[ResolverWarning] = []
        for block in blocks:
            if not block.enabled:
                continue
            for dep in block.dependencies:
                if dep.type != DependencyType.ENABLES:
                    continue
                target = by_id.get(dep.target)
                if target is None or not target.enabled:
                    warnings.append(
                        ResolverWarning(
                            block_id=block.id,
                            message=f'Optional block "{dep.target}" could enhance {block.name}',
                            category="suggestion",
                        )
                    )
        return warnings
