"""Block input models — the few block attributes the graph needs.

Blocks are what the host tool hands over; everything else in the graph
is derived from them by a resolver.
"""

from __future__ import annotations

from collections import Counter

from pydantic import BaseModel, Field, model_validator

from blockgraph.domain.types import BlockCategory, DependencyType


class BlockDependency(BaseModel):
    """A dependency declared by one block on another."""

    model_config = {"frozen": True}

    target: str
    type: DependencyType = DependencyType.REQUIRES
    description: str | None = None


class Block(BaseModel):
    """A configurable unit of the authoring tool."""

    model_config = {"frozen": True}

    id: str = Field(min_length=1)
    name: str
    category: BlockCategory
    enabled: bool = True
    dependencies: list[BlockDependency] = Field(default_factory=list)


class BlockDocument(BaseModel):
    """Top-level shape of a block file: ``{"blocks": [...]}``."""

    model_config = {"frozen": True}

    blocks: list[Block] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> BlockDocument:
        counts = Counter(b.id for b in self.blocks)
        duplicates = sorted(block_id for block_id, n in counts.items() if n > 1)
        if duplicates:
            msg = f"duplicate block id(s): {', '.join(duplicates)}"
            raise ValueError(msg)
        return self
