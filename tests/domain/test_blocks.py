"""Tests for block input models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from blockgraph.domain.blocks import Block, BlockDocument
from blockgraph.domain.types import BlockCategory, DependencyType


class TestBlock:
    def test_defaults(self) -> None:
        block = Block(id="rng", name="RNG", category=BlockCategory.CORE)
        assert block.enabled
        assert block.dependencies == []

    def test_dependency_defaults_to_requires(self) -> None:
        block = Block.model_validate(
            {"id": "a", "name": "A", "category": "core", "dependencies": [{"target": "b"}]}
        )
        assert block.dependencies[0].type == DependencyType.REQUIRES

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Block(id="", name="Nameless", category=BlockCategory.CORE)

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Block.model_validate({"id": "a", "name": "A", "category": "audio"})

    def test_frozen(self) -> None:
        block = Block(id="a", name="A", category=BlockCategory.CORE)
        with pytest.raises(ValidationError):
            block.enabled = False  # type: ignore[misc]


class TestBlockDocument:
    def test_empty_document(self) -> None:
        assert BlockDocument.model_validate({}).blocks == []

    def test_rejects_duplicate_ids(self) -> None:
        raw = {
            "blocks": [
                {"id": "a", "name": "A1", "category": "core"},
                {"id": "b", "name": "B", "category": "core"},
                {"id": "a", "name": "A2", "category": "feature"},
            ]
        }
        with pytest.raises(ValidationError, match="duplicate block id"):
            BlockDocument.model_validate(raw)
