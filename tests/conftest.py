"""Shared pytest fixtures and test helpers for blockgraph tests."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from blockgraph.domain.blocks import Block, BlockDependency
from blockgraph.domain.graph import GraphNode

# A small slot-game setup: two core blocks, one per remaining category,
# one disabled bonus, and one dashed edge of each soft kind.
SAMPLE_BLOCKS: list[dict[str, Any]] = [
    {"id": "rng", "name": "Random Number Generator", "category": "core"},
    {
        "id": "engine",
        "name": "Slot Engine",
        "category": "core",
        "dependencies": [{"target": "rng"}],
    },
    {
        "id": "free_spins",
        "name": "Free Spins",
        "category": "feature",
        "dependencies": [
            {"target": "engine"},
            {"target": "jackpot", "type": "enables"},
        ],
    },
    {
        "id": "hud",
        "name": "HUD",
        "category": "presentation",
        "dependencies": [
            {"target": "engine"},
            {"target": "free_spins", "type": "modifies"},
        ],
    },
    {
        "id": "jackpot",
        "name": "Jackpot",
        "category": "bonus",
        "enabled": False,
        "dependencies": [{"target": "free_spins"}],
    },
]

# alpha <-> beta form a requires-cycle; gamma hangs off it.
CYCLE_BLOCKS: list[dict[str, Any]] = [
    {"id": "alpha", "name": "Alpha", "category": "core", "dependencies": [{"target": "beta"}]},
    {"id": "beta", "name": "Beta", "category": "feature", "dependencies": [{"target": "alpha"}]},
    {"id": "gamma", "name": "Gamma", "category": "feature", "dependencies": [{"target": "alpha"}]},
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_blocks() -> list[Block]:
    return [Block.model_validate(b) for b in SAMPLE_BLOCKS]


@pytest.fixture
def cycle_blocks() -> list[Block]:
    return [Block.model_validate(b) for b in CYCLE_BLOCKS]


@pytest.fixture
def blocks_file(tmp_path: Path) -> Path:
    """The sample blocks written to a JSON block file."""
    return write_blocks(tmp_path / "blocks.json", SAMPLE_BLOCKS)


@pytest.fixture
def cycle_blocks_file(tmp_path: Path) -> Path:
    return write_blocks(tmp_path / "cycle.json", CYCLE_BLOCKS)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config override in the environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BLOCKGRAPH_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_blocks(path: Path, blocks: list[dict[str, Any]]) -> Path:
    path.write_text(json.dumps({"blocks": blocks}), encoding="utf-8")
    return path


def make_block(
    block_id: str,
    category: str = "core",
    *,
    enabled: bool = True,
    deps: Iterable[tuple[str, str]] = (),
) -> Block:
    """Build a Block; *deps* are ``(target, type)`` pairs."""
    return Block(
        id=block_id,
        name=block_id.replace("_", " ").title(),
        category=category,
        enabled=enabled,
        dependencies=[BlockDependency(target=t, type=ty) for t, ty in deps],
    )


def make_node(
    node_id: str,
    category: str = "core",
    *,
    enabled: bool = True,
    name: str | None = None,
) -> GraphNode:
    return GraphNode(
        id=node_id,
        name=name or node_id.replace("_", " ").title(),
        category=category,
        is_enabled=enabled,
    )
