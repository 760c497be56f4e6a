"""Finding and reading ``blockgraph.toml``.

The file is looked up the way git finds ``.git/``: the start directory
first, then each parent. ``BLOCKGRAPH_CONFIG`` short-circuits the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

from blockgraph.config.models import GraphConfig

CONFIG_FILENAME = "blockgraph.toml"
CONFIG_ENV_VAR = "BLOCKGRAPH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Nearest ``blockgraph.toml`` at or above *start* (default: cwd).

    When ``BLOCKGRAPH_CONFIG`` is set, that path is used instead, or None
    if it does not name a file.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; a syntax error becomes a ClickException naming the file."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> GraphConfig:
    """Diagram config from *path*, or from discovery under *cwd*, or defaults."""
    path = path or find_config(cwd)
    if path is None:
        return GraphConfig()
    return GraphConfig.model_validate(read_toml(path))
