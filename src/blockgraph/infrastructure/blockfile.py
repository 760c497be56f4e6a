"""Block file loading.

A block file is JSON: ``{"blocks": [...]}`` (a bare list is also
accepted). :class:`FileBlockProvider` re-reads the file on every call so
a reload always sees the current contents.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from blockgraph.domain.blocks import Block, BlockDocument
from blockgraph.domain.types import ErrorCode

logger = logging.getLogger(__name__)


class BlockFileError(Exception):
    """A block file is missing, unparseable, or fails validation."""

    def __init__(self, code: str, message: str, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail or {}


def load_blocks(path: Path) -> list[Block]:
    """Parse and validate the blocks in *path*."""
    if not path.is_file():
        raise BlockFileError(
            ErrorCode.NOT_FOUND, f"Block file not found: {path}", {"path": str(path)}
        )

    try:
        raw: Any = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise BlockFileError(
            ErrorCode.INVALID_BLOCKS,
            f"Invalid JSON in {path}: {exc.msg}",
            {"path": str(path), "line": exc.lineno, "column": exc.colno},
        ) from exc

    if isinstance(raw, list):
        raw = {"blocks": raw}

    try:
        document = BlockDocument.model_validate(raw)
    except ValidationError as exc:
        raise BlockFileError(
            ErrorCode.INVALID_BLOCKS,
            f"Invalid block data in {path}",
            {
                "path": str(path),
                "errors": [
                    {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                    for err in exc.errors()
                ],
            },
        ) from exc

    logger.debug("loaded %d blocks from %s", len(document.blocks), path)
    return list(document.blocks)


class FileBlockProvider:
    """Callable block provider backed by a JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def __call__(self) -> list[Block]:
        return load_blocks(self.path)
