"""GraphSettings — CLI flags, environment, and ``blockgraph.toml`` merged.

Highest priority first:

1. keyword arguments (the global CLI flags)
2. ``BLOCKGRAPH_*`` environment variables, ``__`` for nesting
   (``BLOCKGRAPH_CAMERA__MAX_SCALE=3``)
3. the TOML file (``--config`` or walk-up discovery)
4. defaults baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from blockgraph.config.discovery import find_config, read_toml
from blockgraph.config.models import (
    CameraConfig,
    EdgeStyleConfig,
    GraphConfig,
    LayoutConfig,
    NodeStyleConfig,
)

# pydantic-settings builds sources inside ``__init__``; the TOML path is
# handed over out-of-band for the duration of that call.
_pending = threading.local()


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source over an already-located TOML file (or none)."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._values: dict[str, Any] = read_toml(path) if path and path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, field_name in self._values

    def __call__(self) -> dict[str, Any]:
        return self._values


class GraphSettings(BaseSettings):
    """Frozen settings for one CLI invocation.

    Attributes:
        config_path: The TOML file that was read, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BLOCKGRAPH_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    camera: CameraConfig = Field(default_factory=CameraConfig)
    edges: EdgeStyleConfig = Field(default_factory=EdgeStyleConfig)
    nodes: NodeStyleConfig = Field(default_factory=NodeStyleConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_pending, "path", None))
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> GraphSettings:
        """Build settings for a CLI run.

        An explicit *config_path* disables discovery; if it does not name
        a file, no TOML is read at all.
        """
        if config_path:
            explicit = Path(config_path)
            path = explicit if explicit.is_file() else None
        else:
            path = find_config(start_dir)

        _pending.path = path
        try:
            return cls(config_path=path, **cli_flags)
        finally:
            _pending.path = None

    @property
    def graph(self) -> GraphConfig:
        """Layout, camera, edge, and node sections as one GraphConfig."""
        return GraphConfig(
            layout=self.layout,
            camera=self.camera,
            edges=self.edges,
            nodes=self.nodes,
        )
