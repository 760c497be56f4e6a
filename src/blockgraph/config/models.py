"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, blockgraph.toml only contains
overrides. An empty (or absent) file reproduces the stock diagram.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class LayoutConfig(BaseModel):
    """[layout] section — node size and column/row spacing (world units)."""

    model_config = {"frozen": True}

    node_width: float = Field(default=140.0, gt=0)
    node_height: float = Field(default=60.0, gt=0)
    horizontal_spacing: float = 180.0
    vertical_spacing: float = 100.0
    margin_x: float = 50.0
    margin_y: float = 50.0


class CameraConfig(BaseModel):
    """[camera] section — zoom limits and stepper increment."""

    model_config = {"frozen": True}

    min_scale: float = Field(default=0.5, gt=0)
    max_scale: float = Field(default=2.0, gt=0)
    zoom_step: float = Field(default=0.1, gt=0)

    @model_validator(mode="after")
    def _check_range(self) -> CameraConfig:
        if not self.min_scale <= 1.0 <= self.max_scale:
            msg = "camera scale range must include 1.0 (min_scale <= 1.0 <= max_scale)"
            raise ValueError(msg)
        return self


class EdgeStyleConfig(BaseModel):
    """[edges] section."""

    model_config = {"frozen": True}

    dash_length: float = Field(default=5.0, gt=0)
    gap_length: float = Field(default=3.0, ge=0)
    arrow_size: float = 8.0
    stroke_width: float = 1.5
    cycle_stroke_width: float = 2.5
    curve_samples: int = Field(default=64, ge=1)


class NodeStyleConfig(BaseModel):
    """[nodes] section."""

    model_config = {"frozen": True}

    corner_radius: float = 8.0
    glow_inflate: float = 4.0
    glow_blur: float = 8.0
    label_padding: float = 16.0
    label_max_lines: int = Field(default=2, ge=1)
    font_size: float = Field(default=11.0, gt=0)
    stroke_width: float = 1.5
    hover_stroke_width: float = 2.0
    selected_stroke_width: float = 2.5


class GraphConfig(BaseModel):
    """Root model for the whole ``blockgraph.toml`` file."""

    model_config = {"frozen": True}

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    camera: CameraConfig = Field(default_factory=CameraConfig)
    edges: EdgeStyleConfig = Field(default_factory=EdgeStyleConfig)
    nodes: NodeStyleConfig = Field(default_factory=NodeStyleConfig)
