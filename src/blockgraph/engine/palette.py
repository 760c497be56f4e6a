"""Colors used by the diagram, plus the legend entries derived from them."""

from __future__ import annotations

from dataclasses import dataclass, replace

from blockgraph.domain.types import BlockCategory, DependencyType


@dataclass(frozen=True)
class Color:
    """sRGB color with a separate alpha in ``[0, 1]``."""

    r: int
    g: int
    b: int
    alpha: float = 1.0

    @classmethod
    def from_rgb(cls, value: int) -> Color:
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def with_opacity(self, alpha: float) -> Color:
        return replace(self, alpha=alpha)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


ACCENT_BLUE = Color.from_rgb(0x4A9EFF)
GREEN = Color.from_rgb(0x40FF90)
GOLD = Color.from_rgb(0xFFD700)
CONFLICT_RED = Color.from_rgb(0xFF4060)
CYCLE_RED = Color.from_rgb(0xFF4040)
ISSUE_ORANGE = Color.from_rgb(0xFF9040)
GREY = Color.from_rgb(0x9E9E9E)
WHITE = Color.from_rgb(0xFFFFFF)

CATEGORY_COLORS: dict[BlockCategory, Color] = {
    BlockCategory.CORE: ACCENT_BLUE,
    BlockCategory.FEATURE: GREEN,
    BlockCategory.PRESENTATION: Color.from_rgb(0xB080FF),
    BlockCategory.BONUS: ISSUE_ORANGE,
}

EDGE_COLORS: dict[DependencyType, Color] = {
    DependencyType.REQUIRES: ACCENT_BLUE,
    DependencyType.ENABLES: GREEN,
    DependencyType.MODIFIES: GOLD,
    DependencyType.CONFLICTS: CONFLICT_RED,
}

# Fill tints relative to the border color.
NODE_FILL_OPACITY = 0.15
DISABLED_FILL_OPACITY = 0.1
GLOW_OPACITY = 0.3
DIMMED_TEXT_OPACITY = 0.54


@dataclass(frozen=True)
class LegendEntry:
    label: str
    color: Color
    dashed: bool = False


NODE_LEGEND: tuple[LegendEntry, ...] = (
    LegendEntry("Enabled", GREEN),
    LegendEntry("Disabled", GREY),
    LegendEntry("Cycle", CYCLE_RED),
)

EDGE_LEGEND: tuple[LegendEntry, ...] = tuple(
    LegendEntry(kind.display_name, EDGE_COLORS[kind], dashed=kind.is_dashed)
    for kind in DependencyType
)
