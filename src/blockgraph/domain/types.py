"""Block categories and dependency kinds.

The four categories double as the layout column order; the four
dependency kinds drive edge styling.
"""

from __future__ import annotations

from enum import StrEnum


class BlockCategory(StrEnum):
    """Fixed block groups, declared in layout column order."""

    CORE = "core"
    FEATURE = "feature"
    PRESENTATION = "presentation"
    BONUS = "bonus"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


# Left-to-right column order used by the layered layout.
CATEGORY_ORDER: tuple[BlockCategory, ...] = (
    BlockCategory.CORE,
    BlockCategory.FEATURE,
    BlockCategory.PRESENTATION,
    BlockCategory.BONUS,
)


class DependencyType(StrEnum):
    """Relationship declared by a block towards another block."""

    REQUIRES = "requires"
    ENABLES = "enables"
    MODIFIES = "modifies"
    CONFLICTS = "conflicts"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def is_dashed(self) -> bool:
        """Soft relationships render dashed."""
        return self in (DependencyType.ENABLES, DependencyType.MODIFIES)


class ErrorCode(StrEnum):
    """Failure codes carried by service results."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_BLOCKS = "INVALID_BLOCKS"
