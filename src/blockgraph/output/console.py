"""Rich Console factory and theme for blockgraph output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from blockgraph.domain.types import BlockCategory
from blockgraph.engine.palette import CATEGORY_COLORS, CYCLE_RED, GREEN, GREY, ISSUE_ORANGE

BG_THEME = Theme(
    {
        "bg.ok": "bold green",
        "bg.error": "bold red",
        "bg.warning": "bold yellow",
        "bg.op": "bold cyan",
        "bg.key": "dim",
        "bg.id": "bold blue",
        "bg.cycle": f"bold {CYCLE_RED.hex}",
        "bg.issue": f"bold {ISSUE_ORANGE.hex}",
        "bg.valid": f"bold {GREEN.hex}",
        "bg.disabled": GREY.hex,
        **{f"bg.category.{c.value}": CATEGORY_COLORS[c].hex for c in BlockCategory},
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=BG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_category(category: str) -> str:
    """Return the Rich style name for a block category."""
    return f"bg.category.{category}" if category in {c.value for c in BlockCategory} else ""
