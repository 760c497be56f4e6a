"""Tests for the Rich console factory and theme."""

from __future__ import annotations

from rich.text import Text

from blockgraph.output.console import BG_THEME, create_console, get_output, style_for_category


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print(Text("hello", style="bg.ok"))
        assert get_output(console) == "hello\n"

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_theme_has_category_styles(self) -> None:
        for category in ("core", "feature", "presentation", "bonus"):
            assert f"bg.category.{category}" in BG_THEME.styles


class TestStyleForCategory:
    def test_known_category(self) -> None:
        assert style_for_category("core") == "bg.category.core"

    def test_unknown_category(self) -> None:
        assert style_for_category("audio") == ""
