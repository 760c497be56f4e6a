"""Drawing commands and the surfaces that receive them.

The renderer never touches a real canvas; it emits these immutable
commands in paint order to anything implementing :class:`Surface`.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import ClassVar, Protocol

from blockgraph.domain.geometry import Point, Rect
from blockgraph.engine.palette import Color


@dataclass(frozen=True)
class PushTransform:
    """Translate by *translate*, then scale uniformly, until the matching pop."""

    kind: ClassVar[str] = "push_transform"

    translate: Point
    scale: float


@dataclass(frozen=True)
class PopTransform:
    kind: ClassVar[str] = "pop_transform"


@dataclass(frozen=True)
class StrokeCubic:
    """A cubic Bezier stroked as one continuous line."""

    kind: ClassVar[str] = "stroke_cubic"

    start: Point
    control1: Point
    control2: Point
    end: Point
    color: Color
    width: float


@dataclass(frozen=True)
class StrokePolyline:
    """A piece of a flattened curve; dashed edges emit one per dash."""

    kind: ClassVar[str] = "stroke_polyline"

    points: tuple[Point, ...]
    color: Color
    width: float


@dataclass(frozen=True)
class FillPolygon:
    kind: ClassVar[str] = "fill_polygon"

    points: tuple[Point, ...]
    color: Color


@dataclass(frozen=True)
class FillRoundRect:
    """Filled rounded rectangle; ``blur > 0`` asks for a soft-edged glow."""

    kind: ClassVar[str] = "fill_round_rect"

    rect: Rect
    radius: float
    color: Color
    blur: float = 0.0


@dataclass(frozen=True)
class StrokeRoundRect:
    kind: ClassVar[str] = "stroke_round_rect"

    rect: Rect
    radius: float
    color: Color
    width: float


@dataclass(frozen=True)
class DrawText:
    """Pre-wrapped, center-aligned text block centered on *center*."""

    kind: ClassVar[str] = "draw_text"

    lines: tuple[str, ...]
    center: Point
    max_width: float
    color: Color
    font_size: float


@dataclass(frozen=True)
class FillCircle:
    """Status badge; *glyph* names the icon drawn on top (``error``, ``hidden``)."""

    kind: ClassVar[str] = "fill_circle"

    center: Point
    radius: float
    color: Color
    glyph: str | None = None


type DrawCommand = (
    PushTransform
    | PopTransform
    | StrokeCubic
    | StrokePolyline
    | FillPolygon
    | FillRoundRect
    | StrokeRoundRect
    | DrawText
    | FillCircle
)


class Surface(Protocol):
    """Anything that can receive drawing commands in paint order."""

    def draw(self, command: DrawCommand) -> None: ...


class RecordingSurface:
    """Surface that keeps every command, for inspection and tests."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def draw(self, command: DrawCommand) -> None:
        self.commands.append(command)

    def clear(self) -> None:
        self.commands.clear()

    def of_type[T](self, command_type: type[T]) -> list[T]:
        return [c for c in self.commands if isinstance(c, command_type)]

    def kind_counts(self) -> dict[str, int]:
        return dict(Counter(c.kind for c in self.commands))
