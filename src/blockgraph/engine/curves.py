"""Edge geometry — anchors, cubic curves, flattening, dashing, arrowheads.

Dashes are measured along the flattened curve by arc length; each edge
starts its own pattern at distance 0.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from itertools import accumulate

from blockgraph.config.models import LayoutConfig
from blockgraph.domain.geometry import Point

type Polyline = tuple[Point, ...]


def edge_anchors(source: Point, target: Point, layout: LayoutConfig) -> tuple[Point, Point]:
    """Source node's right-middle and target node's left-middle, in world space."""
    half = layout.node_height / 2
    return Point(source.x + layout.node_width, source.y + half), Point(target.x, target.y + half)


def control_points(start: Point, end: Point) -> tuple[Point, Point]:
    """Both controls sit at the horizontal midpoint, each at its endpoint's height."""
    mid_x = start.x + (end.x - start.x) / 2
    return Point(mid_x, start.y), Point(mid_x, end.y)


def cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    u = 1.0 - t
    a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
    return Point(
        a * p0.x + b * p1.x + c * p2.x + d * p3.x,
        a * p0.y + b * p1.y + c * p2.y + d * p3.y,
    )


def flatten_cubic(p0: Point, p1: Point, p2: Point, p3: Point, samples: int) -> Polyline:
    """Sample the curve at *samples* equal parameter steps (``samples + 1`` points)."""
    return tuple(cubic_point(p0, p1, p2, p3, i / samples) for i in range(samples + 1))


def _cumulative_lengths(points: Sequence[Point]) -> list[float]:
    steps = (a.distance_to(b) for a, b in zip(points, points[1:], strict=False))
    return list(accumulate(steps, initial=0.0))


def _point_at(points: Sequence[Point], cum: Sequence[float], distance: float) -> Point:
    i = min(max(bisect_right(cum, distance) - 1, 0), len(points) - 2)
    seg = cum[i + 1] - cum[i]
    t = 0.0 if seg == 0 else (distance - cum[i]) / seg
    a, b = points[i], points[i + 1]
    return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def extract(points: Sequence[Point], cum: Sequence[float], start: float, end: float) -> Polyline:
    """Sub-path of *points* between arc-length distances *start* and *end*."""
    interior = [p for p, d in zip(points, cum, strict=True) if start < d < end]
    return (_point_at(points, cum, start), *interior, _point_at(points, cum, end))


def path_length(points: Sequence[Point]) -> float:
    return _cumulative_lengths(points)[-1] if len(points) > 1 else 0.0


def dash_polyline(points: Sequence[Point], dash: float, gap: float) -> list[Polyline]:
    """Split a polyline into drawn dashes of length *dash* separated by *gap*.

    The final dash is cut short at the end of the path. A path of zero
    length yields no dashes.
    """
    if len(points) < 2:
        return []
    cum = _cumulative_lengths(points)
    total = cum[-1]
    dashes: list[Polyline] = []
    distance = 0.0
    while distance < total:
        dashes.append(extract(points, cum, distance, min(distance + dash, total)))
        distance += dash + gap
    return dashes


def arrowhead(tip: Point, size: float) -> Polyline:
    """Triangle pointing right with its tip at *tip*.

    Orientation is fixed regardless of the curve's tangent at the tip.
    """
    return (
        tip,
        Point(tip.x - size, tip.y - size / 2),
        Point(tip.x - size, tip.y + size / 2),
    )
