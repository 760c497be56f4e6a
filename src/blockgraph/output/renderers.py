"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from blockgraph.output.console import create_console, get_output, style_for_category

if TYPE_CHECKING:
    from rich.console import Console

    from blockgraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: node ids, or a status line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if isinstance(item, dict) and "id" in item)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="bg.ok"), Text(f"  {result.op}", style="bg.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="bg.key")
    v = Text(str(value), style="bg.id" if key == "id" or key.endswith("_id") else "")
    console.print(k, v, sep="")


def _fmt_coord(value: Any) -> str:
    return "-" if value is None else f"{float(value):g}"


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="bg.error"),
        Text(f"  {result.op}", style="bg.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Graph renderers ───────────────────────────────────────────────────


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Header badges, node table, and legend."""
    d = result.data
    header = d.get("header", {})

    title = Text("DEPENDENCY GRAPH", style="bold")
    badges: list[Text] = []
    if header.get("cycle_badge"):
        badges.append(Text(f"[{header['cycle_badge']}]", style="bg.cycle"))
    issue_style = "bg.issue" if header.get("has_issues") else "bg.valid"
    badges.append(Text(f"[{header.get('issue_badge', 'Valid')}]", style=issue_style))
    console.print(title, *badges)
    console.print(
        Text(f"  {d.get('node_count', 0)} nodes, {d.get('edge_count', 0)} edges", style="dim")
    )

    for path in d.get("cycles", []):
        if path:
            console.print(Text("  cycle: " + " → ".join([*path, path[0]]), style="bg.cycle"))

    items = d.get("items", [])
    if items:
        console.print()
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("ID", style="bg.id", no_wrap=True)
        table.add_column("Name")
        table.add_column("Category")
        table.add_column("X", justify="right")
        table.add_column("Y", justify="right")
        table.add_column("Status")
        for item in items:
            category = str(item.get("category", ""))
            if item.get("in_cycle"):
                status = Text("cycle", style="bg.cycle")
            elif not item.get("enabled", True):
                status = Text("disabled", style="bg.disabled")
            else:
                status = Text("enabled")
            table.add_row(
                str(item.get("id", "")),
                str(item.get("name", "")),
                Text(category, style=style_for_category(category)),
                _fmt_coord(item.get("x")),
                _fmt_coord(item.get("y")),
                status,
            )
        console.print(table)

    legend = d.get("legend", {})
    if legend:
        console.print()
        parts = [Text("  nodes: ", style="bg.key")]
        for entry in legend.get("nodes", []):
            parts.append(Text(f"■ {entry['label']}  ", style=entry["color"]))
        console.print(*parts, sep="")
        parts = [Text("  edges: ", style="bg.key")]
        for entry in legend.get("edges", []):
            stroke = "╌╌▶" if entry.get("dashed") else "──▶"
            parts.append(Text(f"{stroke} {entry['label']}  ", style=entry["color"]))
        console.print(*parts, sep="")

    if verbose:
        _field(console, "zoom", d.get("zoom", "100%"))


def _render_layout(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "count", d.get("count", 0))
    _field(console, "columns", d.get("columns", 0))

    items = d.get("items", [])
    if items:
        table = Table(show_header=True, pad_edge=False, expand=False)
        table.add_column("ID", style="bg.id", no_wrap=True)
        table.add_column("Column", justify="right")
        table.add_column("X", justify="right")
        table.add_column("Y", justify="right")
        for item in items:
            table.add_row(
                str(item["id"]),
                str(item.get("column", "")),
                _fmt_coord(item.get("x")),
                _fmt_coord(item.get("y")),
            )
        console.print(table)

    bounds = d.get("bounds")
    if verbose and bounds:
        _field(
            console,
            "bounds",
            f"{bounds['left']:g},{bounds['top']:g} {bounds['width']:g}x{bounds['height']:g}",
        )


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    # Plain text: node names and ids must not be read as markup.
    console.print(Text(str(result.data.get("text", ""))))


def _render_frame(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "zoom", d.get("zoom", ""))
    pan = d.get("pan", [0, 0])
    _field(console, "pan", f"{_fmt_coord(pan[0])}, {_fmt_coord(pan[1])}")
    _field(console, "hovered", d.get("hovered") or "-")
    _field(console, "selected", d.get("selected") or "-")
    _field(console, "total", d.get("total", 0))
    for kind, count in sorted(d.get("commands", {}).items()):
        console.print(f"    {kind}: {count}")
    if d.get("tooltip"):
        console.print()
        console.print(Text(d["tooltip"], style="dim"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "show": _render_show,
    "layout": _render_layout,
    "inspect": _render_inspect,
    "frame": _render_frame,
}
