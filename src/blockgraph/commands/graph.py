"""Commands: show, layout, inspect, and frame the block dependency diagram."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from blockgraph.commands._base import BgCommand

if TYPE_CHECKING:
    from blockgraph.commands._context import AppContext

_blocks_file = click.argument(
    "blocks_file", type=click.Path(dir_okay=False, path_type=Path)
)


@click.command(
    cls=BgCommand,
    examples="""\
  blockgraph show blocks.json
  blockgraph --json show blocks.json
  blockgraph -q show blocks.json""",
)
@_blocks_file
@click.pass_obj
def show(app: AppContext, blocks_file: Path) -> None:
    """Show the dependency diagram: status badges, nodes, and legend."""
    app.emit(app.graph_service(blocks_file).show())


@click.command(
    cls=BgCommand,
    examples="""\
  blockgraph layout blocks.json
  blockgraph --json layout blocks.json""",
)
@_blocks_file
@click.pass_obj
def layout(app: AppContext, blocks_file: Path) -> None:
    """Print the layered layout position of every node."""
    app.emit(app.graph_service(blocks_file).layout())


@click.command(
    cls=BgCommand,
    examples="""\
  blockgraph inspect blocks.json free_spins
  blockgraph --json inspect blocks.json jackpot""",
)
@_blocks_file
@click.argument("node_id")
@click.pass_obj
def inspect(app: AppContext, blocks_file: Path, node_id: str) -> None:
    """Show the inspector summary for one node."""
    app.emit(app.graph_service(blocks_file).inspect(node_id))


@click.command(
    cls=BgCommand,
    examples="""\
  blockgraph frame blocks.json
  blockgraph frame blocks.json --pan 40 -20 --zoom 1.5
  blockgraph frame blocks.json --pointer 120 80 --tap 120 80
  blockgraph frame blocks.json --hover core --select free_spins""",
)
@_blocks_file
@click.option("--pan", nargs=2, type=float, default=(0.0, 0.0), help="Pan offset DX DY.")
@click.option("--zoom", type=float, default=None, help="Multiplicative zoom factor.")
@click.option("--pointer", nargs=2, type=float, default=None, help="Move the pointer to X Y.")
@click.option("--tap", nargs=2, type=float, default=None, help="Tap at screen point X Y.")
@click.option("--hover", default=None, help="Hover a node by id.")
@click.option("--select", "select_id", default=None, help="Select a node by id.")
@click.pass_obj
def frame(
    app: AppContext,
    blocks_file: Path,
    pan: tuple[float, float],
    zoom: float | None,
    pointer: tuple[float, float] | None,
    tap: tuple[float, float] | None,
    hover: str | None,
    select_id: str | None,
) -> None:
    """Render one frame and summarize its drawing commands."""
    app.emit(
        app.graph_service(blocks_file).frame(
            pan=pan, zoom=zoom, pointer=pointer, tap=tap, hover=hover, select=select_id
        )
    )
