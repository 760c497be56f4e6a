"""Subcommand modules for blockgraph."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group.

    Deferred imports keep ``blockgraph --help`` fast.
    """
    from blockgraph.commands.graph import frame, inspect, layout, show

    cli.add_command(show)
    cli.add_command(layout)
    cli.add_command(inspect)
    cli.add_command(frame)
