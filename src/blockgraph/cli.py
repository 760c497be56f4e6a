"""Root CLI group: global output flags, settings, and command registration."""

from __future__ import annotations

import click

from blockgraph import __version__
from blockgraph.commands import register_commands
from blockgraph.commands._base import BgGroup
from blockgraph.commands._context import AppContext
from blockgraph.config.settings import GraphSettings


@click.group(
    cls=BgGroup,
    invoke_without_command=True,
    examples="""\
  blockgraph show blocks.json
  blockgraph --json layout blocks.json
  blockgraph -c diagram.toml frame blocks.json --zoom 1.5""",
)
@click.version_option(version=__version__, prog_name="blockgraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c", "--config", "config_path", default=None, help="Use this TOML file instead of discovery."
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """blockgraph — inspect and render block dependency diagrams."""
    ctx.obj = AppContext(
        GraphSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
