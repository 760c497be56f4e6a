"""AppContext — the object every command receives via ``@click.pass_obj``.

Built once by the root group from the merged settings. It sets up
logging, builds a GraphService for the block file a command names, and
prints results: stdout and exit 0 on success, stderr and exit 1 on
failure.
"""

from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING

import click

from blockgraph.config.logging import configure_logging
from blockgraph.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from blockgraph.config.settings import GraphSettings
    from blockgraph.services.graph import GraphService
    from blockgraph.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: GraphSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @cached_property
    def output(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def graph_service(self, blocks_file: Path) -> GraphService:
        """GraphService over *blocks_file*, using the diagram sections of the config."""
        from blockgraph.infrastructure.blockfile import FileBlockProvider
        from blockgraph.services.graph import GraphService

        return GraphService(FileBlockProvider(blocks_file), config=self.settings.graph)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit with status 1 if it failed.

        Warnings already travel inside the JSON payload, so they are only
        echoed to stderr for human and quiet output.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if self.output.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
