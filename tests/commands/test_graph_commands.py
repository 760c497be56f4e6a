"""Tests for the show, layout, inspect, and frame commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from blockgraph.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestShowCommand:
    def test_show(self, cli_runner: CliRunner, blocks_file: Path) -> None:
        result = cli_runner.invoke(cli, ["show", str(blocks_file)])
        assert result.exit_code == 0
        assert "DEPENDENCY GRAPH" in result.output
        assert "Slot Engine" in result.output
        assert "WARNING: Optional block" in result.output

    def test_show_json(self, cli_runner: CliRunner, blocks_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", str(blocks_file)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["node_count"] == 5

    def test_show_cycles(self, cli_runner: CliRunner, cycle_blocks_file: Path) -> None:
        result = cli_runner.invoke(cli, ["show", str(cycle_blocks_file)])
        assert result.exit_code == 0
        assert "1 cycle(s)" in result.output

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["show", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "Block file not found" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output
        assert "blockgraph show blocks.json" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
class TestLayoutCommand:
    def test_quiet_lists_ids(self, cli_runner: CliRunner, blocks_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "layout", str(blocks_file)])
        assert result.exit_code == 0
        assert result.output.split() == ["rng", "engine", "free_spins", "hud", "jackpot"]

    def test_config_file(self, cli_runner: CliRunner, blocks_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text("[layout]\nhorizontal_spacing = 200\n")
        result = cli_runner.invoke(
            cli, ["--json", "-c", str(config), "layout", str(blocks_file)]
        )
        assert result.exit_code == 0
        items = {i["id"]: i for i in json.loads(result.output)["data"]["items"]}
        assert items["free_spins"]["x"] == 250

    def test_discovered_config(
        self, cli_runner: CliRunner, blocks_file: Path, tmp_path: Path
    ) -> None:
        (tmp_path / "blockgraph.toml").write_text("[layout]\nmargin_x = 0\n")
        result = cli_runner.invoke(cli, ["--json", "layout", str(blocks_file)])
        items = {i["id"]: i for i in json.loads(result.output)["data"]["items"]}
        assert items["rng"]["x"] == 0


@pytest.mark.usefixtures("_isolated_cwd")
class TestInspectCommand:
    def test_inspect(self, cli_runner: CliRunner, blocks_file: Path) -> None:
        result = cli_runner.invoke(cli, ["inspect", str(blocks_file), "free_spins"])
        assert result.exit_code == 0
        assert result.output.startswith("Free Spins\nStatus: Enabled")
        assert "  → engine" in result.output

    def test_unknown_node(self, cli_runner: CliRunner, blocks_file: Path) -> None:
        result = cli_runner.invoke(cli, ["inspect", str(blocks_file), "ghost"])
        assert result.exit_code == 1
        assert "ghost" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
class TestFrameCommand:
    def test_default_frame(self, cli_runner: CliRunner, blocks_file: Path) -> None:
        result = cli_runner.invoke(cli, ["frame", str(blocks_file)])
        assert result.exit_code == 0
        assert "zoom: 100%" in result.output
        assert "stroke_cubic: 4" in result.output

    def test_camera_options(self, cli_runner: CliRunner, blocks_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "frame", str(blocks_file), "--pan", "40", "20", "--zoom", "10"]
        )
        data = json.loads(result.output)["data"]
        assert data["zoom"] == "200%"
        assert data["pan"] == [40.0, 20.0]

    def test_pointer_and_tap(self, cli_runner: CliRunner, blocks_file: Path) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "frame", str(blocks_file), "--pointer", "60", "60", "--tap", "60", "160"],
        )
        data = json.loads(result.output)["data"]
        assert data["hovered"] == "rng"
        assert data["selected"] == "engine"
        assert data["tooltip"].startswith("Random Number Generator")

    def test_unknown_hover(self, cli_runner: CliRunner, blocks_file: Path) -> None:
        result = cli_runner.invoke(cli, ["frame", str(blocks_file), "--hover", "ghost"])
        assert result.exit_code == 1
