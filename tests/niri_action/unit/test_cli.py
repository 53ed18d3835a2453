"""Tests for the niri-action click CLI."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from click.testing import CliRunner

from niri_action import __version__
from niri_action.cli.commands import cli
from niri_action.core.errors import InvariantError, UnhandledError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point config lookups at an empty directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))


class TestUsage:
    """Test top-level usage handling."""

    def test_no_subcommand_prints_usage_and_fails(self, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code != 0
        assert "focus-container" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert f"v{__version__}" in result.output

    def test_unknown_subcommand(self, runner):
        result = runner.invoke(cli, ["focus-everything"])

        assert result.exit_code == 2


class TestExitStatus:
    """Test how operation outcomes map to exit codes."""

    def test_success(self, runner):
        with patch("niri_action.cli.commands.run_operation", new=AsyncMock(return_value=True)):
            result = runner.invoke(cli, ["focus-container"])

        assert result.exit_code == 0

    def test_cancelled_pick_is_success(self, runner):
        with patch("niri_action.cli.commands.run_operation", new=AsyncMock(return_value=False)):
            result = runner.invoke(cli, ["focus-workspace"])

        assert result.exit_code == 0

    def test_protocol_error(self, runner):
        failing = AsyncMock(side_effect=UnhandledError("window not found"))
        with patch("niri_action.cli.commands.run_operation", new=failing):
            result = runner.invoke(cli, ["focus-container"])

        assert result.exit_code == 1
        assert "Not handled: window not found" in result.output

    def test_invariant_error(self, runner):
        failing = AsyncMock(side_effect=InvariantError("No focused workspace"))
        with patch("niri_action.cli.commands.run_operation", new=failing):
            result = runner.invoke(cli, ["steal-container"])

        assert result.exit_code == 1
        assert "No focused workspace" in result.output

    def test_unexpected_error(self, runner):
        failing = AsyncMock(side_effect=KeyError("boom"))
        with patch("niri_action.cli.commands.run_operation", new=failing):
            result = runner.invoke(cli, ["move-to-workspace"])

        assert result.exit_code == 2
        assert "Unexpected error" in result.output

    def test_missing_niri_socket(self, runner, monkeypatch):
        monkeypatch.delenv("NIRI_SOCKET", raising=False)

        result = runner.invoke(cli, ["move-workspace-to-output"])

        assert result.exit_code == 1
        assert "NIRI_SOCKET" in result.output

    def test_unreachable_socket_option(self, runner, tmp_path):
        result = runner.invoke(cli, ["--socket", str(tmp_path / "gone.sock"), "focus-container"])

        assert result.exit_code == 1
        assert "socket not found" in result.output


class TestDispatch:
    """Test each subcommand calls its operation."""

    @pytest.mark.parametrize("command, method", [
        ("focus-container", "focus_container"),
        ("steal-container", "steal_container"),
        ("focus-workspace", "focus_workspace"),
        ("move-to-workspace", "move_to_workspace"),
        ("move-workspace-to-output", "move_workspace_to_output"),
    ])
    def test_subcommand_runs_operation(self, runner, command, method):
        run = AsyncMock(return_value=True)
        with patch("niri_action.cli.commands.run_operation", new=run):
            result = runner.invoke(cli, [command])

        assert result.exit_code == 0
        config, operation, directory_map = run.call_args.args
        assert directory_map is None

        orchestrator = MagicMock()
        setattr(orchestrator, method, AsyncMock(return_value=True))
        assert asyncio.run(operation(orchestrator)) is True
        getattr(orchestrator, method).assert_awaited_once_with()

    def test_workspace_exec_passes_trailing_args(self, runner):
        run = AsyncMock(return_value=True)
        with patch("niri_action.cli.commands.run_operation", new=run):
            result = runner.invoke(cli, ["workspace-exec", "foot", "-e", "htop", "--sort", "cpu"])

        assert result.exit_code == 0
        config, operation, directory_map = run.call_args.args
        assert directory_map is not None

        orchestrator = MagicMock()
        orchestrator.workspace_exec = AsyncMock(return_value=True)
        asyncio.run(operation(orchestrator))
        orchestrator.workspace_exec.assert_awaited_once_with(["foot", "-e", "htop", "--sort", "cpu"])

    def test_workspace_exec_requires_command(self, runner):
        result = runner.invoke(cli, ["workspace-exec"])

        assert result.exit_code == 2

    def test_socket_option_overrides_config(self, runner, tmp_path):
        run = AsyncMock(return_value=True)
        with patch("niri_action.cli.commands.run_operation", new=run):
            runner.invoke(cli, ["--socket", str(tmp_path / "niri.sock"), "focus-container"])

        config = run.call_args.args[0]
        assert config.socket_path == tmp_path / "niri.sock"
