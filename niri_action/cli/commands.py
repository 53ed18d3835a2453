"""niri-action command line interface.

Usage:
    niri-action focus-container
    niri-action steal-container
    niri-action focus-workspace
    niri-action move-to-workspace
    niri-action move-workspace-to-output
    niri-action workspace-exec <command> [args...]

Exit codes:
  0 - Action sent, or picker dismissed
  1 - niri-action error (IPC, protocol, selection, configuration)
  2 - Usage error or unexpected failure
"""

import asyncio
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Optional

import click
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..core.config import NiriActionConfig, load_config
from ..core.errors import NiriActionError
from ..core.niri_client import NiriSession
from ..core.orchestrator import ActionOrchestrator
from ..core.picker import Picker
from ..core.workspace_exec import WorkspaceDirectoryMap
from .logging_config import get_logger, setup_logging


logger = get_logger('niri_action.cli')

Operation = Callable[[ActionOrchestrator], Awaitable[bool]]


@dataclass
class CliState:
    """Global options shared by all subcommands."""

    config_file: Optional[Path] = None
    socket_path: Optional[Path] = None


def print_error(console: Console, message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗ Error:[/red] {escape(message)}")


async def run_operation(
    config: NiriActionConfig,
    operation: Operation,
    directory_map: Optional[WorkspaceDirectoryMap] = None,
) -> bool:
    """Open the niri session, run one operation and close the session."""
    picker = Picker(config.picker_command)
    async with NiriSession(config.socket_path, timeout=config.timeout) as session:
        orchestrator = ActionOrchestrator(session, picker, directory_map)
        return await operation(orchestrator)


def execute(state: CliState, operation: Operation, with_directory_map: bool = False) -> None:
    """Run an operation and translate its outcome into an exit status."""
    console = Console(stderr=True)

    try:
        config = load_config(state.config_file)
        if state.socket_path is not None:
            config = config.model_copy(update={"socket_path": state.socket_path})

        directory_map = None
        if with_directory_map:
            directory_map = WorkspaceDirectoryMap.load(
                config.workspace_dirs_file, config.default_directory
            )

        acted = asyncio.run(run_operation(config, operation, directory_map))
        if not acted:
            logger.debug("Nothing selected")

    except NiriActionError as e:
        print_error(console, str(e))
        sys.exit(1)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        console.print(f"[red]Unexpected error: {escape(str(e))}[/red]")
        sys.exit(2)


@click.group(invoke_without_command=True, no_args_is_help=False)
@click.version_option(__version__, prog_name="niri-action", message="%(prog)s v%(version)s")
@click.option('--verbose', '-v', is_flag=True, help='Log actions sent to niri')
@click.option('--debug', is_flag=True, help='Log every IPC exchange and picker run')
@click.option('--config', 'config_file', type=click.Path(dir_okay=False, path_type=Path),
              help='Configuration file (default: $XDG_CONFIG_HOME/niri-action/config.json)')
@click.option('--socket', 'socket_path', type=click.Path(dir_okay=False, path_type=Path),
              help='niri socket (default: $NIRI_SOCKET)')
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool,
        config_file: Optional[Path], socket_path: Optional[Path]):
    """Provides selections of niri windows, workspaces and outputs via fuzzel."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help(), err=True)
        ctx.exit(2)

    setup_logging(verbose=verbose, debug=debug)
    ctx.obj = CliState(config_file=config_file, socket_path=socket_path)


@cli.command('focus-container')
@click.pass_obj
def focus_container(state: CliState):
    """Focus window by name using fuzzel."""
    execute(state, lambda o: o.focus_container())


@cli.command('steal-container')
@click.pass_obj
def steal_container(state: CliState):
    """Steal window into current workspace."""
    execute(state, lambda o: o.steal_container())


@cli.command('focus-workspace')
@click.pass_obj
def focus_workspace(state: CliState):
    """Focus workspace by name using fuzzel.

    Typing a name that is not listed focuses the last workspace and
    renames it to the typed name.
    """
    execute(state, lambda o: o.focus_workspace())


@cli.command('move-to-workspace')
@click.pass_obj
def move_to_workspace(state: CliState):
    """Move currently focused container to workspace."""
    execute(state, lambda o: o.move_to_workspace())


@cli.command('move-workspace-to-output')
@click.pass_obj
def move_workspace_to_output(state: CliState):
    """Move current workspace to output by name."""
    execute(state, lambda o: o.move_workspace_to_output())


@cli.command('workspace-exec', context_settings={
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
})
@click.argument('args', nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
def workspace_exec(state: CliState, args):
    """Execute command in the focused workspace's directory.

    The directory comes from the workspace directory map
    ($XDG_CONFIG_HOME/niri-action/workspaces, one 'name: path' per line).
    """
    execute(state, lambda o: o.workspace_exec(list(args)), with_directory_map=True)


def main() -> int:
    """Console script entry point."""
    return cli(prog_name="niri-action")
