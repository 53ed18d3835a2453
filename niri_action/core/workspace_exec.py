"""Run commands in a directory chosen by the focused workspace's name.

The mapping file holds one ``name: path`` entry per line, for example::

    # workspace: directory
    mail: ~/Mail
    nixos: ~/src/nixos-config

Blank lines and lines starting with ``#`` are ignored. Workspaces that are
unnamed or not listed run in the default directory.
"""

import logging
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from .errors import ConfigError, LaunchError


logger = logging.getLogger('niri_action.workspace_exec')


class WorkspaceDirectoryMap:
    """Workspace name to working directory lookup."""

    def __init__(self, directories: Dict[str, Path], default_directory: Path):
        self.directories = directories
        self.default_directory = default_directory

    @classmethod
    def parse(cls, text: str, default_directory: Path) -> "WorkspaceDirectoryMap":
        """Parse mapping file contents.

        Raises:
            ConfigError: If a non-comment line has no ``name: path`` shape
        """
        directories: Dict[str, Path] = {}
        for lineno, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            name, sep, path = line.partition(":")
            name, path = name.strip(), path.strip()
            if not sep or not name or not path:
                raise ConfigError(f"Line {lineno}: expected 'name: path', got {raw!r}")
            directories[name] = Path(path).expanduser()
        return cls(directories, default_directory)

    @classmethod
    def load(cls, mapping_file: Path, default_directory: Path) -> "WorkspaceDirectoryMap":
        """Load the mapping file; a missing file gives an empty mapping.

        Raises:
            ConfigError: If the file exists but cannot be read or parsed
        """
        if not mapping_file.exists():
            logger.debug(f"No workspace directory map at {mapping_file}")
            return cls({}, default_directory)

        try:
            text = mapping_file.read_text()
        except OSError as e:
            raise ConfigError(f"Failed to read {mapping_file}: {e}")

        try:
            return cls.parse(text, default_directory)
        except ConfigError as e:
            raise ConfigError(f"{mapping_file}: {e}")

    def directory_for(self, workspace_name: Optional[str]) -> Path:
        if workspace_name is not None and workspace_name in self.directories:
            return self.directories[workspace_name]
        return self.default_directory


def launch(args: List[str], cwd: Path) -> subprocess.Popen:
    """Start a detached command in the given directory.

    Args:
        args: Command argv
        cwd: Working directory

    Returns:
        The started process (not waited on)

    Raises:
        LaunchError: If args is empty or the command cannot be started
    """
    if not args:
        raise LaunchError("No command given")

    try:
        process = subprocess.Popen(
            args,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            start_new_session=True  # Detach from parent
        )
    except FileNotFoundError as e:
        raise LaunchError(f"Failed to launch '{args[0]}': {e}")
    except OSError as e:
        raise LaunchError(f"Failed to launch '{args[0]}' in {cwd}: {e}")

    logger.info(f"Launched {args[0]} (PID: {process.pid}, cwd: {cwd})")
    return process
