"""Configuration for niri-action.

Settings live in ``$XDG_CONFIG_HOME/niri-action/config.json``. The file is
optional; every key has a default, and a missing file means "all defaults".
"""

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .picker import DEFAULT_PICKER_COMMAND


logger = logging.getLogger('niri_action.config')


def get_config_dir() -> Path:
    """Get niri-action's configuration directory ($XDG_CONFIG_HOME/niri-action)."""
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / "niri-action"


def get_default_config_path() -> Path:
    return get_config_dir() / "config.json"


class NiriActionConfig(BaseModel):
    """User settings for niri-action."""

    socket_path: Optional[Path] = Field(
        default=None,
        description="niri socket path; None uses $NIRI_SOCKET"
    )

    picker_command: List[str] = Field(
        default_factory=lambda: list(DEFAULT_PICKER_COMMAND),
        description="Picker argv; candidates on stdin, pick on stdout"
    )

    workspace_dirs_file: Path = Field(
        default_factory=lambda: get_config_dir() / "workspaces",
        description="File of 'name: path' lines used by workspace-exec"
    )

    default_directory: Path = Field(
        default_factory=Path.home,
        description="Working directory for workspaces without a mapping"
    )

    timeout: Optional[float] = Field(
        default=None,
        description="IPC timeout in seconds; None waits indefinitely"
    )

    @field_validator('picker_command')
    @classmethod
    def validate_picker_command(cls, v: List[str]) -> List[str]:
        """Ensure the picker command names an executable."""
        if not v or not v[0].strip():
            raise ValueError("picker_command must not be empty")
        return v

    @field_validator('workspace_dirs_file', 'default_directory', 'socket_path')
    @classmethod
    def expand_user(cls, v: Optional[Path]) -> Optional[Path]:
        """Expand ~ in configured paths."""
        return v.expanduser() if v is not None else v

    @field_validator('timeout')
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v


def load_config(config_file: Optional[Path] = None) -> NiriActionConfig:
    """Load configuration from disk.

    Args:
        config_file: Path to config.json (default: $XDG_CONFIG_HOME/niri-action/config.json)

    Returns:
        Parsed configuration, defaults if the file does not exist

    Raises:
        ConfigError: If the file cannot be read or fails validation
    """
    if config_file is None:
        config_file = get_default_config_path()

    if not config_file.exists():
        logger.debug(f"No config file at {config_file}, using defaults")
        return NiriActionConfig()

    try:
        with config_file.open("r") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigError(f"Failed to read {config_file}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Failed to read {config_file}: top level must be an object")

    try:
        config = NiriActionConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file}: {e}")

    logger.debug(f"Loaded config from {config_file}")
    return config
