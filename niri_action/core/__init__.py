"""Core IPC, selection and orchestration logic for niri-action."""

from .dispatcher import query, run_action
from .errors import (
    ConfigError,
    InvariantError,
    LaunchError,
    NiriActionError,
    PartialActionError,
    PickerError,
    SelectionError,
    TransportError,
    UnhandledError,
)
from .niri_client import NiriSession, get_default_socket_path
from .orchestrator import ActionOrchestrator
from .picker import Picker

__all__ = [
    "ActionOrchestrator",
    "ConfigError",
    "InvariantError",
    "LaunchError",
    "NiriActionError",
    "NiriSession",
    "PartialActionError",
    "Picker",
    "PickerError",
    "SelectionError",
    "TransportError",
    "UnhandledError",
    "get_default_socket_path",
    "query",
    "run_action",
]
