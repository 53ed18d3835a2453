"""Exception hierarchy for niri-action.

Every failure that should terminate an invocation with a message derives from
NiriActionError. The CLI catches that base class, prints the message and exits
non-zero. Picker cancellation is not an error and never raises.
"""

from typing import Optional


class NiriActionError(Exception):
    """Base class for all niri-action failures."""

    pass


class TransportError(NiriActionError):
    """Raised when the niri socket cannot be reached or an exchange breaks mid-way."""

    pass


class UnhandledError(NiriActionError):
    """Raised when niri rejects a request or answers with an unexpected payload.

    Covers both an explicit ``Err`` reply from the daemon and an action
    that came back with data instead of a bare acknowledgement.
    """

    def __init__(self, err: str):
        self.err = err
        super().__init__(f"Not handled: {err}")


class PartialActionError(UnhandledError):
    """Raised when the rename half of focus-then-rename fails.

    The workspace identified by ``workspace_id`` stays focused with its
    previous name; nothing is rolled back.
    """

    def __init__(self, err: str, workspace_id: int, name: str):
        self.workspace_id = workspace_id
        self.name = name
        super().__init__(
            f"workspace {workspace_id} was focused but could not be renamed to '{name}': {err}"
        )


class SelectionError(NiriActionError):
    """Raised when picker output does not carry a parsable identifier."""

    def __init__(self, line: str, reason: Optional[str] = None):
        self.line = line
        message = f"Can't parse selection {line!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvariantError(NiriActionError):
    """Raised when a listing lacks an entry every niri session is expected to have."""

    pass


class PickerError(NiriActionError):
    """Raised when the picker process cannot be started or talked to."""

    pass


class ConfigError(NiriActionError):
    """Raised when the configuration file is unreadable or invalid."""

    pass


class LaunchError(NiriActionError):
    """Raised when workspace-exec cannot start its command."""

    pass
