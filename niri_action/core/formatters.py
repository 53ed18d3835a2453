"""Single-line listings of niri entities for the picker.

Every line starts with the entity's identifier followed by ``": "``. That
prefix is what the selection resolver parses back, so identifiers must never
contain a colon (niri IDs are integers and connector names never do).
"""

from typing import List, Optional

from ..models.entities import OutputInfo, WindowInfo, WorkspaceInfo
from ..models.ipc import Response
from .errors import UnhandledError


UNKNOWN_TITLE = "Unknown"
UNNAMED_WORKSPACE = "<unnamed>"
UNKNOWN_SERIAL = "<unknown>"


def format_window(window: WindowInfo) -> str:
    return f"{window.id}: {window.title if window.title is not None else UNKNOWN_TITLE}"


def format_workspace(workspace: WorkspaceInfo) -> str:
    name = workspace.name if workspace.name is not None else UNNAMED_WORKSPACE
    return f"{workspace.id}: {name} ({workspace.idx})"


def format_output(output: OutputInfo) -> str:
    serial = output.serial if output.serial is not None else UNKNOWN_SERIAL
    return f"{output.name}: {output.make} {output.model} {serial}"


def sort_workspaces(workspaces: List[WorkspaceInfo]) -> List[WorkspaceInfo]:
    """Order workspaces by index, ascending. Ties keep niri's order."""
    return sorted(workspaces, key=lambda ws: ws.idx)


def _expect(response: Optional[Response], kind: str) -> Optional[Response]:
    """Check a query result is of the expected variant.

    A None result (niri acknowledged instead of answering) is passed through
    and formats to an empty listing.

    Raises:
        UnhandledError: If the payload is a different listing
    """
    if response is not None and response.kind != kind:
        raise UnhandledError(f"expected {kind} listing, got {response.describe()}")
    return response


def windows_from(response: Optional[Response]) -> List[WindowInfo]:
    response = _expect(response, "Windows")
    return list(response.windows) if response else []


def workspaces_from(response: Optional[Response]) -> List[WorkspaceInfo]:
    response = _expect(response, "Workspaces")
    return list(response.workspaces) if response else []


def outputs_from(response: Optional[Response]) -> List[OutputInfo]:
    response = _expect(response, "Outputs")
    return list(response.outputs.values()) if response else []


def format_windows(response: Optional[Response]) -> List[str]:
    """Window lines in niri's listing order."""
    return [format_window(w) for w in windows_from(response)]


def format_workspaces(response: Optional[Response]) -> List[str]:
    """Workspace lines sorted by index."""
    return [format_workspace(ws) for ws in sort_workspaces(workspaces_from(response))]


def format_outputs(response: Optional[Response]) -> List[str]:
    """Output lines in mapping order."""
    return [format_output(o) for o in outputs_from(response)]
