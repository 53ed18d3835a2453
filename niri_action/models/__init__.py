"""Data models for niri-action."""

from .entities import OutputInfo, WindowInfo, WorkspaceInfo
from .ipc import (
    Action,
    ActionPayload,
    FocusWindow,
    FocusWorkspace,
    MoveWindowToWorkspace,
    MoveWorkspaceToMonitor,
    Reply,
    Request,
    Response,
    SetWorkspaceName,
    WorkspaceReference,
)
from .selection import Selection

__all__ = [
    "Action",
    "ActionPayload",
    "FocusWindow",
    "FocusWorkspace",
    "MoveWindowToWorkspace",
    "MoveWorkspaceToMonitor",
    "OutputInfo",
    "Reply",
    "Request",
    "Response",
    "Selection",
    "SetWorkspaceName",
    "WindowInfo",
    "WorkspaceInfo",
    "WorkspaceReference",
]
