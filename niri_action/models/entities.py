"""Pydantic models for the entities niri reports over IPC.

Only the fields niri-action reads are declared; any other keys in niri's JSON
(layout, pid, physical size, modes, ...) are ignored on validation.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class WindowInfo(BaseModel):
    """A toplevel window as listed by the ``Windows`` request."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(..., description="niri window ID, stable for the window's lifetime")
    title: Optional[str] = Field(None, description="Window title, if the client set one")
    app_id: Optional[str] = Field(None, description="Wayland app_id")
    workspace_id: Optional[int] = Field(None, description="ID of the workspace holding the window")
    is_focused: bool = Field(False, description="Whether the window has keyboard focus")


class WorkspaceInfo(BaseModel):
    """A workspace as listed by the ``Workspaces`` request."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(..., description="niri workspace ID, stable for the workspace's lifetime")
    idx: int = Field(..., ge=0, description="Index of the workspace on its output (display order)")
    name: Optional[str] = Field(None, description="Workspace name, if named")
    output: Optional[str] = Field(None, description="Output the workspace lives on")
    is_active: bool = Field(False, description="Whether the workspace is visible on its output")
    is_focused: bool = Field(False, description="Whether the workspace has focus")
    active_window_id: Optional[int] = Field(None, description="ID of the active window on the workspace")


class OutputInfo(BaseModel):
    """A connected output (monitor) as listed by the ``Outputs`` request."""

    model_config = ConfigDict(frozen=True, extra="ignore", protected_namespaces=())

    name: str = Field(..., description="Connector name, e.g. DP-1")
    make: str = Field(..., description="Monitor manufacturer")
    model: str = Field(..., description="Monitor model")
    serial: Optional[str] = Field(None, description="Monitor serial number, if reported")
