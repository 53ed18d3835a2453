"""Operations: query niri, let the user pick, act on the pick.

Each operation is a short sequential pipeline over one session:

    query -> format -> pick -> resolve -> action(s)

Any failure aborts the rest of the pipeline. Dismissing the picker ends the
operation successfully without sending any action.
"""

import logging
from typing import Callable, List, Optional

from ..models.entities import WorkspaceInfo
from ..models.ipc import (
    ActionPayload,
    FocusWindow,
    FocusWorkspace,
    MoveWindowToWorkspace,
    MoveWorkspaceToMonitor,
    Request,
    SetWorkspaceName,
    WorkspaceReference,
)
from ..models.selection import Selection
from .dispatcher import Session, query, run_action
from .errors import InvariantError, PartialActionError, UnhandledError
from .formatters import (
    format_output,
    format_window,
    format_workspace,
    outputs_from,
    sort_workspaces,
    windows_from,
    workspaces_from,
)
from .picker import Picker
from .selection import parse_name, resolve_id_or_new, resolve_strict
from .workspace_exec import WorkspaceDirectoryMap, launch


logger = logging.getLogger('niri_action.orchestrator')


def focused_workspace(workspaces: List[WorkspaceInfo]) -> WorkspaceInfo:
    """Return the focused workspace.

    Raises:
        InvariantError: If no workspace is focused
    """
    focused = [ws for ws in workspaces if ws.is_focused]
    if not focused:
        raise InvariantError(
            f"No focused workspace among {len(workspaces)} workspace(s)"
        )
    if len(focused) > 1:
        logger.warning(
            f"{len(focused)} workspaces report focus, using {focused[0].id}"
        )
    return focused[0]


def last_workspace(workspaces: List[WorkspaceInfo]) -> WorkspaceInfo:
    """Return the workspace with the highest index.

    Raises:
        InvariantError: If the listing is empty
    """
    if not workspaces:
        raise InvariantError("No workspaces to fall back to")
    return sort_workspaces(workspaces)[-1]


class ActionOrchestrator:
    """Runs the picker-driven operations over one niri session."""

    def __init__(
        self,
        session: Session,
        picker: Picker,
        directory_map: Optional[WorkspaceDirectoryMap] = None,
    ):
        """Initialize orchestrator.

        Args:
            session: Connected niri session
            picker: Picker used for every selection
            directory_map: Workspace directories, required only by workspace_exec
        """
        self.session = session
        self.picker = picker
        self.directory_map = directory_map

    async def _act(self, action: ActionPayload) -> None:
        await run_action(self.session, Request.for_action(action))

    async def _pick(self, lines: List[str], resolve: Callable[[str], Selection] = resolve_strict) -> Selection:
        selection = resolve(await self.picker.pick(lines))
        if selection.is_cancelled:
            logger.debug("Selection cancelled, no action sent")
        return selection

    async def _workspaces(self) -> List[WorkspaceInfo]:
        return workspaces_from(await query(self.session, Request.workspaces()))

    async def focus_container(self) -> bool:
        """Focus a window picked from the window list.

        Returns:
            True if an action was sent, False if the pick was cancelled
        """
        windows = windows_from(await query(self.session, Request.windows()))

        selection = await self._pick([format_window(w) for w in windows])
        if selection.is_cancelled:
            return False

        await self._act(FocusWindow(id=selection.identifier))
        return True

    async def steal_container(self) -> bool:
        """Move a picked window onto the focused workspace without following it.

        Returns:
            True if an action was sent, False if the pick was cancelled
        """
        windows = windows_from(await query(self.session, Request.windows()))
        current = focused_workspace(await self._workspaces())

        selection = await self._pick([format_window(w) for w in windows])
        if selection.is_cancelled:
            return False

        await self._act(
            MoveWindowToWorkspace(
                window_id=selection.identifier,
                reference=WorkspaceReference.by_id(current.id),
                focus=False,
            )
        )
        return True

    async def focus_workspace(self) -> bool:
        """Focus a picked workspace, or name a workspace after typed text.

        Typed text that matches no listed workspace focuses the last
        workspace (highest index) and renames it to the text.

        Returns:
            True if action(s) were sent, False if the pick was cancelled

        Raises:
            PartialActionError: If the focus succeeded but the rename failed
        """
        workspaces = await self._workspaces()

        selection = await self._pick(
            [format_workspace(ws) for ws in sort_workspaces(workspaces)],
            resolve_id_or_new,
        )
        if selection.is_cancelled:
            return False

        if selection.kind == "identified":
            await self._act(FocusWorkspace(reference=WorkspaceReference.by_id(selection.identifier)))
        else:
            await self.focus_and_rename(workspaces, selection.text)
        return True

    async def focus_and_rename(self, workspaces: List[WorkspaceInfo], name: str) -> None:
        """Focus the last workspace, then name it.

        The two actions are not atomic. When the rename fails, the workspace
        stays focused under its old name and PartialActionError is raised.
        """
        target = last_workspace(workspaces)
        reference = WorkspaceReference.by_id(target.id)

        await self._act(FocusWorkspace(reference=reference))

        try:
            await self._act(SetWorkspaceName(name=name, workspace=reference))
        except UnhandledError as e:
            raise PartialActionError(e.err, target.id, name) from e

    async def move_to_workspace(self) -> bool:
        """Move the focused window to a picked workspace.

        Returns:
            True if an action was sent, False if the pick was cancelled
        """
        workspaces = await self._workspaces()

        selection = await self._pick([format_workspace(ws) for ws in sort_workspaces(workspaces)])
        if selection.is_cancelled:
            return False

        await self._act(
            MoveWindowToWorkspace(
                window_id=None,
                reference=WorkspaceReference.by_id(selection.identifier),
                focus=False,
            )
        )
        return True

    async def move_workspace_to_output(self) -> bool:
        """Move the focused workspace to a picked output.

        Returns:
            True if an action was sent, False if the pick was cancelled
        """
        outputs = outputs_from(await query(self.session, Request.outputs()))

        selection = await self._pick(
            [format_output(o) for o in outputs],
            lambda line: resolve_strict(line, parse_name),
        )
        if selection.is_cancelled:
            return False

        await self._act(MoveWorkspaceToMonitor(output=selection.identifier, reference=None))
        return True

    async def workspace_exec(self, args: List[str]) -> bool:
        """Launch a command in the focused workspace's directory.

        Returns:
            True once the command has been started
        """
        if self.directory_map is None:
            raise ValueError("workspace_exec requires a directory map")

        current = focused_workspace(await self._workspaces())
        cwd = self.directory_map.directory_for(current.name)
        logger.debug(f"Workspace {current.name or current.id} maps to {cwd}")

        launch(args, cwd)
        return True
