"""Pydantic models for niri IPC requests, actions and replies.

niri's socket speaks newline-delimited JSON using serde's externally tagged
enum encoding: unit variants are bare strings (``"Windows"``) and data
variants are single-key objects (``{"Action": {"FocusWindow": {"id": 3}}}``).
Each model here produces (``to_wire``) or consumes (``from_wire``) that
encoding.
"""

from typing import Any, ClassVar, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .entities import OutputInfo, WindowInfo, WorkspaceInfo


class WorkspaceReference(BaseModel):
    """Reference to a workspace, either by its ID or by its index on an output."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["Id", "Index"] = Field(..., description="Reference flavour")
    value: int = Field(..., ge=0, description="Workspace ID or index")

    @classmethod
    def by_id(cls, workspace_id: int) -> "WorkspaceReference":
        return cls(kind="Id", value=workspace_id)

    @classmethod
    def by_index(cls, idx: int) -> "WorkspaceReference":
        return cls(kind="Index", value=idx)

    def to_wire(self) -> Dict[str, int]:
        return {self.kind: self.value}


class Action(BaseModel):
    """Base class for mutating requests.

    The class name doubles as the variant tag on the wire, and every declared
    field is sent under its own name, so subclasses only declare fields.
    """

    model_config = ConfigDict(frozen=True)

    def to_wire(self) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        for key in type(self).model_fields:
            value = getattr(self, key)
            if isinstance(value, WorkspaceReference):
                value = value.to_wire()
            fields[key] = value
        return {type(self).__name__: fields}


class FocusWindow(Action):
    """Focus the window with the given ID."""

    id: int


class MoveWindowToWorkspace(Action):
    """Move a window (the focused one when ``window_id`` is None) to a workspace."""

    window_id: Optional[int] = None
    reference: WorkspaceReference
    focus: bool = False


class FocusWorkspace(Action):
    """Focus a workspace."""

    reference: WorkspaceReference


class MoveWorkspaceToMonitor(Action):
    """Move a workspace (the focused one when ``reference`` is None) to an output."""

    output: str
    reference: Optional[WorkspaceReference] = None


class SetWorkspaceName(Action):
    """Name a workspace (the focused one when ``workspace`` is None)."""

    name: str
    workspace: Optional[WorkspaceReference] = None


ActionPayload = Union[
    FocusWindow,
    MoveWindowToWorkspace,
    FocusWorkspace,
    MoveWorkspaceToMonitor,
    SetWorkspaceName,
]


class Request(BaseModel):
    """A single request sent to niri: one of three queries or an action."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["Outputs", "Windows", "Workspaces", "Action"]
    action: Optional[ActionPayload] = None

    @model_validator(mode="after")
    def check_action_payload(self) -> "Request":
        """Ensure an action payload is present exactly for the Action variant."""
        if self.kind == "Action" and self.action is None:
            raise ValueError("Action request requires an action payload")
        if self.kind != "Action" and self.action is not None:
            raise ValueError(f"{self.kind} request cannot carry an action payload")
        return self

    @classmethod
    def outputs(cls) -> "Request":
        return cls(kind="Outputs")

    @classmethod
    def windows(cls) -> "Request":
        return cls(kind="Windows")

    @classmethod
    def workspaces(cls) -> "Request":
        return cls(kind="Workspaces")

    @classmethod
    def for_action(cls, action: ActionPayload) -> "Request":
        return cls(kind="Action", action=action)

    @property
    def is_action(self) -> bool:
        return self.kind == "Action"

    def to_wire(self) -> Union[str, Dict[str, Any]]:
        if self.action is not None:
            return {"Action": self.action.to_wire()}
        return self.kind

    def describe(self) -> str:
        """Short human-readable form used in log lines."""
        if self.action is not None:
            return f"Action {type(self.action).__name__}"
        return self.kind


class UnsupportedVariantError(ValueError):
    """Raised for a well-formed ``Ok`` payload of a variant niri-action does not use."""

    def __init__(self, variant: str):
        self.variant = variant
        super().__init__(f"Unsupported response variant: {variant}")


class Response(BaseModel):
    """Successful reply payload: a bare acknowledgement or one of the listings."""

    model_config = ConfigDict(frozen=True)

    DATA_KINDS: ClassVar[tuple] = ("Outputs", "Windows", "Workspaces")

    kind: Literal["Handled", "Outputs", "Windows", "Workspaces"]
    outputs: Optional[Dict[str, OutputInfo]] = None
    windows: Optional[List[WindowInfo]] = None
    workspaces: Optional[List[WorkspaceInfo]] = None

    @model_validator(mode="after")
    def check_payload_matches_kind(self) -> "Response":
        """Ensure exactly the field named by ``kind`` carries data."""
        for data_kind in self.DATA_KINDS:
            present = getattr(self, data_kind.lower()) is not None
            if present != (self.kind == data_kind):
                raise ValueError(f"{self.kind} response has mismatched '{data_kind.lower()}' payload")
        return self

    @classmethod
    def handled(cls) -> "Response":
        return cls(kind="Handled")

    @classmethod
    def from_outputs(cls, outputs: Dict[str, OutputInfo]) -> "Response":
        return cls(kind="Outputs", outputs=outputs)

    @classmethod
    def from_windows(cls, windows: List[WindowInfo]) -> "Response":
        return cls(kind="Windows", windows=windows)

    @classmethod
    def from_workspaces(cls, workspaces: List[WorkspaceInfo]) -> "Response":
        return cls(kind="Workspaces", workspaces=workspaces)

    @classmethod
    def from_wire(cls, payload: Any) -> "Response":
        """Decode the value found under ``Ok`` in a niri reply.

        Raises:
            ValueError: If the payload is not one of the supported variants
        """
        if payload == "Handled":
            return cls.handled()

        if isinstance(payload, dict) and len(payload) == 1:
            kind, data = next(iter(payload.items()))
            if kind in cls.DATA_KINDS:
                try:
                    return cls(kind=kind, **{kind.lower(): data})
                except ValidationError as e:
                    raise ValueError(f"Malformed {kind} payload: {e}") from e
            raise UnsupportedVariantError(kind)

        raise ValueError(f"Unrecognized response payload: {payload!r}")

    @property
    def is_handled(self) -> bool:
        return self.kind == "Handled"

    def describe(self) -> str:
        """Short description of the payload, used in protocol-violation messages."""
        if self.is_handled:
            return "Handled"
        data = getattr(self, self.kind.lower())
        return f"{self.kind} ({len(data)} entries)"


class Reply(BaseModel):
    """Outcome of one exchange: ``Ok(Response)`` or ``Err(text)`` from niri."""

    model_config = ConfigDict(frozen=True)

    response: Optional[Response] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_exactly_one(self) -> "Reply":
        """Ensure the reply is either a success or an error, never both."""
        if (self.response is None) == (self.error is None):
            raise ValueError("Reply must carry exactly one of response or error")
        return self

    @classmethod
    def ok(cls, response: Response) -> "Reply":
        return cls(response=response)

    @classmethod
    def err(cls, error: str) -> "Reply":
        return cls(error=error)

    @classmethod
    def from_wire(cls, data: Any) -> "Reply":
        """Decode a full reply object (``{"Ok": ...}`` or ``{"Err": "..."}``).

        Raises:
            ValueError: If the object is neither shape
        """
        if isinstance(data, dict) and len(data) == 1:
            if "Ok" in data:
                return cls.ok(Response.from_wire(data["Ok"]))
            if "Err" in data:
                return cls.err(str(data["Err"]))
        raise ValueError(f"Unrecognized reply: {data!r}")

    @property
    def is_ok(self) -> bool:
        return self.response is not None
