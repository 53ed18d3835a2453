"""Result of resolving one line of picker output."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Selection(BaseModel):
    """What the user picked.

    - ``identified``: the line referenced a listed entity; ``identifier`` holds
      its ID (an int for windows and workspaces, a name for outputs)
    - ``free_text``: the user typed something that is not in the listing
    - ``cancelled``: the picker returned nothing
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["identified", "free_text", "cancelled"]
    identifier: Optional[Union[int, str]] = Field(None, description="Entity ID for identified picks")
    text: Optional[str] = Field(None, description="Typed text for free-text picks")

    @model_validator(mode="after")
    def check_fields(self) -> "Selection":
        """Ensure each kind carries only its own field."""
        if (self.kind == "identified") != (self.identifier is not None):
            raise ValueError("identifier is required for, and only for, identified selections")
        if (self.kind == "free_text") != (self.text is not None):
            raise ValueError("text is required for, and only for, free_text selections")
        return self

    @classmethod
    def identified(cls, identifier: Union[int, str]) -> "Selection":
        return cls(kind="identified", identifier=identifier)

    @classmethod
    def free_text(cls, text: str) -> "Selection":
        return cls(kind="free_text", text=text)

    @classmethod
    def cancelled(cls) -> "Selection":
        return cls(kind="cancelled")

    @property
    def is_cancelled(self) -> bool:
        return self.kind == "cancelled"
