"""Error kinds produced on the search path.

The set is closed: every failure is either a ``DatabaseError`` carrying
backend detail or a payload-free ``GenericError``. Both are plain values,
not exceptions, so they are returned up the stack rather than raised.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class DatabaseError(BaseModel):
    """Backend failure whose ``detail`` may hold credentials or raw SQL text.

    ``detail`` is for the operator log only and must never be rendered into
    a response by the secure path.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["database"] = "database"
    detail: str = Field(..., description="Raw backend error text, possibly sensitive")

    @property
    def carries_sensitive_payload(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"Database operation failed: {self.detail}"


class GenericError(BaseModel):
    """Failure with nothing to report beyond the fact that it happened."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["generic"] = "generic"

    @property
    def carries_sensitive_payload(self) -> bool:
        return False

    def __str__(self) -> str:
        return "An unexpected application error occurred."


ErrorKind = Annotated[DatabaseError | GenericError, Field(discriminator="kind")]
