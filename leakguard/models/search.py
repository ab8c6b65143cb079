"""Search result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from leakguard.models.errors import DatabaseError


class SearchSuccess(BaseModel):
    """Successful catalog lookup."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Human-readable result line")


LookupResult = SearchSuccess | DatabaseError
