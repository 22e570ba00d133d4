from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
    )


class ValueObject(DomainModel):
    """Computed results: superseded by the next computation, never mutated."""

    model_config = ConfigDict(frozen=True)
