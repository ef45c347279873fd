"""Common schema module."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, model_validator


class DeleteResponse(BaseModel):
    success: bool = True


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: datetime
    service: str
    version: str


class ErrorResponse(BaseModel):
    detail: str


class SparseUpdateRequest(BaseModel):
    """Base for partial updates.

    A field left out of the payload is not in ``model_fields_set`` and is left
    alone; a field sent as ``null`` is in the set with value ``None`` and
    clears the column. Columns listed in ``non_nullable_fields`` may be
    omitted but never nulled.
    """

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        nulled = sorted(
            name
            for name in self.non_nullable_fields
            if name in self.model_fields_set and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self
