"""Customer request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crm.schemas.common import SparseUpdateRequest
from crm.utils.validators import MAX_ID, is_valid_email


def _check_email(value: str | None) -> str | None:
    if value is not None and not is_valid_email(value):
        raise ValueError("Valid email is required")
    return value


class CustomerCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str
    phone: str | None = None
    company_id: int = Field(gt=0, le=MAX_ID)

    @field_validator("email")
    @classmethod
    def email_syntax(cls, value):
        return _check_email(value)


class CustomerUpdateRequest(SparseUpdateRequest):
    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"name", "email", "company_id"})

    name: str | None = Field(default=None, min_length=1)
    email: str | None = None
    phone: str | None = None
    company_id: int | None = Field(default=None, gt=0, le=MAX_ID)

    @field_validator("email")
    @classmethod
    def email_syntax(cls, value):
        return _check_email(value)


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str | None = None
    company_id: int
    created_at: datetime
    updated_at: datetime
