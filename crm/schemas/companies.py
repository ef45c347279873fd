"""Company request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from crm.schemas.common import SparseUpdateRequest


class CompanyCreateRequest(BaseModel):
    name: str = Field(min_length=1, description="Company name is required")
    industry: str | None = None
    website: str | None = None
    phone: str | None = None
    address: str | None = None


class CompanyUpdateRequest(SparseUpdateRequest):
    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"name"})

    name: str | None = Field(default=None, min_length=1)
    industry: str | None = None
    website: str | None = None
    phone: str | None = None
    address: str | None = None


class CompanyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    industry: str | None = None
    website: str | None = None
    phone: str | None = None
    address: str | None = None
    created_at: datetime
    updated_at: datetime
