"""Deal request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crm.models.enums import DealStatus
from crm.schemas.common import SparseUpdateRequest
from crm.utils.validators import MAX_AMOUNT, MAX_ID, to_currency


def _check_amount(value: Decimal | None) -> Decimal | None:
    if value is None:
        return None
    amount = to_currency(value)
    if amount <= 0:
        raise ValueError("Deal amount must be positive")
    if amount >= MAX_AMOUNT:
        raise ValueError("Deal amount is too large")
    return amount


class DealCreateRequest(BaseModel):
    description: str = Field(min_length=1)
    amount: Decimal = Field(lt=MAX_AMOUNT)
    status: DealStatus = DealStatus.NEW
    customer_id: int = Field(gt=0, le=MAX_ID)
    company_id: int = Field(gt=0, le=MAX_ID)

    @field_validator("amount")
    @classmethod
    def amount_precision(cls, value):
        return _check_amount(value)


class DealUpdateRequest(SparseUpdateRequest):
    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"description", "amount", "status", "customer_id", "company_id"})

    description: str | None = Field(default=None, min_length=1)
    amount: Decimal | None = Field(default=None, lt=MAX_AMOUNT)
    status: DealStatus | None = None
    customer_id: int | None = Field(default=None, gt=0, le=MAX_ID)
    company_id: int | None = Field(default=None, gt=0, le=MAX_ID)

    @field_validator("amount")
    @classmethod
    def amount_precision(cls, value):
        return _check_amount(value)


class DealResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    description: str
    amount: float
    status: DealStatus
    customer_id: int
    company_id: int
    created_at: datetime
    updated_at: datetime

    @field_validator("amount", mode="before")
    @classmethod
    def amount_as_number(cls, value):
        return float(value)
