"""Referential-integrity checks consulted before a row is deleted."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from crm.models import Customer, Deal


class EntityKind(str, enum.Enum):
    COMPANY = "company"
    CUSTOMER = "customer"
    DEAL = "deal"


@dataclass(frozen=True)
class DeleteDecision:
    """Outcome of a delete check: allowed, or blocked with a reason."""

    allowed: bool
    reason: str | None = None

    @classmethod
    def allow(cls) -> "DeleteDecision":
        return cls(allowed=True)

    @classmethod
    def block(cls, reason: str) -> "DeleteDecision":
        return cls(allowed=False, reason=reason)


def decide_company_delete(deal_count: int, customer_count: int) -> DeleteDecision:
    """Deals are checked before customers, so a company with both reports deals."""
    if deal_count > 0:
        return DeleteDecision.block("Cannot delete company with existing deals")
    if customer_count > 0:
        return DeleteDecision.block("Cannot delete company with existing customers")
    return DeleteDecision.allow()


def decide_customer_delete(customer_id: int, deal_count: int) -> DeleteDecision:
    if deal_count > 0:
        return DeleteDecision.block(
            f"Cannot delete customer with ID {customer_id} because it has {deal_count} associated deal(s)"
        )
    return DeleteDecision.allow()


class IntegrityGuard:
    """Counts dependent rows and turns the counts into a delete decision.

    The guard only reads. Existence of the row itself is the caller's job;
    the count and the later delete are separate statements.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _count(self, model, column, entity_id: int) -> int:
        statement = select(func.count()).select_from(model).where(column == entity_id)
        return int(self.db.scalar(statement) or 0)

    def can_delete(self, kind: EntityKind | str, entity_id: int) -> DeleteDecision:
        kind = EntityKind(kind)
        if kind is EntityKind.COMPANY:
            return decide_company_delete(
                deal_count=self._count(Deal, Deal.company_id, entity_id),
                customer_count=self._count(Customer, Customer.company_id, entity_id),
            )
        if kind is EntityKind.CUSTOMER:
            return decide_customer_delete(entity_id, self._count(Deal, Deal.customer_id, entity_id))
        return DeleteDecision.allow()
