"""Deal service: CRUD with customer and company reference checks."""

from __future__ import annotations

import logging

from sqlalchemy import select

from crm.core.exceptions import ConflictError
from crm.models import Company, Customer, Deal
from crm.models.base import utcnow
from crm.schemas.deals import DealCreateRequest, DealUpdateRequest
from crm.services.base_service import BaseService
from crm.services.integrity import EntityKind, IntegrityGuard
from crm.services.merge import apply_fields, merge_update, sparse_fields

logger = logging.getLogger(__name__)


class DealService(BaseService):
    """Service for deal CRUD."""

    def _require_references(self, customer_id: int | None, company_id: int | None) -> None:
        # Customer first: when both are missing the caller hears about the customer.
        if customer_id is not None:
            self.require(Customer, customer_id, "Customer")
        if company_id is not None:
            self.require(Company, company_id, "Company")

    def create_deal(self, payload: DealCreateRequest) -> Deal:
        self._require_references(payload.customer_id, payload.company_id)

        now = utcnow()
        deal = Deal(**payload.model_dump(), created_at=now, updated_at=now)
        self.db.add(deal)
        self.commit()
        self.db.refresh(deal)
        logger.info(
            "deal.created",
            extra={
                "event": "deal.created",
                "entity": "deal",
                "entity_id": deal.id,
                "status": deal.status.value,
            },
        )
        return deal

    def get_deal(self, deal_id: int) -> Deal:
        return self.require(Deal, deal_id, "Deal")

    def list_deals(self) -> list[Deal]:
        return list(self.db.scalars(select(Deal).order_by(Deal.id)).all())

    def update_deal(self, deal_id: int, payload: DealUpdateRequest) -> Deal:
        deal = self.get_deal(deal_id)
        changes = sparse_fields(payload)
        self._require_references(changes.get("customer_id"), changes.get("company_id"))

        fields = merge_update(deal, changes)
        apply_fields(deal, fields)
        self.commit()
        self.db.refresh(deal)
        logger.info(
            "deal.updated",
            extra={
                "event": "deal.updated",
                "entity": "deal",
                "entity_id": deal.id,
                "fields": sorted(fields),
            },
        )
        return deal

    def delete_deal(self, deal_id: int) -> dict[str, bool]:
        deal = self.get_deal(deal_id)
        decision = IntegrityGuard(self.db).can_delete(EntityKind.DEAL, deal_id)
        if not decision.allowed:
            raise ConflictError(decision.reason)

        self.db.delete(deal)
        self.commit()
        logger.info(
            "deal.deleted",
            extra={"event": "deal.deleted", "entity": "deal", "entity_id": deal_id},
        )
        return {"success": True}
