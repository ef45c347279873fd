"""Customer service: CRUD with company reference checks."""

from __future__ import annotations

import logging

from sqlalchemy import select

from crm.core.exceptions import ConflictError
from crm.models import Company, Customer
from crm.models.base import utcnow
from crm.schemas.customers import CustomerCreateRequest, CustomerUpdateRequest
from crm.services.base_service import BaseService
from crm.services.integrity import EntityKind, IntegrityGuard
from crm.services.merge import apply_fields, merge_update, sparse_fields

logger = logging.getLogger(__name__)


class CustomerService(BaseService):
    """Service for customer CRUD.

    Every write that carries ``company_id`` checks the company exists first,
    so a missing reference surfaces as ``NotFoundError`` rather than as a
    constraint failure from the database.
    """

    def create_customer(self, payload: CustomerCreateRequest) -> Customer:
        self.require(Company, payload.company_id, "Company")

        now = utcnow()
        customer = Customer(**payload.model_dump(), created_at=now, updated_at=now)
        self.db.add(customer)
        self.commit()
        self.db.refresh(customer)
        logger.info(
            "customer.created",
            extra={"event": "customer.created", "entity": "customer", "entity_id": customer.id},
        )
        return customer

    def get_customer(self, customer_id: int) -> Customer:
        return self.require(Customer, customer_id, "Customer")

    def list_customers(self) -> list[Customer]:
        return list(self.db.scalars(select(Customer).order_by(Customer.id)).all())

    def update_customer(self, customer_id: int, payload: CustomerUpdateRequest) -> Customer:
        customer = self.get_customer(customer_id)
        changes = sparse_fields(payload)
        if "company_id" in changes:
            self.require(Company, changes["company_id"], "Company")

        fields = merge_update(customer, changes)
        apply_fields(customer, fields)
        self.commit()
        self.db.refresh(customer)
        logger.info(
            "customer.updated",
            extra={
                "event": "customer.updated",
                "entity": "customer",
                "entity_id": customer.id,
                "fields": sorted(fields),
            },
        )
        return customer

    def delete_customer(self, customer_id: int) -> dict[str, bool]:
        customer = self.get_customer(customer_id)
        decision = IntegrityGuard(self.db).can_delete(EntityKind.CUSTOMER, customer_id)
        if not decision.allowed:
            logger.warning(
                "customer.delete.blocked",
                extra={
                    "event": "customer.delete.blocked",
                    "entity": "customer",
                    "entity_id": customer_id,
                    "reason": decision.reason,
                },
            )
            raise ConflictError(decision.reason)

        self.db.delete(customer)
        self.commit()
        logger.info(
            "customer.deleted",
            extra={"event": "customer.deleted", "entity": "customer", "entity_id": customer_id},
        )
        return {"success": True}
