"""Company service: CRUD plus the dependent-row delete guard."""

from __future__ import annotations

import logging

from sqlalchemy import select

from crm.core.exceptions import ConflictError
from crm.models import Company
from crm.models.base import utcnow
from crm.schemas.companies import CompanyCreateRequest, CompanyUpdateRequest
from crm.services.base_service import BaseService
from crm.services.integrity import EntityKind, IntegrityGuard
from crm.services.merge import apply_fields, merge_update, sparse_fields

logger = logging.getLogger(__name__)


class CompanyService(BaseService):
    """Service for company CRUD."""

    def create_company(self, payload: CompanyCreateRequest) -> Company:
        now = utcnow()
        company = Company(**payload.model_dump(), created_at=now, updated_at=now)
        self.db.add(company)
        self.commit()
        self.db.refresh(company)
        logger.info(
            "company.created",
            extra={"event": "company.created", "entity": "company", "entity_id": company.id},
        )
        return company

    def get_company(self, company_id: int) -> Company:
        return self.require(Company, company_id, "Company")

    def list_companies(self) -> list[Company]:
        statement = select(Company).order_by(Company.created_at.asc(), Company.id.asc())
        return list(self.db.scalars(statement).all())

    def update_company(self, company_id: int, payload: CompanyUpdateRequest) -> Company:
        company = self.get_company(company_id)
        fields = merge_update(company, sparse_fields(payload))
        apply_fields(company, fields)
        self.commit()
        self.db.refresh(company)
        logger.info(
            "company.updated",
            extra={
                "event": "company.updated",
                "entity": "company",
                "entity_id": company.id,
                "fields": sorted(fields),
            },
        )
        return company

    def delete_company(self, company_id: int) -> dict[str, bool]:
        company = self.get_company(company_id)
        decision = IntegrityGuard(self.db).can_delete(EntityKind.COMPANY, company_id)
        if not decision.allowed:
            logger.warning(
                "company.delete.blocked",
                extra={
                    "event": "company.delete.blocked",
                    "entity": "company",
                    "entity_id": company_id,
                    "reason": decision.reason,
                },
            )
            raise ConflictError(decision.reason)

        self.db.delete(company)
        self.commit()
        logger.info(
            "company.deleted",
            extra={"event": "company.deleted", "entity": "company", "entity_id": company_id},
        )
        return {"success": True}
