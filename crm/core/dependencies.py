"""Dependency providers for API handlers."""

from __future__ import annotations

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from crm.database.db import get_db
from crm.services.company_service import CompanyService
from crm.services.customer_service import CustomerService
from crm.services.deal_service import DealService


def get_db_session() -> Generator[Session, None, None]:
    """Yield SQLAlchemy session for dependency injection."""
    yield from get_db()


def get_company_service(db: Session = Depends(get_db_session)) -> CompanyService:
    return CompanyService(db=db)


def get_customer_service(db: Session = Depends(get_db_session)) -> CustomerService:
    return CustomerService(db=db)


def get_deal_service(db: Session = Depends(get_db_session)) -> DealService:
    return DealService(db=db)
