from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from crm.core.exceptions import ConflictError, NotFoundError
from crm.models import Base, Deal, DealStatus
from crm.schemas.companies import CompanyCreateRequest
from crm.schemas.customers import CustomerCreateRequest
from crm.schemas.deals import DealCreateRequest, DealUpdateRequest
from crm.services.company_service import CompanyService
from crm.services.customer_service import CustomerService
from crm.services.deal_service import DealService


def _build_session():
    engine = create_engine("sqlite:///:memory:")
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    return TestingSessionLocal()


def _seed_parties(session):
    company = CompanyService(db=session).create_company(CompanyCreateRequest(name="Acme"))
    customer = CustomerService(db=session).create_customer(
        CustomerCreateRequest(name="Ada", email="ada@example.com", company_id=company.id)
    )
    return company, customer


def _create_deal(session, company, customer, amount="12345.67", **extra):
    return DealService(db=session).create_deal(
        DealCreateRequest(
            description="Annual licence",
            amount=Decimal(amount),
            customer_id=customer.id,
            company_id=company.id,
            **extra,
        )
    )


def test_create_deal_defaults_status_and_keeps_amount_precision():
    session = _build_session()
    company, customer = _seed_parties(session)

    deal = _create_deal(session, company, customer)
    fetched = DealService(db=session).get_deal(deal.id)

    assert fetched.status == DealStatus.NEW
    assert fetched.amount == Decimal("12345.67")
    assert fetched.created_at == fetched.updated_at

    session.close()


def test_create_deal_checks_customer_before_company():
    session = _build_session()
    service = DealService(db=session)

    with pytest.raises(NotFoundError, match="Customer with ID 5 not found"):
        service.create_deal(DealCreateRequest(description="x", amount=Decimal("1.00"), customer_id=5, company_id=6))

    company, customer = _seed_parties(session)
    with pytest.raises(NotFoundError, match="Company with ID 6 not found"):
        service.create_deal(
            DealCreateRequest(description="x", amount=Decimal("1.00"), customer_id=customer.id, company_id=6)
        )
    assert service.list_deals() == []

    session.close()


def test_update_deal_applies_only_supplied_fields():
    session = _build_session()
    company, customer = _seed_parties(session)
    deal = _create_deal(session, company, customer, status=DealStatus.QUALIFIED)
    before = deal.updated_at

    updated = DealService(db=session).update_deal(
        deal.id, DealUpdateRequest(status=DealStatus.WON, amount=Decimal("15000.5"))
    )

    assert updated.status == DealStatus.WON
    assert updated.amount == Decimal("15000.50")
    assert updated.description == "Annual licence"
    assert updated.customer_id == customer.id
    assert updated.updated_at > before

    session.close()


def test_update_deal_with_missing_customer_modifies_nothing():
    session = _build_session()
    company, customer = _seed_parties(session)
    deal = _create_deal(session, company, customer)
    before = deal.updated_at

    with pytest.raises(NotFoundError, match="Customer with ID 999 not found"):
        DealService(db=session).update_deal(deal.id, DealUpdateRequest(description="Changed", customer_id=999))

    session.expire_all()
    stored = session.get(Deal, deal.id)
    assert stored.description == "Annual licence"
    assert stored.customer_id == customer.id
    assert stored.updated_at == before

    session.close()


def test_update_deal_with_missing_company_raises_not_found():
    session = _build_session()
    company, customer = _seed_parties(session)
    deal = _create_deal(session, company, customer)

    with pytest.raises(NotFoundError, match="Company with ID 77 not found"):
        DealService(db=session).update_deal(deal.id, DealUpdateRequest(company_id=77))

    session.close()


def test_update_missing_deal_raises_not_found():
    session = _build_session()

    with pytest.raises(NotFoundError, match="Deal with ID 1 not found"):
        DealService(db=session).update_deal(1, DealUpdateRequest(status=DealStatus.LOST))

    session.close()


def test_delete_deal_removes_row():
    session = _build_session()
    company, customer = _seed_parties(session)
    deal = _create_deal(session, company, customer)
    service = DealService(db=session)

    assert service.delete_deal(deal.id) == {"success": True}
    assert service.list_deals() == []
    with pytest.raises(NotFoundError):
        service.delete_deal(deal.id)

    session.close()


def test_referential_integrity_walkthrough():
    session = _build_session()
    companies = CompanyService(db=session)
    customers = CustomerService(db=session)
    deals = DealService(db=session)

    acme = companies.create_company(CompanyCreateRequest(name="Acme"))
    ada = customers.create_customer(CustomerCreateRequest(name="Ada", email="ada@acme.test", company_id=acme.id))
    with pytest.raises(ConflictError, match="existing customers"):
        companies.delete_company(acme.id)

    deal = deals.create_deal(
        DealCreateRequest(description="Pilot", amount=Decimal("500.00"), customer_id=ada.id, company_id=acme.id)
    )
    with pytest.raises(ConflictError, match="has 1 associated deal"):
        customers.delete_customer(ada.id)

    assert deals.delete_deal(deal.id) == {"success": True}
    assert customers.delete_customer(ada.id) == {"success": True}
    assert companies.delete_company(acme.id) == {"success": True}

    session.close()
