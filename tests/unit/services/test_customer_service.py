from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from crm.core.exceptions import ConflictError, NotFoundError
from crm.models import Base, Customer
from crm.schemas.companies import CompanyCreateRequest
from crm.schemas.customers import CustomerCreateRequest, CustomerUpdateRequest
from crm.schemas.deals import DealCreateRequest
from crm.services.company_service import CompanyService
from crm.services.customer_service import CustomerService
from crm.services.deal_service import DealService


def _build_session():
    engine = create_engine("sqlite:///:memory:")
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    return TestingSessionLocal()


def _seed_company(session, name="Acme"):
    return CompanyService(db=session).create_company(CompanyCreateRequest(name=name))


def test_create_customer_requires_existing_company():
    session = _build_session()
    service = CustomerService(db=session)

    with pytest.raises(NotFoundError, match="Company with ID 99 not found"):
        service.create_customer(CustomerCreateRequest(name="Ada", email="ada@example.com", company_id=99))
    assert service.list_customers() == []

    session.close()


def test_create_and_fetch_customer():
    session = _build_session()
    company = _seed_company(session)
    service = CustomerService(db=session)

    created = service.create_customer(
        CustomerCreateRequest(name="Ada", email="ada@example.com", phone="555-0101", company_id=company.id)
    )
    fetched = service.get_customer(created.id)

    assert fetched.email == "ada@example.com"
    assert fetched.company_id == company.id
    assert fetched.created_at == fetched.updated_at

    session.close()


def test_update_customer_moves_company_and_clears_phone():
    session = _build_session()
    acme = _seed_company(session)
    globex = _seed_company(session, name="Globex")
    service = CustomerService(db=session)
    customer = service.create_customer(
        CustomerCreateRequest(name="Ada", email="ada@example.com", phone="555-0101", company_id=acme.id)
    )

    updated = service.update_customer(
        customer.id, CustomerUpdateRequest.model_validate({"company_id": globex.id, "phone": None})
    )

    assert updated.company_id == globex.id
    assert updated.phone is None
    assert updated.name == "Ada"
    assert updated.email == "ada@example.com"

    session.close()


def test_update_customer_with_unknown_company_leaves_row_untouched():
    session = _build_session()
    acme = _seed_company(session)
    service = CustomerService(db=session)
    customer = service.create_customer(
        CustomerCreateRequest(name="Ada", email="ada@example.com", company_id=acme.id)
    )
    before = customer.updated_at

    with pytest.raises(NotFoundError, match="Company with ID 42 not found"):
        service.update_customer(customer.id, CustomerUpdateRequest(name="Renamed", company_id=42))

    session.expire_all()
    stored = session.get(Customer, customer.id)
    assert stored.name == "Ada"
    assert stored.updated_at == before

    session.close()


def test_delete_customer_blocked_while_deals_exist():
    session = _build_session()
    company = _seed_company(session)
    service = CustomerService(db=session)
    customer = service.create_customer(
        CustomerCreateRequest(name="Ada", email="ada@example.com", company_id=company.id)
    )
    deals = DealService(db=session)
    for amount in ("10.00", "20.00"):
        deals.create_deal(
            DealCreateRequest(
                description="Deal", amount=Decimal(amount), customer_id=customer.id, company_id=company.id
            )
        )

    with pytest.raises(ConflictError, match=f"customer with ID {customer.id} because it has 2 associated deal"):
        service.delete_customer(customer.id)
    assert session.get(Customer, customer.id) is not None

    session.close()


def test_delete_missing_customer_raises_not_found():
    session = _build_session()
    service = CustomerService(db=session)

    with pytest.raises(NotFoundError, match="Customer with ID 3 not found"):
        service.delete_customer(3)

    session.close()
