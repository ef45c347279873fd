from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from crm.models.enums import DealStatus
from crm.schemas.companies import CompanyCreateRequest, CompanyUpdateRequest
from crm.schemas.customers import CustomerCreateRequest, CustomerUpdateRequest
from crm.schemas.deals import DealCreateRequest, DealResponse, DealUpdateRequest


def test_company_create_requires_non_empty_name():
    with pytest.raises(ValidationError):
        CompanyCreateRequest(name="")
    payload = CompanyCreateRequest(name="Acme")
    assert payload.industry is None


def test_company_update_rejects_null_name_but_allows_null_optional_fields():
    with pytest.raises(ValidationError, match="Fields cannot be null: name"):
        CompanyUpdateRequest.model_validate({"name": None})

    payload = CompanyUpdateRequest.model_validate({"industry": None})
    assert payload.model_fields_set == {"industry"}


def test_customer_email_must_be_valid():
    with pytest.raises(ValidationError, match="Valid email is required"):
        CustomerCreateRequest(name="Ada", email="not-an-email", company_id=1)
    with pytest.raises(ValidationError):
        CustomerUpdateRequest(email="ada@")
    assert CustomerUpdateRequest(email="ada@example.com").email == "ada@example.com"


def test_customer_company_id_must_be_positive():
    with pytest.raises(ValidationError):
        CustomerCreateRequest(name="Ada", email="ada@example.com", company_id=0)


def test_deal_create_defaults_status_to_new():
    payload = DealCreateRequest(description="Pilot", amount=100, customer_id=1, company_id=1)
    assert payload.status == DealStatus.NEW
    assert payload.amount == Decimal("100.00")


def test_deal_amount_must_be_positive():
    with pytest.raises(ValidationError, match="Deal amount must be positive"):
        DealCreateRequest(description="Pilot", amount=0, customer_id=1, company_id=1)
    with pytest.raises(ValidationError):
        DealUpdateRequest(amount=-5)


def test_deal_amount_from_float_keeps_two_decimals():
    payload = DealCreateRequest(description="Pilot", amount=12345.67, customer_id=1, company_id=1)
    assert payload.amount == Decimal("12345.67")


def test_deal_status_must_be_known():
    with pytest.raises(ValidationError):
        DealCreateRequest(description="Pilot", amount=1, status="Pending", customer_id=1, company_id=1)


def test_deal_update_rejects_null_for_required_columns():
    with pytest.raises(ValidationError, match="amount, status"):
        DealUpdateRequest.model_validate({"status": None, "amount": None})


def test_deal_response_renders_amount_as_number():
    response = DealResponse.model_validate(
        {
            "id": 1,
            "description": "Pilot",
            "amount": Decimal("12345.67"),
            "status": "Won",
            "customer_id": 1,
            "company_id": 1,
            "created_at": "2026-01-01T00:00:00",
            "updated_at": "2026-01-01T00:00:00",
        }
    )
    assert response.model_dump(mode="json")["amount"] == 12345.67


def test_deal_amount_above_column_capacity_is_rejected():
    with pytest.raises(ValidationError):
        DealCreateRequest(description="Pilot", amount="1e30", customer_id=1, company_id=1)
    with pytest.raises(ValidationError):
        DealCreateRequest(description="Pilot", amount=10_000_000_000_000, customer_id=1, company_id=1)
    with pytest.raises(ValidationError):
        DealUpdateRequest(amount="1e30")

    payload = DealCreateRequest(description="Pilot", amount="9999999999999.99", customer_id=1, company_id=1)
    assert payload.amount == Decimal("9999999999999.99")


def test_reference_ids_beyond_integer_column_are_rejected():
    too_big = 2_147_483_648
    with pytest.raises(ValidationError):
        CustomerCreateRequest(name="Ada", email="ada@example.com", company_id=too_big)
    with pytest.raises(ValidationError):
        CustomerUpdateRequest(company_id=2**70)
    with pytest.raises(ValidationError):
        DealCreateRequest(description="Pilot", amount=1, customer_id=too_big, company_id=1)
    with pytest.raises(ValidationError):
        DealUpdateRequest(company_id=too_big)

    payload = CustomerCreateRequest(name="Ada", email="ada@example.com", company_id=2_147_483_647)
    assert payload.company_id == 2_147_483_647
