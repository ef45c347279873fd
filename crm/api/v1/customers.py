"""Customer endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from crm.api.v1._errors import CONFLICT_RESPONSES, NOT_FOUND_RESPONSES, raise_http_error
from crm.api.v1._params import EntityId
from crm.core.dependencies import get_customer_service
from crm.core.exceptions import CRMException
from crm.schemas.common import DeleteResponse
from crm.schemas.customers import CustomerCreateRequest, CustomerResponse, CustomerUpdateRequest
from crm.services.customer_service import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND_RESPONSES,
)
def create_customer(
    payload: CustomerCreateRequest,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    try:
        customer = service.create_customer(payload)
    except CRMException as exc:
        raise_http_error(exc, "createCustomer")
    return CustomerResponse.model_validate(customer)


@router.get("", response_model=list[CustomerResponse])
def get_customers(service: CustomerService = Depends(get_customer_service)) -> list[CustomerResponse]:
    return [CustomerResponse.model_validate(row) for row in service.list_customers()]


@router.get("/{customer_id}", response_model=CustomerResponse, responses=NOT_FOUND_RESPONSES)
def get_customer(customer_id: EntityId, service: CustomerService = Depends(get_customer_service)) -> CustomerResponse:
    try:
        customer = service.get_customer(customer_id)
    except CRMException as exc:
        raise_http_error(exc, "getCustomer")
    return CustomerResponse.model_validate(customer)


@router.patch("/{customer_id}", response_model=CustomerResponse, responses=NOT_FOUND_RESPONSES)
def update_customer(
    customer_id: EntityId,
    payload: CustomerUpdateRequest,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerResponse:
    try:
        customer = service.update_customer(customer_id, payload)
    except CRMException as exc:
        raise_http_error(exc, "updateCustomer")
    return CustomerResponse.model_validate(customer)


@router.delete("/{customer_id}", response_model=DeleteResponse, responses=CONFLICT_RESPONSES)
def delete_customer(customer_id: EntityId, service: CustomerService = Depends(get_customer_service)) -> DeleteResponse:
    try:
        result = service.delete_customer(customer_id)
    except CRMException as exc:
        raise_http_error(exc, "deleteCustomer")
    return DeleteResponse(**result)
