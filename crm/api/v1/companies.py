"""Company endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from crm.api.v1._errors import CONFLICT_RESPONSES, NOT_FOUND_RESPONSES, raise_http_error
from crm.api.v1._params import EntityId
from crm.core.dependencies import get_company_service
from crm.core.exceptions import CRMException
from crm.schemas.common import DeleteResponse
from crm.schemas.companies import CompanyCreateRequest, CompanyResponse, CompanyUpdateRequest
from crm.services.company_service import CompanyService

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company(
    payload: CompanyCreateRequest,
    service: CompanyService = Depends(get_company_service),
) -> CompanyResponse:
    try:
        company = service.create_company(payload)
    except CRMException as exc:
        raise_http_error(exc, "createCompany")
    return CompanyResponse.model_validate(company)


@router.get("", response_model=list[CompanyResponse])
def get_companies(service: CompanyService = Depends(get_company_service)) -> list[CompanyResponse]:
    return [CompanyResponse.model_validate(row) for row in service.list_companies()]


@router.get("/{company_id}", response_model=CompanyResponse, responses=NOT_FOUND_RESPONSES)
def get_company(company_id: EntityId, service: CompanyService = Depends(get_company_service)) -> CompanyResponse:
    try:
        company = service.get_company(company_id)
    except CRMException as exc:
        raise_http_error(exc, "getCompany")
    return CompanyResponse.model_validate(company)


@router.patch("/{company_id}", response_model=CompanyResponse, responses=NOT_FOUND_RESPONSES)
def update_company(
    company_id: EntityId,
    payload: CompanyUpdateRequest,
    service: CompanyService = Depends(get_company_service),
) -> CompanyResponse:
    try:
        company = service.update_company(company_id, payload)
    except CRMException as exc:
        raise_http_error(exc, "updateCompany")
    return CompanyResponse.model_validate(company)


@router.delete("/{company_id}", response_model=DeleteResponse, responses=CONFLICT_RESPONSES)
def delete_company(company_id: EntityId, service: CompanyService = Depends(get_company_service)) -> DeleteResponse:
    try:
        result = service.delete_company(company_id)
    except CRMException as exc:
        raise_http_error(exc, "deleteCompany")
    return DeleteResponse(**result)
