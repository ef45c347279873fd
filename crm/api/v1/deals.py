"""Deal endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from crm.api.v1._errors import CONFLICT_RESPONSES, NOT_FOUND_RESPONSES, raise_http_error
from crm.api.v1._params import EntityId
from crm.core.dependencies import get_deal_service
from crm.core.exceptions import CRMException
from crm.schemas.common import DeleteResponse
from crm.schemas.deals import DealCreateRequest, DealResponse, DealUpdateRequest
from crm.services.deal_service import DealService

router = APIRouter(prefix="/deals", tags=["deals"])


@router.post(
    "",
    response_model=DealResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND_RESPONSES,
)
def create_deal(
    payload: DealCreateRequest,
    service: DealService = Depends(get_deal_service),
) -> DealResponse:
    try:
        deal = service.create_deal(payload)
    except CRMException as exc:
        raise_http_error(exc, "createDeal")
    return DealResponse.model_validate(deal)


@router.get("", response_model=list[DealResponse])
def get_deals(service: DealService = Depends(get_deal_service)) -> list[DealResponse]:
    return [DealResponse.model_validate(row) for row in service.list_deals()]


@router.get("/{deal_id}", response_model=DealResponse, responses=NOT_FOUND_RESPONSES)
def get_deal(deal_id: EntityId, service: DealService = Depends(get_deal_service)) -> DealResponse:
    try:
        deal = service.get_deal(deal_id)
    except CRMException as exc:
        raise_http_error(exc, "getDeal")
    return DealResponse.model_validate(deal)


@router.patch("/{deal_id}", response_model=DealResponse, responses=NOT_FOUND_RESPONSES)
def update_deal(
    deal_id: EntityId,
    payload: DealUpdateRequest,
    service: DealService = Depends(get_deal_service),
) -> DealResponse:
    try:
        deal = service.update_deal(deal_id, payload)
    except CRMException as exc:
        raise_http_error(exc, "updateDeal")
    return DealResponse.model_validate(deal)


@router.delete("/{deal_id}", response_model=DeleteResponse, responses=CONFLICT_RESPONSES)
def delete_deal(deal_id: EntityId, service: DealService = Depends(get_deal_service)) -> DeleteResponse:
    try:
        result = service.delete_deal(deal_id)
    except CRMException as exc:
        raise_http_error(exc, "deleteDeal")
    return DeleteResponse(**result)
