"""Pydantic schema package for API contracts."""

from crm.schemas.common import DeleteResponse, ErrorResponse, HealthResponse, SparseUpdateRequest
from crm.schemas.companies import CompanyCreateRequest, CompanyResponse, CompanyUpdateRequest
from crm.schemas.customers import CustomerCreateRequest, CustomerResponse, CustomerUpdateRequest
from crm.schemas.deals import DealCreateRequest, DealResponse, DealUpdateRequest

__all__ = [
    "CompanyCreateRequest",
    "CompanyResponse",
    "CompanyUpdateRequest",
    "CustomerCreateRequest",
    "CustomerResponse",
    "CustomerUpdateRequest",
    "DealCreateRequest",
    "DealResponse",
    "DealUpdateRequest",
    "DeleteResponse",
    "ErrorResponse",
    "HealthResponse",
    "SparseUpdateRequest",
]
