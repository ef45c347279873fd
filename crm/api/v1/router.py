"""Root API router for v1 endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from crm.api.v1 import companies, customers, deals, health


def get_api_router(prefix: str = "/api/v1") -> APIRouter:
    api_router = APIRouter(prefix=prefix)
    api_router.include_router(health.router)
    api_router.include_router(companies.router)
    api_router.include_router(customers.router)
    api_router.include_router(deals.router)
    return api_router
