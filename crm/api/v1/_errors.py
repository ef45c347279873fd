"""Shared service-error translation for API v1 route modules."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from crm.core.exceptions import ConflictError, DatabaseError, NotFoundError, ValidationError
from crm.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

NOT_FOUND_RESPONSES = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
CONFLICT_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
}


def map_service_error(exc: Exception) -> tuple[int, str]:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND, str(exc)
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT, str(exc)
    if isinstance(exc, ValidationError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc)
    if isinstance(exc, DatabaseError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR, "Database operation failed."
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error."


def raise_http_error(exc: Exception, operation: str) -> None:
    code, detail = map_service_error(exc)
    logger.warning(
        "api.operation_failed",
        extra={"event": "api.operation_failed", "operation": operation, "status_code": code, "detail": detail},
    )
    raise HTTPException(status_code=code, detail=detail) from exc
