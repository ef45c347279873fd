"""Shared path parameter types for API v1 route modules."""

from __future__ import annotations

from typing import Annotated

from fastapi import Path

from crm.utils.validators import MAX_ID

EntityId = Annotated[int, Path(gt=0, le=MAX_ID, description="Store-assigned record id")]
