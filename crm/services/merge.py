"""Sparse update merging.

An update payload distinguishes three states per field: absent (keep the
stored value), explicit ``None`` (clear it) and a value (replace it). The
helpers here keep that distinction intact from the pydantic request down
to the columns written.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import BaseModel

from crm.models.base import utcnow

_TICK = timedelta(microseconds=1)


def sparse_fields(payload: BaseModel) -> dict[str, Any]:
    """Return only the fields the caller explicitly sent."""
    return payload.model_dump(exclude_unset=True)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def next_modification_time(previous: datetime | None, now: datetime | None = None) -> datetime:
    """Return a timestamp strictly later than ``previous``."""
    current = _as_utc(now or utcnow())
    if previous is None:
        return current
    previous = _as_utc(previous)
    if current <= previous:
        return previous + _TICK
    return current


def merge_update(record: Any, changes: Mapping[str, Any], now: datetime | None = None) -> dict[str, Any]:
    """Columns to persist for ``record``: the explicit changes plus a fresh ``updated_at``."""
    fields = {name: value for name, value in changes.items() if name not in {"id", "created_at", "updated_at"}}
    fields["updated_at"] = next_modification_time(getattr(record, "updated_at", None), now)
    return fields


def apply_fields(record: Any, fields: Mapping[str, Any]) -> None:
    for name, value in fields.items():
        setattr(record, name, value)
