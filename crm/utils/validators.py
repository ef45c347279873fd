"""Deterministic validators shared by request schemas and the dashboard."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
CURRENCY_QUANTUM = Decimal("0.01")
# NUMERIC(15, 2) holds at most 13 integer digits.
MAX_AMOUNT = Decimal("1e13")
# Integer primary keys are 32-bit on PostgreSQL.
MAX_ID = 2_147_483_647


def is_valid_email(value: str | None) -> bool:
    if not value or not isinstance(value, str):
        return False
    return EMAIL_PATTERN.match(value) is not None


def to_currency(value: Decimal | float | int | str) -> Decimal:
    """Normalize a monetary value to two decimal places.

    Floats go through ``str`` first so that ``12345.67`` stays ``12345.67``
    rather than picking up binary representation noise.
    """
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value).quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid monetary amount: {value}") from exc


def blank_to_none(value: str | None) -> str | None:
    """Treat an empty form input as an explicit null."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None
