"""DataFrame helpers for the dashboard's tabular views."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd
from pydantic import BaseModel

from crm.models.enums import DealStatus


def records_to_frame(records: Iterable, schema: type[BaseModel]) -> pd.DataFrame:
    """Serialize ORM rows through ``schema`` into a DataFrame with stable columns."""
    columns = list(schema.model_fields)
    rows = [schema.model_validate(record).model_dump() for record in records]
    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows, columns=columns)


def changed_fields(original: dict, edited: dict) -> dict:
    """Keys of ``edited`` whose values differ from ``original``.

    The result is a sparse update payload: untouched inputs stay absent.
    """
    return {key: value for key, value in edited.items() if original.get(key) != value}


def with_names(frame: pd.DataFrame, id_column: str, names: dict, label: str) -> pd.DataFrame:
    """Insert a ``label`` column next to ``id_column`` holding the referenced record's name."""
    result = frame.copy()
    position = list(result.columns).index(id_column) + 1
    result.insert(position, label, result[id_column].map(lambda ref: names.get(ref, f"Unknown {label}")))
    return result


def pipeline_summary(deals: Iterable) -> dict:
    """Deal count, value of won deals and value of the whole pipeline."""
    count = 0
    won_total = 0.0
    total = 0.0
    for deal in deals:
        count += 1
        total += float(deal.amount)
        if deal.status == DealStatus.WON:
            won_total += float(deal.amount)
    return {"count": count, "won_total": round(won_total, 2), "total": round(total, 2)}
