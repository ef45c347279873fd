"""Create the CRM schema directly from model metadata for local runs."""

from __future__ import annotations

import logging

import crm.database.db as db_module
from crm.models import Base

logger = logging.getLogger(__name__)


def init_db() -> list[str]:
    """Create any missing tables on the active engine and return the table names."""
    engine = db_module.get_engine()
    Base.metadata.create_all(bind=engine)
    tables = sorted(Base.metadata.tables.keys())
    logger.info(
        "database.tables.ensured",
        extra={"event": "database.tables.ensured", "tables": tables},
    )
    return tables
