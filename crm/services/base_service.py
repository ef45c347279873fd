"""Shared service base with robust session lifecycle behavior."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from crm.core.exceptions import DatabaseError, NotFoundError
from crm.database import db as db_module
from crm.utils.validators import MAX_ID

logger = logging.getLogger(__name__)


class BaseService:
    """Base class for services that operate on a SQLAlchemy session."""

    def __init__(self, db: Session | None = None) -> None:
        self.db = db or db_module.SessionLocal()

    def commit(self) -> None:
        """Commit current transaction and rollback on failure."""
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("database.commit_failed", extra={"event": "database.commit_failed"})
            raise DatabaseError(f"Database commit failed: {exc.__class__.__name__}") from exc

    def rollback(self) -> None:
        self.db.rollback()

    def close(self) -> None:
        self.db.close()

    def __enter__(self) -> "BaseService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type:
            self.rollback()
        self.close()

    def require(self, model, entity_id: int, label: str):
        """Return the row with ``entity_id`` or raise ``NotFoundError``."""
        # Ids outside the column range cannot exist; skip the lookup.
        row = self.db.get(model, entity_id) if 0 < entity_id <= MAX_ID else None
        if row is None:
            logger.warning(
                "record.not_found",
                extra={"event": "record.not_found", "entity": label.lower(), "entity_id": entity_id},
            )
            raise NotFoundError(f"{label} with ID {entity_id} not found")
        return row
