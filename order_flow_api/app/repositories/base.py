"""Shared behaviour for SQLAlchemy-backed repositories."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from order_flow_api.app.core.exceptions import ConflictError, PersistenceError


logger = logging.getLogger(__name__)


class SqlRepository:
    """Base class holding the session and the commit/rollback logic."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def add(self, entity) -> None:
        self.db.add(entity)

    def delete(self, entity) -> None:
        self.db.delete(entity)

    def commit(self, failure_message: str, conflict_message: Optional[str] = None) -> None:
        """Commit the pending changes or roll them back.

        A constraint violation is reported as ``ConflictError`` when the
        caller supplies ``conflict_message``; every other store failure
        becomes ``PersistenceError(failure_message)``.  The original
        exception is chained in both cases.
        """
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if conflict_message is not None:
                logger.warning("Integrity violation: %s", exc.orig)
                raise ConflictError(conflict_message) from exc
            logger.exception("Commit rejected by the database")
            raise PersistenceError(failure_message) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Commit failed")
            raise PersistenceError(failure_message) from exc
