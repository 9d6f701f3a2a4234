"""
Back Office Backend — Service Base Class
==========================================

What:  Shared plumbing for services that talk to the relational store.
Why:   Every service reports a store failure the same way: roll the
       session back, log the full exception server-side, and hand the
       endpoint an `Unexpected` outcome it can turn into a generic 500.
How:   Subclasses call `await self._unexpected(db, "operation", exc)` from
       their `except SQLAlchemyError` blocks.

Logger injection:
    Each service takes an optional `logger`. The module-level singletons use
    their module logger; tests pass their own to assert on what was logged.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.results import Unexpected


class StoreService:
    """Base for services backed by an AsyncSession."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(type(self).__module__)

    async def _unexpected(
        self,
        db: AsyncSession,
        operation: str,
        exc: SQLAlchemyError,
    ) -> Unexpected:
        """Roll back the failed unit of work and describe it for the logs."""
        self.logger.error("Database error during %s: %s", operation, exc, exc_info=exc)
        try:
            await db.rollback()
        except SQLAlchemyError:
            # Connection already unusable; get_db_session closes it
            self.logger.warning("Rollback after failed %s also failed", operation)
        return Unexpected(operation=operation, detail=f"{type(exc).__name__}: {exc}")
