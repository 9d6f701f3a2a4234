"""
Back Office Backend — Prospect Service
========================================

What:  Stores and lists leads submitted from the public contact form.
Why:   Append-only. There is no duplicate-mail check: the same person
       writing twice is two leads.

get_by_id returns Ok(None) for an unknown id. Deciding that absence means
404 is left to the endpoint.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.models.prospect import Prospect
from backoffice.results import Ok, Result
from backoffice.schemas.prospect import ProspectCreate
from backoffice.services.base import StoreService

logger = logging.getLogger(__name__)


class ProspectService(StoreService):

    async def create(self, db: AsyncSession, prospect: ProspectCreate) -> Result:
        row = Prospect(**prospect.model_dump())
        try:
            db.add(row)
            await db.commit()
            await db.refresh(row)
        except SQLAlchemyError as e:
            return await self._unexpected(db, "create prospect", e)

        # Only the id: name and mail are personal data
        self.logger.info("Stored prospect %s", row.id)
        return Ok(row)

    async def list_all(self, db: AsyncSession) -> Result:
        """Newest first."""
        query = select(Prospect).order_by(Prospect.created_at.desc(), Prospect.id.desc())
        try:
            result = await db.execute(query)
            return Ok(list(result.scalars().all()))
        except SQLAlchemyError as e:
            return await self._unexpected(db, "list prospects", e)

    async def get_by_id(self, db: AsyncSession, prospect_id: int) -> Result:
        try:
            result = await db.execute(select(Prospect).where(Prospect.id == prospect_id))
            return Ok(result.scalar_one_or_none())
        except SQLAlchemyError as e:
            return await self._unexpected(db, f"get prospect {prospect_id}", e)


# ── Singleton Instance ────────────────────────────────────────────────────
prospect_service = ProspectService(logger)
