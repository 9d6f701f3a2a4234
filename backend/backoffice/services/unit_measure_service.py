"""
Back Office Backend — Unit Measure Service
============================================

What:  Full lifecycle for unit measures, the one catalog users edit.

Operations:
    list_all()           → Ok(list)           ordered by name
    get_by_id(id)        → Ok(row | None)     endpoint maps None to 404
    create(input)        → Ok(row)
    update(id, input)    → Ok(row) | NotFound store untouched on NotFound
    delete(id)           → Ok(None)           no existence precondition
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.models.unit_measure import UnitMeasure
from backoffice.results import NotFound, Ok, Result
from backoffice.schemas.unit_measure import UnitMeasureInput
from backoffice.services.base import StoreService

logger = logging.getLogger(__name__)


class UnitMeasureService(StoreService):

    async def list_all(self, db: AsyncSession) -> Result:
        query = select(UnitMeasure).order_by(UnitMeasure.name, UnitMeasure.id)
        try:
            result = await db.execute(query)
            return Ok(list(result.scalars().all()))
        except SQLAlchemyError as e:
            return await self._unexpected(db, "list unit_measures", e)

    async def get_by_id(self, db: AsyncSession, unit_id: int) -> Result:
        try:
            result = await db.execute(select(UnitMeasure).where(UnitMeasure.id == unit_id))
            return Ok(result.scalar_one_or_none())
        except SQLAlchemyError as e:
            return await self._unexpected(db, f"get unit_measure {unit_id}", e)

    async def create(self, db: AsyncSession, data: UnitMeasureInput) -> Result:
        row = UnitMeasure(**data.model_dump())
        try:
            db.add(row)
            await db.commit()
            await db.refresh(row)
        except SQLAlchemyError as e:
            return await self._unexpected(db, "create unit_measure", e)

        self.logger.info("Created unit measure %s (%s)", row.id, row.name)
        return Ok(row)

    async def update(self, db: AsyncSession, unit_id: int, data: UnitMeasureInput) -> Result:
        """Replace name, symbol and description of an existing unit."""
        try:
            result = await db.execute(select(UnitMeasure).where(UnitMeasure.id == unit_id))
            row = result.scalar_one_or_none()
            if row is None:
                return NotFound(resource="unit_measure", resource_id=unit_id)

            for field_name, value in data.model_dump().items():
                setattr(row, field_name, value)
            await db.commit()
            await db.refresh(row)
        except SQLAlchemyError as e:
            return await self._unexpected(db, f"update unit_measure {unit_id}", e)

        self.logger.info("Updated unit measure %s", unit_id)
        return Ok(row)

    async def delete(self, db: AsyncSession, unit_id: int) -> Result:
        try:
            result = await db.execute(delete(UnitMeasure).where(UnitMeasure.id == unit_id))
            await db.commit()
        except SQLAlchemyError as e:
            return await self._unexpected(db, f"delete unit_measure {unit_id}", e)

        self.logger.info("Deleted unit measure %s (rows affected: %s)", unit_id, result.rowcount)
        return Ok(None)


# ── Singleton Instance ────────────────────────────────────────────────────
unit_measure_service = UnitMeasureService(logger)
