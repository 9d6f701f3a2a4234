"""
Back Office Backend — Catalog Service
=======================================

What:  Uniform access to the reference catalogs behind the dropdowns.
Why:   Eight tables share the same three operations; one typed
       description per catalog replaces eight near-identical repositories.
How:   `CatalogKind` names the catalog, `_CATALOGS` maps it to its model,
       ordering and whether it carries an `is_active` flag.

Operations:
    list_active(kind)               → Ok(list)            ordered per catalog
    get_by_id(kind, id)             → Ok(row) | NotFound   inactive rows count as absent
    create(kind, fields)            → Ok(row)              no uniqueness check
    list_subcategories(category_id) → Ok(list)             unknown category → []

Ordering:
    expense_type, bank_entity, expense_subcategory  → name
    recurrence_type                                 → value
    everything else                                 → id (insertion order)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type

from sqlalchemy import select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import Base
from backoffice.models.catalog import (
    BankEntity,
    ExpenseCategory,
    ExpenseSubcategory,
    ExpenseType,
    PaymentMethod,
    PaymentType,
    ReceiptType,
    RecurrenceType,
)
from backoffice.results import NotFound, Ok, Result
from backoffice.services.base import StoreService

logger = logging.getLogger(__name__)


class CatalogKind(str, Enum):
    BANK_ENTITY = "bank_entity"
    PAYMENT_METHOD = "payment_method"
    PAYMENT_TYPE = "payment_type"
    RECEIPT_TYPE = "receipt_type"
    EXPENSE_CATEGORY = "expense_category"
    EXPENSE_SUBCATEGORY = "expense_subcategory"
    EXPENSE_TYPE = "expense_type"
    RECURRENCE_TYPE = "recurrence_type"


@dataclass(frozen=True)
class CatalogDescriptor:
    model: Type[Base]
    order_by: Tuple[str, ...] = ("id",)
    active_only: bool = False

    def ordering(self):
        columns = [getattr(self.model, name) for name in self.order_by]
        if "id" not in self.order_by:
            # Stable order for rows that tie on the sort key
            columns.append(self.model.id)
        return columns


_CATALOGS: Dict[CatalogKind, CatalogDescriptor] = {
    CatalogKind.BANK_ENTITY: CatalogDescriptor(BankEntity, order_by=("name",)),
    CatalogKind.PAYMENT_METHOD: CatalogDescriptor(PaymentMethod),
    CatalogKind.PAYMENT_TYPE: CatalogDescriptor(PaymentType),
    CatalogKind.RECEIPT_TYPE: CatalogDescriptor(ReceiptType),
    CatalogKind.EXPENSE_CATEGORY: CatalogDescriptor(ExpenseCategory),
    CatalogKind.EXPENSE_SUBCATEGORY: CatalogDescriptor(ExpenseSubcategory, order_by=("name",)),
    CatalogKind.EXPENSE_TYPE: CatalogDescriptor(ExpenseType, order_by=("name",), active_only=True),
    CatalogKind.RECURRENCE_TYPE: CatalogDescriptor(
        RecurrenceType, order_by=("value",), active_only=True
    ),
}


def describe(kind: CatalogKind) -> CatalogDescriptor:
    return _CATALOGS[kind]


class CatalogService(StoreService):
    """
    Read access to every catalog, plus inserts for the append-only ones.

    Stateless: the session is passed per call, so one instance serves all
    requests.
    """

    def _base_query(self, kind: CatalogKind):
        descriptor = describe(kind)
        query = select(descriptor.model)
        if descriptor.active_only:
            query = query.where(descriptor.model.is_active == true())
        return query

    async def list_active(self, db: AsyncSession, kind: CatalogKind) -> Result:
        """All visible rows of a catalog, in that catalog's display order."""
        query = self._base_query(kind).order_by(*describe(kind).ordering())
        try:
            result = await db.execute(query)
            rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            return await self._unexpected(db, f"list {kind.value}", e)

        self.logger.debug("Listed %d %s rows", len(rows), kind.value)
        return Ok(rows)

    async def get_by_id(self, db: AsyncSession, kind: CatalogKind, item_id: int) -> Result:
        """One row by id; absent and inactive rows both yield NotFound."""
        model = describe(kind).model
        query = self._base_query(kind).where(model.id == item_id)
        try:
            result = await db.execute(query)
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            return await self._unexpected(db, f"get {kind.value} {item_id}", e)

        if row is None:
            return NotFound(resource=kind.value, resource_id=item_id)
        return Ok(row)

    async def create(self, db: AsyncSession, kind: CatalogKind, fields: Dict[str, Any]) -> Result:
        """
        Insert a catalog row and return it with its store-assigned id.

        Committed before returning, so the row is visible to other sessions
        by the time the endpoint answers.
        """
        row = describe(kind).model(**fields)
        try:
            db.add(row)
            await db.commit()
            await db.refresh(row)
        except SQLAlchemyError as e:
            return await self._unexpected(db, f"create {kind.value}", e)

        self.logger.info("Created %s id=%s", kind.value, row.id)
        return Ok(row)

    async def list_subcategories(
        self,
        db: AsyncSession,
        category_id: Optional[int] = None,
    ) -> Result:
        """Subcategories ordered by name, optionally only those of one category."""
        query = self._base_query(CatalogKind.EXPENSE_SUBCATEGORY)
        if category_id is not None:
            query = query.where(ExpenseSubcategory.expense_category_id == category_id)
        query = query.order_by(*describe(CatalogKind.EXPENSE_SUBCATEGORY).ordering())
        try:
            result = await db.execute(query)
            rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            return await self._unexpected(db, f"list expense_subcategory category={category_id}", e)
        return Ok(rows)


# ── Singleton Instance ────────────────────────────────────────────────────
catalog_service = CatalogService(logger)
