"""
Back Office Backend — Payment Plan Service
============================================

What:  Create, read, list and delete payment plans.
Why:   A plan must belong to exactly one owner. That rule is checked here,
       before anything touches the store, so a rejected plan leaves no row.

Operations:
    create(plan)                        → Ok(plan) | Invalid
    get_by_id(id)                       → Ok(plan) | NotFound
    list_by_fixed_expense(id)           → Ok(list)   newest start_date first
    list_by_expense(id)                 → Ok(list)   newest start_date first
    delete(id)                          → Ok(None)   also when the id never existed
"""

import logging
from typing import Dict

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.models.payment_plan import PaymentPlan
from backoffice.results import Invalid, NotFound, Ok, Result
from backoffice.schemas.payment_plan import PaymentPlanCreate
from backoffice.services.base import StoreService

logger = logging.getLogger(__name__)

OWNER_REQUIRED_MESSAGE = (
    "El plan de pago debe asociarse a un gasto o a un gasto fijo, pero no a ambos"
)


def owner_errors(plan: PaymentPlanCreate) -> Dict[str, str]:
    """Field errors when the plan has zero or two owners; empty when valid."""
    has_expense = plan.expense_id is not None
    has_fixed = plan.fixed_expense_id is not None
    if has_expense and has_fixed:
        reason = "only one of expense_id / fixed_expense_id may be set"
    elif not has_expense and not has_fixed:
        reason = "one of expense_id / fixed_expense_id is required"
    else:
        return {}
    return {"expense_id": reason, "fixed_expense_id": reason}


class PaymentPlanService(StoreService):

    async def create(self, db: AsyncSession, plan: PaymentPlanCreate) -> Result:
        errors = owner_errors(plan)
        if errors:
            self.logger.info(
                "Rejected payment plan: expense_id=%s fixed_expense_id=%s",
                plan.expense_id,
                plan.fixed_expense_id,
            )
            return Invalid(message=OWNER_REQUIRED_MESSAGE, fields=errors)

        row = PaymentPlan(**plan.model_dump())
        try:
            db.add(row)
            await db.commit()
            await db.refresh(row)
        except SQLAlchemyError as e:
            return await self._unexpected(db, "create payment_plan", e)

        self.logger.info(
            "Created payment plan %s (%d installments)", row.id, row.installments_count
        )
        return Ok(row)

    async def get_by_id(self, db: AsyncSession, plan_id: int) -> Result:
        try:
            result = await db.execute(select(PaymentPlan).where(PaymentPlan.id == plan_id))
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            return await self._unexpected(db, f"get payment_plan {plan_id}", e)

        if row is None:
            return NotFound(resource="payment_plan", resource_id=plan_id)
        return Ok(row)

    async def list_by_fixed_expense(self, db: AsyncSession, fixed_expense_id: int) -> Result:
        query = (
            select(PaymentPlan)
            .where(PaymentPlan.fixed_expense_id == fixed_expense_id)
            .order_by(PaymentPlan.start_date.desc(), PaymentPlan.id.desc())
        )
        try:
            result = await db.execute(query)
            return Ok(list(result.scalars().all()))
        except SQLAlchemyError as e:
            return await self._unexpected(
                db, f"list payment_plan fixed_expense={fixed_expense_id}", e
            )

    async def list_by_expense(self, db: AsyncSession, expense_id: int) -> Result:
        query = (
            select(PaymentPlan)
            .where(PaymentPlan.expense_id == expense_id)
            .order_by(PaymentPlan.start_date.desc(), PaymentPlan.id.desc())
        )
        try:
            result = await db.execute(query)
            return Ok(list(result.scalars().all()))
        except SQLAlchemyError as e:
            return await self._unexpected(db, f"list payment_plan expense={expense_id}", e)

    async def delete(self, db: AsyncSession, plan_id: int) -> Result:
        """Idempotent: deleting a missing plan is not an error."""
        try:
            result = await db.execute(delete(PaymentPlan).where(PaymentPlan.id == plan_id))
            await db.commit()
        except SQLAlchemyError as e:
            return await self._unexpected(db, f"delete payment_plan {plan_id}", e)

        self.logger.info("Deleted payment plan %s (rows affected: %s)", plan_id, result.rowcount)
        return Ok(None)


# ── Singleton Instance ────────────────────────────────────────────────────
payment_plan_service = PaymentPlanService(logger)
