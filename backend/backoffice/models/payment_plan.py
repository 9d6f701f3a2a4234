"""
Back Office Backend — Payment Plan SQLAlchemy Model
=====================================================

What:  ORM model for `payment_plan`: how an expense is paid (type, bank,
       number of installments, start date, UF indexation).
Why:   A plan belongs to exactly one owner, either a one-off expense or a
       recurring fixed expense. The service enforces this before insert
       and the table repeats it as a CHECK constraint.

Query Patterns:
    - By id:                 primary key lookup
    - By fixed expense:      WHERE fixed_expense_id = :id ORDER BY start_date DESC
                             → idx_payment_plan_fixed_expense
    - By expense:            WHERE expense_id = :id ORDER BY start_date DESC
                             → idx_payment_plan_expense
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.database import Base
from backoffice.models.catalog import utcnow


class PaymentPlan(Base):
    __tablename__ = "payment_plan"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # ── Owner (exactly one) ───────────────────────────────────────────────
    # expenses / fixed_expenses live in another service's schema; ids only
    expense_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    fixed_expense_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # ── Terms ─────────────────────────────────────────────────────────────
    payment_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("payment_types.id"),
        nullable=False,
    )
    expressed_in_uf: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
    )
    bank_entity_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("bank_entities.id"),
        nullable=True,
    )
    installments_count: Mapped[int] = mapped_column(Integer, nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=utcnow,
        onupdate=utcnow,
    )

    __table_args__ = (
        CheckConstraint(
            "(expense_id IS NULL) <> (fixed_expense_id IS NULL)",
            name="ck_payment_plan_single_owner",
        ),
        CheckConstraint("installments_count >= 1", name="ck_payment_plan_installments"),
        Index("idx_payment_plan_fixed_expense", "fixed_expense_id"),
        Index("idx_payment_plan_expense", "expense_id"),
    )

    def __repr__(self) -> str:
        owner = (
            f"expense_id={self.expense_id}"
            if self.expense_id is not None
            else f"fixed_expense_id={self.fixed_expense_id}"
        )
        return f"<PaymentPlan(id={self.id}, {owner}, installments={self.installments_count})>"
