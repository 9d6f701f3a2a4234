"""
Back Office Backend — Catalog SQLAlchemy Models
=================================================

What:  ORM models for the small reference tables shown in dropdowns:
       bank entities, payment methods/types, receipt types, expense
       categories/subcategories, expense types and recurrence types.
Who:   Read through CatalogService; created by Alembic revision 001.

Table notes:
    - Integer autoincrement ids, assigned by the store and never reused.
    - expense_type and recurrence_type carry `is_active`; inactive rows are
      soft-deleted and never surface through the API.
    - expense_subcategory.expense_category_id is a plain integer column.
      An unknown category simply matches no rows.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BankEntity(Base):
    """Bank a payment plan may be financed through. Append-only."""

    __tablename__ = "bank_entities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    def __repr__(self) -> str:
        return f"<BankEntity(id={self.id}, name='{self.name}')>"


class PaymentMethod(Base):
    __tablename__ = "payment_methods"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class PaymentType(Base):
    __tablename__ = "payment_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)


class ReceiptType(Base):
    """Kind of supporting document (invoice, receipt, ...)."""

    __tablename__ = "receipt_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


class ExpenseCategory(Base):
    __tablename__ = "expense_category"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class ExpenseSubcategory(Base):
    """Child of an ExpenseCategory; listed optionally filtered by its parent."""

    __tablename__ = "expense_subcategory"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    expense_category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("expense_category.id"),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_expense_subcategory_category", "expense_category_id"),
    )


class ExpenseType(Base):
    """
    Kind of outflow: operating expense, production cost or investment.

    `code` is the stable identifier ("expense", "cost", "investment");
    `name` is the display label the list is sorted by.
    """

    __tablename__ = "expense_type"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<ExpenseType(id={self.id}, code='{self.code}', active={self.is_active})>"


class RecurrenceType(Base):
    """How often a fixed expense repeats ('mensual', 'anual', ...)."""

    __tablename__ = "recurrence_type"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    value: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(String(200), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )
