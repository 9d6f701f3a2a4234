"""Create back office catalog, payment plan, prospect and unit measure tables

Revision ID: 001
Revises: None
Create Date: 2025-01-15 00:00:00.000000+00:00

What:  Creates every table the API reads or writes and seeds the three
       expense types.
How:   Generic column types so the same revision runs on PostgreSQL and on
       SQLite for local development.

Rollback: downgrade() drops all tables (destructive, all data lost).
"""

from datetime import datetime, timezone
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def _is_active() -> sa.Column:
    return sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False)


def upgrade() -> None:
    # ── Catalogs ──────────────────────────────────────────────────────────
    op.create_table("bank_entities", _id(), sa.Column("name", sa.String(200), nullable=False))
    op.create_table("payment_methods", _id(), sa.Column("name", sa.String(255), nullable=False))
    op.create_table("payment_types", _id(), sa.Column("name", sa.String(100), nullable=False))
    op.create_table(
        "receipt_types",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
    )
    op.create_table("expense_category", _id(), sa.Column("name", sa.String(255), nullable=False))
    op.create_table(
        "expense_subcategory",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "expense_category_id",
            sa.Integer(),
            sa.ForeignKey("expense_category.id"),
            nullable=False,
        ),
    )
    op.create_index(
        "idx_expense_subcategory_category", "expense_subcategory", ["expense_category_id"]
    )

    expense_type = op.create_table(
        "expense_type",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("code", sa.String(50), nullable=False, unique=True),
        sa.Column("description", sa.String(255), nullable=True),
        _is_active(),
        _created_at(),
    )
    op.create_table(
        "recurrence_type",
        _id(),
        sa.Column("value", sa.String(50), nullable=False),
        sa.Column("description", sa.String(200), nullable=False),
        _is_active(),
    )

    # ── Payment plans ─────────────────────────────────────────────────────
    op.create_table(
        "payment_plan",
        _id(),
        sa.Column("expense_id", sa.Integer(), nullable=True),
        sa.Column("fixed_expense_id", sa.Integer(), nullable=True),
        sa.Column(
            "payment_type_id",
            sa.Integer(),
            sa.ForeignKey("payment_types.id"),
            nullable=False,
        ),
        sa.Column("expressed_in_uf", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("bank_entity_id", sa.Integer(), sa.ForeignKey("bank_entities.id"), nullable=True),
        sa.Column("installments_count", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint(
            "(expense_id IS NULL) <> (fixed_expense_id IS NULL)",
            name="ck_payment_plan_single_owner",
        ),
        sa.CheckConstraint("installments_count >= 1", name="ck_payment_plan_installments"),
    )
    op.create_index("idx_payment_plan_fixed_expense", "payment_plan", ["fixed_expense_id"])
    op.create_index("idx_payment_plan_expense", "payment_plan", ["expense_id"])

    # ── Prospects ─────────────────────────────────────────────────────────
    op.create_table(
        "prospects",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("mail", sa.String(255), nullable=False),
        sa.Column("contact", sa.String(50), nullable=True),
        sa.Column("enterprise", sa.String(255), nullable=True),
        sa.Column("subject", sa.String(255), nullable=True),
        sa.Column("description", sa.String(2000), nullable=True),
        _created_at(),
    )
    op.create_index("idx_prospects_created_at", "prospects", [sa.text("created_at DESC")])

    # ── Unit measures ─────────────────────────────────────────────────────
    op.create_table(
        "unit_measures",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("symbol", sa.String(10), nullable=True),
        sa.Column("description", sa.String(200), nullable=True),
        _is_active(),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    # ── Seed data ─────────────────────────────────────────────────────────
    now = datetime.now(timezone.utc)
    op.bulk_insert(
        expense_type,
        [
            {
                "id": 1,
                "name": "Gasto Operacional",
                "code": "expense",
                "description": "Gastos necesarios para la operación diaria del negocio",
                "is_active": True,
                "created_at": now,
            },
            {
                "id": 2,
                "name": "Costo de Producción",
                "code": "cost",
                "description": "Costos directamente asociados a la producción",
                "is_active": True,
                "created_at": now,
            },
            {
                "id": 3,
                "name": "Inversión",
                "code": "investment",
                "description": "Adquisición de activos de largo plazo",
                "is_active": True,
                "created_at": now,
            },
        ],
    )
    if op.get_bind().dialect.name == "postgresql":
        # Explicit ids above leave the sequence at 1
        op.execute(
            "SELECT setval(pg_get_serial_sequence('expense_type', 'id'), "
            "(SELECT MAX(id) FROM expense_type))"
        )


def downgrade() -> None:
    op.drop_table("unit_measures")
    op.drop_index("idx_prospects_created_at", table_name="prospects")
    op.drop_table("prospects")
    op.drop_index("idx_payment_plan_expense", table_name="payment_plan")
    op.drop_index("idx_payment_plan_fixed_expense", table_name="payment_plan")
    op.drop_table("payment_plan")
    op.drop_table("recurrence_type")
    op.drop_table("expense_type")
    op.drop_index("idx_expense_subcategory_category", table_name="expense_subcategory")
    op.drop_table("expense_subcategory")
    op.drop_table("expense_category")
    op.drop_table("receipt_types")
    op.drop_table("payment_types")
    op.drop_table("payment_methods")
    op.drop_table("bank_entities")
