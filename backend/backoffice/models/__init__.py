# Models package init
"""
Importing this package registers every table on Base.metadata
(used by Alembic --autogenerate and by the test suite's create_all).
"""

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
from backoffice.models.payment_plan import PaymentPlan
from backoffice.models.prospect import Prospect
from backoffice.models.unit_measure import UnitMeasure

__all__ = [
    "BankEntity",
    "ExpenseCategory",
    "ExpenseSubcategory",
    "ExpenseType",
    "PaymentMethod",
    "PaymentPlan",
    "PaymentType",
    "Prospect",
    "ReceiptType",
    "RecurrenceType",
    "UnitMeasure",
]
