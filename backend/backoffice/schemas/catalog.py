"""
Back Office Backend — Catalog Schemas
=======================================

Response models for the read-only catalogs, and the one catalog input
(creating a bank entity). Output is snake_case; input also accepts the
camelCase keys the frontend sends.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class CatalogItem(BaseModel):
    """Shape shared by catalogs that are just an id and a name."""
    id: int
    name: str

    model_config = {"from_attributes": True}


class BankEntityResponse(CatalogItem):
    pass


class PaymentMethodResponse(CatalogItem):
    pass


class PaymentTypeResponse(CatalogItem):
    pass


class ExpenseCategoryResponse(CatalogItem):
    pass


class ReceiptTypeResponse(CatalogItem):
    description: Optional[str] = None


class ExpenseSubcategoryResponse(CatalogItem):
    expense_category_id: int


class ExpenseTypeResponse(BaseModel):
    id: int
    name: str = Field(description="Display label, e.g. 'Gasto Operacional'")
    code: str = Field(description="Stable identifier: expense, cost, investment")
    description: Optional[str] = None
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class RecurrenceTypeResponse(BaseModel):
    id: int
    value: str = Field(description="e.g. 'mensual', 'anual'")
    description: str

    model_config = {"from_attributes": True}


class BankEntityCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200, description="Bank name")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("name must not be blank")
        return stripped
