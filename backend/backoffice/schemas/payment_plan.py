"""
Back Office Backend — Payment Plan Schemas
============================================

The request schema validates types and ranges. The "exactly one owner" rule
is a business rule and lives in PaymentPlanService, so that the service
enforces it no matter who calls it.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class PaymentPlanCreate(BaseModel):
    """
    Example (camelCase accepted):
        {
            "fixedExpenseId": 7,
            "paymentTypeId": 2,
            "expressedInUf": false,
            "bankEntityId": 1,
            "installmentsCount": 12,
            "startDate": "2025-01-05T00:00:00"
        }
    """
    expense_id: Optional[int] = Field(default=None, ge=1)
    fixed_expense_id: Optional[int] = Field(default=None, ge=1)
    payment_type_id: int = Field(ge=1)
    expressed_in_uf: bool = Field(default=False, description="Amounts indexed to UF")
    bank_entity_id: Optional[int] = Field(default=None, ge=1)
    installments_count: int = Field(ge=1)
    start_date: datetime

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("start_date")
    @classmethod
    def to_naive_utc(cls, v: datetime) -> datetime:
        """start_date is stored without time zone; offsets are folded into UTC."""
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class PaymentPlanResponse(BaseModel):
    id: int
    expense_id: Optional[int] = None
    fixed_expense_id: Optional[int] = None
    payment_type_id: int
    expressed_in_uf: bool
    bank_entity_id: Optional[int] = None
    installments_count: int
    start_date: datetime
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
