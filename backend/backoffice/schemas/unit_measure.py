"""
Back Office Backend — Unit Measure Schemas
============================================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class UnitMeasureInput(BaseModel):
    """Body of both create and update; update replaces all three fields."""
    name: str = Field(min_length=1, max_length=100)
    symbol: Optional[str] = Field(default=None, max_length=10)
    description: Optional[str] = Field(default=None, max_length=200)

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "str_strip_whitespace": True,
    }


class UnitMeasureResponse(BaseModel):
    id: int
    name: str
    symbol: Optional[str] = None
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
