"""
Back Office Backend — Prospect Schemas
========================================

Length limits mirror the column sizes in models/prospect.py.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel


class ProspectCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    mail: EmailStr = Field(description="Contact e-mail (duplicates allowed)")
    contact: Optional[str] = Field(default=None, max_length=50, description="Phone or other contact")
    enterprise: Optional[str] = Field(default=None, max_length=255)
    subject: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None, max_length=2000)

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "str_strip_whitespace": True,
    }


class ProspectResponse(BaseModel):
    id: int
    name: str
    mail: str
    contact: Optional[str] = None
    enterprise: Optional[str] = None
    subject: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}
