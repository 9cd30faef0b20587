"""
Cooperative I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import EMAIL_PATTERN, INTERNATIONAL_PHONE_PATTERN, REGISTRATION_NUMBER_PATTERN


def _lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value is not None else value


class CooperativeRead(BaseModel):
    """Schema for reading a cooperative from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    registration_number: str
    district: str
    sector: str
    contact_email: Optional[str] = None
    contact_phone: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CooperativeCreate(BaseModel):
    """Schema for registering a cooperative via API."""

    name: str = Field(min_length=3, max_length=50, description="Unique cooperative name")
    registration_number: str = Field(pattern=REGISTRATION_NUMBER_PATTERN, description="Registration number, e.g. CF00123")
    district: str = Field(min_length=1, max_length=50)
    sector: str = Field(min_length=1, max_length=50)
    contact_email: Optional[str] = Field(default=None, pattern=EMAIL_PATTERN)
    contact_phone: str = Field(pattern=INTERNATIONAL_PHONE_PATTERN)
    is_active: bool = Field(default=True)

    _lower_email = field_validator("contact_email")(_lower)


class CooperativeUpdate(BaseModel):
    """Schema for updating a cooperative via API."""

    name: Optional[str] = Field(default=None, min_length=3, max_length=50)
    registration_number: Optional[str] = Field(default=None, pattern=REGISTRATION_NUMBER_PATTERN)
    district: Optional[str] = Field(default=None, min_length=1, max_length=50)
    sector: Optional[str] = Field(default=None, min_length=1, max_length=50)
    contact_email: Optional[str] = Field(default=None, pattern=EMAIL_PATTERN)
    contact_phone: Optional[str] = Field(default=None, pattern=INTERNATIONAL_PHONE_PATTERN)
    is_active: Optional[bool] = None

    _lower_email = field_validator("contact_email")(_lower)
