"""
Member (user) I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from unguka.core.models.domain.enums import UserRole

from .common import NATIONAL_ID_PATTERN, PICTURE_URL_PATTERN, RWANDA_PHONE_PATTERN


class MemberRead(BaseModel):
    """Schema for reading a cooperative member from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    names: str
    phone_number: str
    national_id: str
    role: UserRole
    profile_picture: str
    created_at: datetime
    updated_at: datetime


class MemberCreate(BaseModel):
    """Schema for registering a member via API."""

    names: str = Field(min_length=3, max_length=50)
    phone_number: str = Field(pattern=RWANDA_PHONE_PATTERN, description="Rwandan mobile number")
    national_id: str = Field(pattern=NATIONAL_ID_PATTERN, description="16-digit national ID")
    role: UserRole = Field(default=UserRole.MEMBER)
    profile_picture: Optional[str] = Field(default=None, pattern=PICTURE_URL_PATTERN)


class MemberUpdate(BaseModel):
    """Schema for updating a member via API."""

    names: Optional[str] = Field(default=None, min_length=3, max_length=50)
    phone_number: Optional[str] = Field(default=None, pattern=RWANDA_PHONE_PATTERN)
    national_id: Optional[str] = Field(default=None, pattern=NATIONAL_ID_PATTERN)
    role: Optional[UserRole] = None
    profile_picture: Optional[str] = Field(default=None, pattern=PICTURE_URL_PATTERN)
