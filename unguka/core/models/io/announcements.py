"""
Announcement I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AnnouncementRead(BaseModel):
    """Schema for reading an announcement from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    user_id: int
    title: str
    description: str
    created_at: datetime
    updated_at: datetime


class AnnouncementCreate(BaseModel):
    """Schema for posting an announcement via API."""

    user_id: int
    title: str = Field(min_length=3, max_length=100)
    description: str = Field(min_length=10)


class AnnouncementUpdate(BaseModel):
    """Schema for editing an announcement via API."""

    title: Optional[str] = Field(default=None, min_length=3, max_length=100)
    description: Optional[str] = Field(default=None, min_length=10)
