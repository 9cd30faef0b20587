"""
Plot I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PlotRead(BaseModel):
    """Schema for reading a plot from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    user_id: int
    size: float
    upi: str
    created_at: datetime
    updated_at: datetime


class PlotCreate(BaseModel):
    """Schema for registering a plot via API."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: int
    size: float = Field(ge=0.01, description="Surface in ares")
    upi: str = Field(min_length=5, max_length=20, description="Unique parcel identifier")


class PlotUpdate(BaseModel):
    """Schema for updating a plot via API."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: Optional[int] = None
    size: Optional[float] = Field(default=None, ge=0.01)
    upi: Optional[str] = Field(default=None, min_length=5, max_length=20)
