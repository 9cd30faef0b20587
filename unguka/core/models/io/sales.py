"""
Sale I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from unguka.core.models.domain.enums import PaymentType, SaleStatus

from .common import RWANDA_PHONE_PATTERN


class SaleRead(BaseModel):
    """Schema for reading a sale from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    stock_id: int
    season_id: int
    quantity: int
    unit_price: float
    total_price: float
    buyer: str
    phone_number: str
    payment_type: PaymentType
    status: SaleStatus
    created_at: datetime
    updated_at: datetime


class SaleCreate(BaseModel):
    """Schema for recording a sale via API."""

    stock_id: int
    season_id: int
    quantity: int = Field(ge=1)
    unit_price: float = Field(ge=0)
    buyer: str = Field(min_length=1, max_length=100)
    phone_number: str = Field(pattern=RWANDA_PHONE_PATTERN)
    payment_type: PaymentType


class SaleUpdate(BaseModel):
    """Schema for updating a sale via API."""

    quantity: Optional[int] = Field(default=None, ge=1)
    unit_price: Optional[float] = Field(default=None, ge=0)
    buyer: Optional[str] = Field(default=None, min_length=1, max_length=100)
    phone_number: Optional[str] = Field(default=None, pattern=RWANDA_PHONE_PATTERN)
    payment_type: Optional[PaymentType] = None
