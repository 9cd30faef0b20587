"""
Purchase input and purchase out I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from unguka.core.models.domain.enums import PaymentType


class PurchaseInputRead(BaseModel):
    """Schema for reading a purchase input from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    user_id: int
    product_id: int
    season_id: int
    quantity: int
    unit_price: float
    total_price: float
    payment_type: PaymentType
    created_at: datetime
    loan_id: Optional[int] = None


class PurchaseInputCreate(BaseModel):
    """Schema for selling inputs to a member via API."""

    user_id: int
    product_id: int
    season_id: int
    quantity: int = Field(ge=1)
    payment_type: PaymentType


class PurchaseInputUpdate(BaseModel):
    """Schema for correcting a purchase input via API."""

    quantity: Optional[int] = Field(default=None, ge=1)
    payment_type: Optional[PaymentType] = None


class PurchaseOutRead(BaseModel):
    """Schema for reading a purchase out from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    product_id: int
    season_id: int
    quantity: int
    unit_price: float
    total_price: float
    created_at: datetime
    updated_at: datetime


class PurchaseOutCreate(BaseModel):
    """Schema for recording a purchase out via API."""

    product_id: int
    season_id: int
    quantity: int = Field(gt=0)
    unit_price: float = Field(gt=0)


class PurchaseOutUpdate(BaseModel):
    """Schema for correcting a purchase out via API."""

    quantity: Optional[int] = Field(default=None, gt=0)
    unit_price: Optional[float] = Field(default=None, gt=0)
