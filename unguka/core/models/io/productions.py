"""
Production I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from unguka.core.models.domain.enums import ProductionPaymentStatus


class ProductionRead(BaseModel):
    """Schema for reading a production from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    user_id: int
    product_id: int
    season_id: int
    quantity: int
    unit_price: float
    total_price: float
    payment_status: ProductionPaymentStatus
    created_at: datetime
    updated_at: datetime


class ProductionCreate(BaseModel):
    """Schema for recording a member's production via API.

    The unit price is taken from the product.
    """

    user_id: int
    product_id: int
    season_id: int
    quantity: int = Field(ge=1)


class ProductionUpdate(BaseModel):
    """Schema for correcting the quantity of a production."""

    quantity: int = Field(ge=1)
