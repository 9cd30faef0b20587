"""
Product and stock I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _normalize_name(value: Optional[str]) -> Optional[str]:
    return value.strip().lower() if value is not None else value


class ProductRead(BaseModel):
    """Schema for reading a product from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    product_name: str
    unit_price: float
    created_at: datetime
    updated_at: datetime


class ProductCreate(BaseModel):
    """Schema for creating a product via API.

    Names are stored trimmed and lower-cased.
    """

    product_name: str = Field(min_length=2, max_length=100)
    unit_price: float = Field(default=0.0, ge=0)

    _normalize = field_validator("product_name")(_normalize_name)


class ProductUpdate(BaseModel):
    """Schema for updating a product via API."""

    product_name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    unit_price: Optional[float] = Field(default=None, ge=0)

    _normalize = field_validator("product_name")(_normalize_name)


class StockRead(BaseModel):
    """Schema for reading a stock row from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    product_id: int
    quantity: int
    total_price: float
    created_at: datetime
    updated_at: datetime
