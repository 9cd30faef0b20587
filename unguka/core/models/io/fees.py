"""
Fee type and fee I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from unguka.core.models.domain.enums import ActivityStatus, FeeStatus


class FeeTypeRead(BaseModel):
    """Schema for reading a fee type from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    name: str
    amount: float
    description: Optional[str] = None
    status: ActivityStatus
    is_per_season: bool
    auto_apply_on_create: bool
    created_at: datetime
    updated_at: datetime


class FeeTypeCreate(BaseModel):
    """Schema for defining a fee type via API."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    amount: float = Field(ge=0)
    description: Optional[str] = Field(default=None, max_length=500)
    status: ActivityStatus = Field(default=ActivityStatus.ACTIVE)
    is_per_season: bool = Field(default=True)
    auto_apply_on_create: bool = Field(default=True)


class FeeTypeUpdate(BaseModel):
    """Schema for updating a fee type via API."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    amount: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = Field(default=None, max_length=500)
    status: Optional[ActivityStatus] = None
    is_per_season: Optional[bool] = None
    auto_apply_on_create: Optional[bool] = None


class FeeAssign(BaseModel):
    """Schema for assigning a fee type to every member."""

    season_id: Optional[int] = None


class FeeAssignResult(BaseModel):
    fee_type_id: int
    season_id: Optional[int] = None
    created: int


class FeeRead(BaseModel):
    """Schema for reading a member fee from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    user_id: int
    season_id: Optional[int] = None
    fee_type_id: int
    amount_owed: float
    amount_paid: float
    remaining_amount: float
    status: FeeStatus
    paid_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class FeeUpdate(BaseModel):
    """Schema for correcting the amounts of a fee."""

    amount_owed: Optional[float] = Field(default=None, ge=0)
    amount_paid: Optional[float] = Field(default=None, ge=0)


class FeePaymentCreate(BaseModel):
    """Schema for recording a fee payment made by a member."""

    user_id: int
    fee_type_id: int
    season_id: Optional[int] = None
    amount: float = Field(gt=0)
