"""
Cash I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CashRead(BaseModel):
    """Schema for reading a cooperative cash balance."""

    cooperative_id: int
    amount: float
    updated_at: Optional[datetime] = None


class CashSet(BaseModel):
    """Schema for initializing or correcting the cash balance."""

    amount: float = Field(ge=0)
