"""
Loan I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from unguka.core.models.domain.enums import LoanStatus


class LoanRead(BaseModel):
    """Schema for reading a loan from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    user_id: int
    season_id: Optional[int] = None
    purchase_input_id: Optional[int] = None
    principal: float
    interest: float
    amount_owed: float
    status: LoanStatus
    created_at: datetime
    updated_at: datetime


class LoanCreate(BaseModel):
    """Schema for granting a loan via API.

    ``interest`` is a percentage added once to the principal.
    """

    user_id: int
    season_id: Optional[int] = None
    principal: float = Field(gt=0)
    interest: float = Field(default=0.0, ge=0)


class LoanUpdate(BaseModel):
    """Schema for reassigning a loan via API."""

    user_id: Optional[int] = None
    season_id: Optional[int] = None
    status: Optional[LoanStatus] = None


class LoanRepayment(BaseModel):
    """Schema for a loan repayment."""

    amount: float = Field(gt=0)


class LoanTransactionRead(BaseModel):
    """Schema for reading a loan repayment."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    loan_id: int
    amount_paid: float
    amount_remaining_to_pay: float
    transaction_date: datetime
