"""
Payment I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from unguka.core.models.domain.enums import PaymentStatus


class PaymentRead(BaseModel):
    """Schema for reading a member payment from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    user_id: int
    production_id: int
    season_id: int
    gross_amount: float
    total_deductions: float
    amount_due: float
    amount_paid: float
    amount_remaining_to_pay: float
    status: PaymentStatus
    created_at: datetime
    updated_at: datetime


class PaymentProcess(BaseModel):
    """Schema for paying a member for a production."""

    production_id: int
    amount_paid: float = Field(ge=0)


class PaymentPreview(BaseModel):
    """Figures a payment would be processed with, without writing anything."""

    production_id: int
    user_id: int
    season_id: int
    gross_amount: float
    outstanding_fees: float
    outstanding_loans: float
    total_deductions: float
    amount_due: float
    amount_paid: float
    amount_remaining_to_pay: float
    outstanding_other_payments: float
    payment_id: Optional[int] = None


class PaymentTransactionRead(BaseModel):
    """Schema for reading a payout installment."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    user_id: int
    payment_id: int
    amount_paid: float
    amount_remaining_to_pay: float
    transaction_date: datetime
