"""
Payment entity models.

- Payment: what the cooperative owes a member for one production, after
  fees and loans were withheld.
- PaymentTransaction: one row per installment paid out of cash.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from unguka.core.models.domain.enums import PaymentStatus

from ..base import Base, utc_now


class Payment(Base, table=True):
    """Entity for a member payment tied to a production.

    Table: payments
    """

    __tablename__ = "payments"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    production_id: int = Field(foreign_key="productions.id", unique=True, index=True)
    season_id: int = Field(foreign_key="seasons.id", index=True)

    gross_amount: float
    total_deductions: float = Field(default=0.0)
    amount_due: float
    amount_paid: float = Field(default=0.0)
    amount_remaining_to_pay: float
    status: str = Field(default=PaymentStatus.PENDING.value, max_length=16, index=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Payment(id={self.id}, user_id={self.user_id}, due={self.amount_due}, status={self.status})"


class PaymentTransaction(Base, table=True):
    """Entity for a single payout installment.

    Table: payment_transactions
    """

    __tablename__ = "payment_transactions"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    payment_id: int = Field(foreign_key="payments.id", index=True)

    amount_paid: float
    amount_remaining_to_pay: float
    transaction_date: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"PaymentTransaction(id={self.id}, payment_id={self.payment_id}, amount_paid={self.amount_paid})"
