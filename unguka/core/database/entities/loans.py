"""
Loan entity models.

- Loan: money or inputs advanced to a member, with simple interest added
  once at creation.
- LoanTransaction: one row per repayment, kept as an audit trail.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from unguka.core.models.domain.enums import LoanStatus

from ..base import Base, utc_now


class Loan(Base, table=True):
    """Entity for a member loan.

    Table: loans
    """

    __tablename__ = "loans"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    season_id: Optional[int] = Field(default=None, foreign_key="seasons.id", index=True)
    purchase_input_id: Optional[int] = Field(default=None, foreign_key="purchase_inputs.id", index=True)

    principal: float
    interest: float = Field(default=0.0)
    amount_owed: float
    status: str = Field(default=LoanStatus.PENDING.value, max_length=16, index=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Loan(id={self.id}, user_id={self.user_id}, amount_owed={self.amount_owed}, status={self.status})"


class LoanTransaction(Base, table=True):
    """Entity for a single loan repayment.

    Table: loan_transactions
    """

    __tablename__ = "loan_transactions"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)
    loan_id: int = Field(foreign_key="loans.id", index=True)

    amount_paid: float
    amount_remaining_to_pay: float
    transaction_date: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"LoanTransaction(id={self.id}, loan_id={self.loan_id}, amount_paid={self.amount_paid})"
