"""
Cash entity model.

One row per cooperative holding the balance available to pay members and
suppliers.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class Cash(Base, table=True):
    """Entity for a cooperative's cash balance.

    Table: cash
    """

    __tablename__ = "cash"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", unique=True, index=True)

    amount: float = Field(default=0.0)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Cash(cooperative_id={self.cooperative_id}, amount={self.amount})"
