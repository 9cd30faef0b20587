"""
Sale entity model.

Sales move produce out of a stock to an outside buyer.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from unguka.core.models.domain.enums import SaleStatus

from ..base import Base, utc_now


class Sale(Base, table=True):
    """Entity for produce sold to a buyer.

    Table: sales
    """

    __tablename__ = "sales"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)
    stock_id: int = Field(foreign_key="stocks.id", index=True)
    season_id: int = Field(foreign_key="seasons.id", index=True)

    quantity: int
    unit_price: float
    total_price: float
    buyer: str = Field(max_length=100)
    phone_number: str = Field(max_length=13, index=True)
    payment_type: str = Field(max_length=8)
    status: str = Field(default=SaleStatus.UNPAID.value, max_length=8)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Sale(id={self.id}, buyer={self.buyer}, total_price={self.total_price}, status={self.status})"
