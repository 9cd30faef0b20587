"""
Purchase entity models.

- PurchaseInput: farm inputs (seeds, fertilizer) a member takes out of the
  cooperative stock, paid in cash or on loan.
- PurchaseOut: produce the cooperative delivers out of its stock and pays
  for out of its cash balance.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class PurchaseInput(Base, table=True):
    """Entity for inputs sold to a member.

    Table: purchase_inputs
    """

    __tablename__ = "purchase_inputs"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    product_id: int = Field(foreign_key="products.id", index=True)
    season_id: int = Field(foreign_key="seasons.id", index=True)

    quantity: int
    unit_price: float
    total_price: float
    payment_type: str = Field(max_length=8)

    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"PurchaseInput(id={self.id}, user_id={self.user_id}, total_price={self.total_price})"


class PurchaseOut(Base, table=True):
    """Entity for produce taken out of stock against cash.

    Table: purchase_outs
    """

    __tablename__ = "purchase_outs"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)
    product_id: int = Field(foreign_key="products.id", index=True)
    season_id: int = Field(foreign_key="seasons.id", index=True)

    quantity: int
    unit_price: float
    total_price: float

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"PurchaseOut(id={self.id}, product_id={self.product_id}, quantity={self.quantity})"
