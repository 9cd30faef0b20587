"""
Production entity model.

A production is the harvest a member delivers to the cooperative for one
product in one season. It is what the member gets paid for.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from unguka.core.models.domain.enums import ProductionPaymentStatus

from ..base import Base, utc_now


class Production(Base, table=True):
    """Entity for a member's delivered harvest.

    Table: productions
    """

    __tablename__ = "productions"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", "season_id", name="uq_productions_user_product_season"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    product_id: int = Field(foreign_key="products.id", index=True)
    season_id: int = Field(foreign_key="seasons.id", index=True)

    quantity: int
    unit_price: float
    total_price: float
    payment_status: str = Field(default=ProductionPaymentStatus.PENDING.value, max_length=16)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Production(id={self.id}, user_id={self.user_id}, quantity={self.quantity})"
