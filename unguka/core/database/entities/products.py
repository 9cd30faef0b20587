"""
Product and stock entity models.

Products are priced per unit. Each product owned by a cooperative has at
most one stock row that tracks the quantity on hand and its book value.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, utc_now


class Product(Base, table=True):
    """Entity for a product traded by a cooperative.

    Table: products
    """

    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint("cooperative_id", "product_name", name="uq_products_cooperative_name"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)

    product_name: str = Field(max_length=100)
    unit_price: float = Field(default=0.0)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Product(id={self.id}, name={self.product_name}, unit_price={self.unit_price})"


class Stock(Base, table=True):
    """Entity for the stock of a product held by a cooperative.

    Table: stocks
    """

    __tablename__ = "stocks"
    __table_args__ = (
        UniqueConstraint("cooperative_id", "product_id", name="uq_stocks_cooperative_product"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)
    product_id: int = Field(foreign_key="products.id", index=True)

    quantity: int = Field(default=0)
    total_price: float = Field(default=0.0)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Stock(id={self.id}, product_id={self.product_id}, quantity={self.quantity})"
