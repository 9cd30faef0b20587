"""
Product and stock repositories.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.products import Product, Stock
from .base import TenantRepository


class ProductRepository(TenantRepository[Product]):
    """Repository for products."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Product)

    async def get_by_name(self, cooperative_id: int, product_name: str) -> Optional[Product]:
        stmt = select(Product).where(
            Product.cooperative_id == cooperative_id,
            Product.product_name == product_name,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()


class StockRepository(TenantRepository[Stock]):
    """Repository for product stock rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Stock)

    async def get_for_product(self, cooperative_id: int, product_id: int) -> Optional[Stock]:
        stmt = select(Stock).where(Stock.cooperative_id == cooperative_id, Stock.product_id == product_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()
