"""
Products, stock lookups and the cooperative cash balance.
"""

from __future__ import annotations

from typing import List, Optional

from unguka.core.database.entities import Cash, Product, Stock
from unguka.core.errors import ConflictError
from unguka.core.logging_config import get_logger
from unguka.core.models.io.cash import CashRead
from unguka.core.models.io.products import ProductCreate, ProductUpdate

from .base import BaseService
from .cascade import delete_product_dependents
from .ledgers import CashLedger

logger = get_logger(__name__)


class ProductService(BaseService):
    """Service for products and their stock rows."""

    async def _check_unique(self, cooperative_id: int, product_name: str, exclude_id: Optional[int] = None) -> None:
        existing = await self.repos.products.get_by_name(cooperative_id, product_name)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError(f"Product '{product_name}' already exists in this cooperative")

    async def create(self, cooperative_id: int, data: ProductCreate) -> Product:
        await self.require_cooperative(cooperative_id)
        await self._check_unique(cooperative_id, data.product_name)
        product = await self.repos.products.create(
            Product(cooperative_id=cooperative_id, product_name=data.product_name, unit_price=data.unit_price)
        )
        logger.info(f"Created product {product.product_name} in cooperative {cooperative_id}")
        return product

    async def list(self, cooperative_id: int) -> List[Product]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.products.list_for_cooperative(cooperative_id)

    async def get(self, cooperative_id: int, product_id: int) -> Product:
        return await self.require_product(cooperative_id, product_id)

    async def update(self, cooperative_id: int, product_id: int, data: ProductUpdate) -> Product:
        product = await self.require_product(cooperative_id, product_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if "product_name" in update_data:
            await self._check_unique(cooperative_id, update_data["product_name"], exclude_id=product.id)
        for key, value in update_data.items():
            setattr(product, key, value)
        return await self.repos.products.update(product)

    async def delete(self, cooperative_id: int, product_id: int) -> None:
        async with self.unit_of_work() as repos:
            product = await self.require_product(cooperative_id, product_id)
            await delete_product_dependents(repos, cooperative_id, product_id)
            await repos.products.remove(product)
        logger.info(f"Deleted product {product_id} of cooperative {cooperative_id}")

    async def list_stocks(self, cooperative_id: int, product_id: Optional[int] = None) -> List[Stock]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.stocks.list_for_cooperative(cooperative_id, product_id=product_id)

    async def get_stock(self, cooperative_id: int, stock_id: int) -> Stock:
        return await self.require(self.repos.stocks, "Stock", cooperative_id, stock_id)


class CashService(BaseService):
    """Service exposing the cooperative cash balance."""

    @staticmethod
    def _read(cooperative_id: int, cash: Optional[Cash]) -> CashRead:
        if cash is None:
            return CashRead(cooperative_id=cooperative_id, amount=0.0)
        return CashRead(cooperative_id=cooperative_id, amount=cash.amount, updated_at=cash.updated_at)

    async def get(self, cooperative_id: int) -> CashRead:
        await self.require_cooperative(cooperative_id)
        return self._read(cooperative_id, await self.repos.cash.get_for_cooperative(cooperative_id))

    async def set(self, cooperative_id: int, amount: float) -> CashRead:
        async with self.unit_of_work() as repos:
            await self.require_cooperative(cooperative_id)
            cash = await CashLedger(repos).set_balance(cooperative_id, amount)
        return self._read(cooperative_id, cash)
