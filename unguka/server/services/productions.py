"""
Productions delivered by members.

Every production feeds the stock of its product at the product's unit
price; corrections and deletions move the stock by the difference.
"""

from __future__ import annotations

from typing import List, Optional

from unguka.core.database.entities import Production
from unguka.core.errors import BusinessRuleError
from unguka.core.logging_config import get_logger
from unguka.core.models.io.productions import ProductionCreate, ProductionUpdate

from .base import BaseService, money
from .cascade import delete_production_dependents
from .ledgers import StockLedger

logger = get_logger(__name__)


class ProductionService(BaseService):
    """Service for member productions."""

    async def create(self, cooperative_id: int, data: ProductionCreate) -> Production:
        async with self.unit_of_work() as repos:
            await self.require_user(cooperative_id, data.user_id)
            product = await self.require_product(cooperative_id, data.product_id)
            await self.require_season(cooperative_id, data.season_id)
            if await repos.productions.find(data.user_id, data.product_id, data.season_id) is not None:
                raise BusinessRuleError("Production already recorded for this member, product and season")
            if product.unit_price <= 0:
                raise BusinessRuleError(f"Product '{product.product_name}' has no unit price")

            total = money(data.quantity * product.unit_price)
            production = await repos.productions.stage(
                Production(
                    cooperative_id=cooperative_id,
                    user_id=data.user_id,
                    product_id=product.id,
                    season_id=data.season_id,
                    quantity=data.quantity,
                    unit_price=product.unit_price,
                    total_price=total,
                )
            )
            await StockLedger(repos).receive(cooperative_id, product.id, data.quantity, total)
        logger.info(f"Recorded production {production.id}: {production.quantity} x {product.product_name}")
        return production

    async def list(
        self, cooperative_id: int, user_id: Optional[int] = None, season_id: Optional[int] = None
    ) -> List[Production]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.productions.list_for_cooperative(cooperative_id, user_id=user_id, season_id=season_id)

    async def get(self, cooperative_id: int, production_id: int) -> Production:
        return await self.require(self.repos.productions, "Production", cooperative_id, production_id)

    async def update(self, cooperative_id: int, production_id: int, data: ProductionUpdate) -> Production:
        async with self.unit_of_work() as repos:
            production = await self.get(cooperative_id, production_id)
            if await repos.payments.get_by_production(production.id) is not None:
                raise BusinessRuleError("Production already has a payment and cannot be changed")

            quantity_delta = data.quantity - production.quantity
            new_total = money(data.quantity * production.unit_price)
            value_delta = money(new_total - production.total_price)
            stock = await StockLedger(repos).get_or_create(cooperative_id, production.product_id)
            await StockLedger(repos).adjust(stock, quantity_delta, value_delta)

            production.quantity = data.quantity
            production.total_price = new_total
            await repos.productions.stage(production)
        return production

    async def delete(self, cooperative_id: int, production_id: int) -> None:
        async with self.unit_of_work() as repos:
            production = await self.get(cooperative_id, production_id)
            await StockLedger(repos).release(
                cooperative_id, production.product_id, production.quantity, production.total_price, clamp=True
            )
            await delete_production_dependents(repos, production.id)
            await repos.productions.remove(production)
        logger.info(f"Deleted production {production_id}")
