"""
Stock and cash ledgers.

Both ledgers only stage changes on the session; the calling service decides
when the transaction commits. Stock value never drops below zero, and
neither does the quantity: a release that would go negative raises
``InsufficientStockError`` unless the caller asks for clamping.
"""

from __future__ import annotations

from typing import Optional

from unguka.core.database.entities import Cash, Stock
from unguka.core.database.repositories import SqlRepoBundle
from unguka.core.errors import InsufficientFundsError, InsufficientStockError
from unguka.core.logging_config import get_logger
from unguka.core.monitoring import log_cash_movement

from .base import money

logger = get_logger(__name__)


class StockLedger:
    """Quantity and book value of products held by a cooperative."""

    def __init__(self, repos: SqlRepoBundle) -> None:
        self.repos = repos

    async def get_or_create(self, cooperative_id: int, product_id: int) -> Stock:
        stock = await self.repos.stocks.get_for_product(cooperative_id, product_id)
        if stock is None:
            stock = Stock(cooperative_id=cooperative_id, product_id=product_id, quantity=0, total_price=0.0)
            await self.repos.stocks.stage(stock)
            logger.info(f"Created stock for product {product_id} in cooperative {cooperative_id}")
        return stock

    async def adjust(self, stock: Stock, quantity_delta: int, value_delta: float, clamp: bool = False) -> Stock:
        """Apply signed quantity and value changes to a stock row."""
        new_quantity = stock.quantity + quantity_delta
        if new_quantity < 0:
            if not clamp:
                raise InsufficientStockError(stock.quantity, -quantity_delta)
            new_quantity = 0
        stock.quantity = new_quantity
        stock.total_price = max(0.0, money(stock.total_price + value_delta))
        await self.repos.stocks.stage(stock)
        logger.debug(f"Stock {stock.id} adjusted by {quantity_delta} units, now {stock.quantity}")
        return stock

    async def receive(self, cooperative_id: int, product_id: int, quantity: int, value: float) -> Stock:
        stock = await self.get_or_create(cooperative_id, product_id)
        return await self.adjust(stock, quantity, value)

    async def release(
        self, cooperative_id: int, product_id: int, quantity: int, value: float, clamp: bool = False
    ) -> Optional[Stock]:
        """Take quantity out of a product's stock.

        Raises:
            InsufficientStockError: when the stock is missing or too small and
                ``clamp`` is not set
        """
        stock = await self.repos.stocks.get_for_product(cooperative_id, product_id)
        if stock is None:
            if clamp:
                return None
            raise InsufficientStockError(0, quantity)
        return await self.adjust(stock, -quantity, -value, clamp=clamp)


class CashLedger:
    """The single cash balance of a cooperative."""

    def __init__(self, repos: SqlRepoBundle) -> None:
        self.repos = repos

    async def get_or_create(self, cooperative_id: int) -> Cash:
        cash = await self.repos.cash.get_for_cooperative(cooperative_id)
        if cash is None:
            cash = Cash(cooperative_id=cooperative_id, amount=0.0)
            await self.repos.cash.stage(cash)
        return cash

    async def balance(self, cooperative_id: int) -> float:
        cash = await self.repos.cash.get_for_cooperative(cooperative_id)
        return cash.amount if cash is not None else 0.0

    async def _move(self, cash: Cash, delta: float, reason: str) -> Cash:
        cash.amount = money(cash.amount + delta)
        await self.repos.cash.stage(cash)
        logger.info(f"Cash of cooperative {cash.cooperative_id} moved by {delta:.2f} ({reason}), now {cash.amount:.2f}")
        log_cash_movement(cash.cooperative_id, delta, cash.amount, reason)
        return cash

    async def credit(self, cooperative_id: int, amount: float, reason: str) -> Cash:
        cash = await self.get_or_create(cooperative_id)
        return await self._move(cash, money(amount), reason)

    async def debit(self, cooperative_id: int, amount: float, reason: str) -> Cash:
        """Take money out of the balance.

        Raises:
            InsufficientFundsError: when the balance cannot cover ``amount``
        """
        amount = money(amount)
        cash = await self.repos.cash.get_for_cooperative(cooperative_id)
        available = cash.amount if cash is not None else 0.0
        if cash is None or available < amount:
            raise InsufficientFundsError(available, amount)
        return await self._move(cash, -amount, reason)

    async def reverse_credit(self, cooperative_id: int, amount: float, reason: str) -> Optional[Cash]:
        """Undo an earlier credit, never taking the balance below zero."""
        cash = await self.repos.cash.get_for_cooperative(cooperative_id)
        if cash is None:
            return None
        return await self._move(cash, -min(money(amount), cash.amount), reason)

    async def apply(self, cooperative_id: int, delta: float, reason: str) -> Optional[Cash]:
        """Credit a positive delta, debit a negative one."""
        delta = money(delta)
        if delta > 0:
            return await self.credit(cooperative_id, delta, reason)
        if delta < 0:
            return await self.debit(cooperative_id, -delta, reason)
        return None

    async def set_balance(self, cooperative_id: int, amount: float) -> Cash:
        cash = await self.get_or_create(cooperative_id)
        return await self._move(cash, money(amount) - cash.amount, "balance set")
