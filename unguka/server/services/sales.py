"""
Sales of stock to outside buyers.

Cash sales are paid on creation. Loan sales stay unpaid until marked paid.
The cash balance always reflects the total of paid sales.
"""

from __future__ import annotations

from typing import List, Optional

from unguka.core.database.entities import Sale
from unguka.core.errors import BusinessRuleError
from unguka.core.logging_config import get_logger
from unguka.core.models.domain.enums import PaymentType, SaleStatus
from unguka.core.models.io.sales import SaleCreate, SaleUpdate

from .base import BaseService, money
from .ledgers import CashLedger, StockLedger

logger = get_logger(__name__)


def _status_for(payment_type: PaymentType) -> str:
    return SaleStatus.PAID.value if payment_type == PaymentType.CASH else SaleStatus.UNPAID.value


class SaleService(BaseService):
    """Service for sales."""

    async def create(self, cooperative_id: int, data: SaleCreate) -> Sale:
        async with self.unit_of_work() as repos:
            stock = await self.require(repos.stocks, "Stock", cooperative_id, data.stock_id)
            await self.require_season(cooperative_id, data.season_id)

            total = money(data.quantity * data.unit_price)
            await StockLedger(repos).adjust(stock, -data.quantity, -total)
            sale = await repos.sales.stage(
                Sale(
                    cooperative_id=cooperative_id,
                    stock_id=stock.id,
                    season_id=data.season_id,
                    quantity=data.quantity,
                    unit_price=data.unit_price,
                    total_price=total,
                    buyer=data.buyer,
                    phone_number=data.phone_number,
                    payment_type=data.payment_type.value,
                    status=_status_for(data.payment_type),
                )
            )
            if sale.status == SaleStatus.PAID.value:
                await CashLedger(repos).credit(cooperative_id, total, f"sale {sale.id}")
        logger.info(f"Recorded sale {sale.id} to {sale.buyer} ({sale.status}) of {total:.2f}")
        return sale

    async def list(
        self, cooperative_id: int, phone_number: Optional[str] = None, season_id: Optional[int] = None
    ) -> List[Sale]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.sales.list_for_cooperative(
            cooperative_id, phone_number=phone_number, season_id=season_id
        )

    async def get(self, cooperative_id: int, sale_id: int) -> Sale:
        return await self.require(self.repos.sales, "Sale", cooperative_id, sale_id)

    async def update(self, cooperative_id: int, sale_id: int, data: SaleUpdate) -> Sale:
        async with self.unit_of_work() as repos:
            sale = await self.get(cooperative_id, sale_id)
            was_paid = sale.status == SaleStatus.PAID.value
            old_total = sale.total_price

            quantity = data.quantity if data.quantity is not None else sale.quantity
            unit_price = data.unit_price if data.unit_price is not None else sale.unit_price
            total = money(quantity * unit_price)
            if quantity != sale.quantity or total != old_total:
                stock = await self.require(repos.stocks, "Stock", cooperative_id, sale.stock_id)
                await StockLedger(repos).adjust(stock, sale.quantity - quantity, money(old_total - total))

            if data.payment_type is not None:
                sale.payment_type = data.payment_type.value
                sale.status = _status_for(data.payment_type)
            for key in ("buyer", "phone_number"):
                value = getattr(data, key)
                if value is not None:
                    setattr(sale, key, value)
            sale.quantity = quantity
            sale.unit_price = unit_price
            sale.total_price = total

            is_paid = sale.status == SaleStatus.PAID.value
            cash = CashLedger(repos)
            if was_paid and is_paid:
                await cash.apply(cooperative_id, total - old_total, f"sale {sale.id} updated")
            elif was_paid:
                await cash.debit(cooperative_id, old_total, f"sale {sale.id} unpaid")
            elif is_paid:
                await cash.credit(cooperative_id, total, f"sale {sale.id} paid")
            await repos.sales.stage(sale)
        return sale

    async def mark_paid(self, cooperative_id: int, sale_id: int) -> Sale:
        async with self.unit_of_work() as repos:
            sale = await self.get(cooperative_id, sale_id)
            if sale.status == SaleStatus.PAID.value:
                raise BusinessRuleError(f"Sale {sale.id} is already paid")
            sale.status = SaleStatus.PAID.value
            await repos.sales.stage(sale)
            await CashLedger(repos).credit(cooperative_id, sale.total_price, f"sale {sale.id} paid")
        logger.info(f"Sale {sale_id} marked paid")
        return sale

    async def delete(self, cooperative_id: int, sale_id: int) -> None:
        async with self.unit_of_work() as repos:
            sale = await self.get(cooperative_id, sale_id)
            stock = await repos.stocks.get_in_cooperative(cooperative_id, sale.stock_id)
            if stock is not None:
                await StockLedger(repos).adjust(stock, sale.quantity, sale.total_price)
            if sale.status == SaleStatus.PAID.value:
                await CashLedger(repos).reverse_credit(cooperative_id, sale.total_price, f"sale {sale.id} deleted")
            await repos.sales.remove(sale)
        logger.info(f"Deleted sale {sale_id}")
