"""
Purchase inputs (sold to members) and purchase outs (paid out of cash).
"""

from __future__ import annotations

from typing import List, Optional

from unguka.core.database.entities import Loan, PurchaseInput, PurchaseOut
from unguka.core.database.repositories import SqlRepoBundle
from unguka.core.errors import BusinessRuleError
from unguka.core.logging_config import get_logger
from unguka.core.models.domain.enums import LoanStatus, PaymentType
from unguka.core.models.io.purchases import (
    PurchaseInputCreate,
    PurchaseInputRead,
    PurchaseInputUpdate,
    PurchaseOutCreate,
    PurchaseOutUpdate,
)

from .base import BaseService, money
from .cascade import delete_purchase_input_dependents
from .ledgers import CashLedger, StockLedger

logger = get_logger(__name__)


class PurchaseInputService(BaseService):
    """Service for inputs taken by members out of the cooperative stock.

    Cash purchases are credited to the cooperative; loan purchases open a
    pending loan for the full amount, without interest.
    """

    async def _read(self, purchase: PurchaseInput) -> PurchaseInputRead:
        read = PurchaseInputRead.model_validate(purchase)
        if purchase.payment_type == PaymentType.LOAN.value:
            loan = await self.repos.loans.get_by_purchase_input(purchase.id)
            read.loan_id = loan.id if loan is not None else None
        return read

    async def _open_loan(self, repos: SqlRepoBundle, purchase: PurchaseInput) -> Loan:
        loan = await repos.loans.stage(
            Loan(
                cooperative_id=purchase.cooperative_id,
                user_id=purchase.user_id,
                season_id=purchase.season_id,
                purchase_input_id=purchase.id,
                principal=purchase.total_price,
                interest=0.0,
                amount_owed=purchase.total_price,
                status=LoanStatus.PENDING.value,
            )
        )
        logger.info(f"Opened loan {loan.id} for purchase input {purchase.id}")
        return loan

    async def create(self, cooperative_id: int, data: PurchaseInputCreate) -> PurchaseInputRead:
        async with self.unit_of_work() as repos:
            await self.require_user(cooperative_id, data.user_id)
            product = await self.require_product(cooperative_id, data.product_id)
            await self.require_season(cooperative_id, data.season_id)

            total = money(product.unit_price * data.quantity)
            await StockLedger(repos).release(cooperative_id, product.id, data.quantity, total)
            purchase = await repos.purchase_inputs.stage(
                PurchaseInput(
                    cooperative_id=cooperative_id,
                    user_id=data.user_id,
                    product_id=product.id,
                    season_id=data.season_id,
                    quantity=data.quantity,
                    unit_price=product.unit_price,
                    total_price=total,
                    payment_type=data.payment_type.value,
                )
            )
            if data.payment_type == PaymentType.CASH:
                await CashLedger(repos).credit(cooperative_id, total, f"purchase input {purchase.id}")
            else:
                await self._open_loan(repos, purchase)
        logger.info(f"Recorded purchase input {purchase.id} ({purchase.payment_type}) of {total:.2f}")
        return await self._read(purchase)

    async def list(
        self, cooperative_id: int, user_id: Optional[int] = None, season_id: Optional[int] = None
    ) -> List[PurchaseInputRead]:
        await self.require_cooperative(cooperative_id)
        purchases = await self.repos.purchase_inputs.list_for_cooperative(
            cooperative_id, user_id=user_id, season_id=season_id
        )
        return [await self._read(purchase) for purchase in purchases]

    async def get(self, cooperative_id: int, purchase_id: int) -> PurchaseInputRead:
        purchase = await self.require(self.repos.purchase_inputs, "Purchase input", cooperative_id, purchase_id)
        return await self._read(purchase)

    async def update(self, cooperative_id: int, purchase_id: int, data: PurchaseInputUpdate) -> PurchaseInputRead:
        """Correct the quantity or the payment type of a purchase input.

        The unit price recorded at purchase is kept. Stock moves by the
        quantity difference. A cash purchase moves cash by the price
        difference; a loan purchase re-prices its loan, keeping what was
        already repaid.

        Raises:
            BusinessRuleError: when a partly repaid loan would be switched to
                cash or re-priced below what was repaid
        """
        async with self.unit_of_work() as repos:
            purchase = await self.require(repos.purchase_inputs, "Purchase input", cooperative_id, purchase_id)
            quantity = data.quantity if data.quantity is not None else purchase.quantity
            payment_type = data.payment_type.value if data.payment_type is not None else purchase.payment_type
            total = money(purchase.unit_price * quantity)

            stock = await StockLedger(repos).get_or_create(cooperative_id, purchase.product_id)
            await StockLedger(repos).adjust(stock, purchase.quantity - quantity, money(purchase.total_price - total))

            cash = CashLedger(repos)
            reason = f"purchase input {purchase.id} updated"
            loan = await repos.loans.get_by_purchase_input(purchase.id)
            repaid = money(loan.principal + loan.interest - loan.amount_owed) if loan is not None else 0.0
            if payment_type == PaymentType.CASH.value and loan is not None and repaid > 0:
                raise BusinessRuleError(
                    f"Loan {loan.id} of purchase input {purchase.id} is partly repaid and cannot be switched to cash"
                )
            if payment_type == PaymentType.LOAN.value and total < repaid:
                raise BusinessRuleError(
                    f"Purchase input {purchase.id} cannot cost {total:.2f}, {repaid:.2f} was already repaid"
                )

            if purchase.payment_type == PaymentType.CASH.value:
                if payment_type == PaymentType.CASH.value:
                    await cash.apply(cooperative_id, money(total - purchase.total_price), reason)
                else:
                    await cash.reverse_credit(cooperative_id, purchase.total_price, reason)
            elif payment_type == PaymentType.CASH.value:
                await delete_purchase_input_dependents(repos, purchase.id)
                await cash.credit(cooperative_id, total, reason)

            purchase.quantity = quantity
            purchase.total_price = total
            purchase.payment_type = payment_type
            await repos.purchase_inputs.stage(purchase)

            if payment_type == PaymentType.LOAN.value:
                if loan is None:
                    await self._open_loan(repos, purchase)
                else:
                    loan.principal = total
                    loan.amount_owed = money(total + loan.interest - repaid)
                    loan.status = (LoanStatus.REPAID if loan.amount_owed <= 0 else LoanStatus.PENDING).value
                    await repos.loans.stage(loan)
        logger.info(f"Updated purchase input {purchase_id}: {quantity} units ({payment_type}) for {total:.2f}")
        return await self._read(purchase)

    async def delete(self, cooperative_id: int, purchase_id: int) -> None:
        async with self.unit_of_work() as repos:
            purchase = await self.require(repos.purchase_inputs, "Purchase input", cooperative_id, purchase_id)
            await StockLedger(repos).receive(cooperative_id, purchase.product_id, purchase.quantity, purchase.total_price)
            if purchase.payment_type == PaymentType.CASH.value:
                await CashLedger(repos).reverse_credit(
                    cooperative_id, purchase.total_price, f"purchase input {purchase.id} deleted"
                )
            else:
                await delete_purchase_input_dependents(repos, purchase.id)
            await repos.purchase_inputs.remove(purchase)
        logger.info(f"Deleted purchase input {purchase_id}")


class PurchaseOutService(BaseService):
    """Service for produce taken out of stock and paid out of cash."""

    async def create(self, cooperative_id: int, data: PurchaseOutCreate) -> PurchaseOut:
        async with self.unit_of_work() as repos:
            await self.require_product(cooperative_id, data.product_id)
            await self.require_season(cooperative_id, data.season_id)

            total = money(data.quantity * data.unit_price)
            await StockLedger(repos).release(cooperative_id, data.product_id, data.quantity, total)
            purchase = await repos.purchase_outs.stage(
                PurchaseOut(
                    cooperative_id=cooperative_id,
                    product_id=data.product_id,
                    season_id=data.season_id,
                    quantity=data.quantity,
                    unit_price=data.unit_price,
                    total_price=total,
                )
            )
            await CashLedger(repos).debit(cooperative_id, total, f"purchase out {purchase.id}")
        logger.info(f"Recorded purchase out {purchase.id} of {total:.2f}")
        return purchase

    async def list(
        self, cooperative_id: int, product_id: Optional[int] = None, season_id: Optional[int] = None
    ) -> List[PurchaseOut]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.purchase_outs.list_for_cooperative(
            cooperative_id, product_id=product_id, season_id=season_id
        )

    async def get(self, cooperative_id: int, purchase_id: int) -> PurchaseOut:
        return await self.require(self.repos.purchase_outs, "Purchase out", cooperative_id, purchase_id)

    async def update(self, cooperative_id: int, purchase_id: int, data: PurchaseOutUpdate) -> PurchaseOut:
        async with self.unit_of_work() as repos:
            purchase = await self.get(cooperative_id, purchase_id)
            quantity = data.quantity if data.quantity is not None else purchase.quantity
            unit_price = data.unit_price if data.unit_price is not None else purchase.unit_price
            total = money(quantity * unit_price)
            quantity_delta = quantity - purchase.quantity
            value_delta = money(total - purchase.total_price)

            stock = await StockLedger(repos).get_or_create(cooperative_id, purchase.product_id)
            await StockLedger(repos).adjust(stock, -quantity_delta, -value_delta)
            await CashLedger(repos).apply(cooperative_id, -value_delta, f"purchase out {purchase.id} updated")

            purchase.quantity = quantity
            purchase.unit_price = unit_price
            purchase.total_price = total
            await repos.purchase_outs.stage(purchase)
        return purchase

    async def delete(self, cooperative_id: int, purchase_id: int) -> None:
        async with self.unit_of_work() as repos:
            purchase = await self.get(cooperative_id, purchase_id)
            await StockLedger(repos).receive(cooperative_id, purchase.product_id, purchase.quantity, purchase.total_price)
            await CashLedger(repos).credit(cooperative_id, purchase.total_price, f"purchase out {purchase.id} deleted")
            await repos.purchase_outs.remove(purchase)
        logger.info(f"Deleted purchase out {purchase_id}")
