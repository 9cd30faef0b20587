"""Unit tests for sales, purchase inputs and purchase outs.

Each of them moves stock and, depending on how it is paid, cash or a loan.
"""

from __future__ import annotations

import pytest

from unguka.core.errors import BusinessRuleError, InsufficientFundsError, InsufficientStockError
from unguka.core.models.domain.enums import LoanStatus, PaymentType, SaleStatus
from unguka.core.models.io.productions import ProductionCreate
from unguka.core.models.io.purchases import (
    PurchaseInputCreate,
    PurchaseInputUpdate,
    PurchaseOutCreate,
    PurchaseOutUpdate,
)
from unguka.core.models.io.sales import SaleCreate, SaleUpdate
from unguka.server.services.ledgers import CashLedger
from unguka.server.services.loans import LoanService
from unguka.server.services.productions import ProductionService
from unguka.server.services.purchases import PurchaseInputService, PurchaseOutService
from unguka.server.services.sales import SaleService


@pytest.fixture
async def stock(session, repos, member, product, season):
    """100 units of maize worth 50000 in stock."""
    await ProductionService(session).create(
        member.cooperative_id,
        ProductionCreate(user_id=member.id, product_id=product.id, season_id=season.id, quantity=100),
    )
    return await repos.stocks.get_for_product(product.cooperative_id, product.id)


def _sale(stock, season, payment_type=PaymentType.CASH, quantity=10, unit_price=600.0) -> SaleCreate:
    return SaleCreate(
        stock_id=stock.id,
        season_id=season.id,
        quantity=quantity,
        unit_price=unit_price,
        buyer="Kigali Millers",
        phone_number="0788123456",
        payment_type=payment_type,
    )


async def _balance(session, cooperative_id):
    return await CashLedger(SaleService(session).repos).balance(cooperative_id)


class TestSales:
    async def test_cash_sale_is_paid_and_credited(self, session, stock, season):
        sale = await SaleService(session).create(stock.cooperative_id, _sale(stock, season))

        assert sale.status == SaleStatus.PAID.value
        assert sale.total_price == 6000.0
        assert stock.quantity == 90
        assert stock.total_price == 44000.0
        assert await _balance(session, stock.cooperative_id) == 6000.0

    async def test_loan_sale_stays_unpaid_until_marked(self, session, stock, season):
        service = SaleService(session)
        sale = await service.create(stock.cooperative_id, _sale(stock, season, PaymentType.LOAN))
        assert sale.status == SaleStatus.UNPAID.value
        assert await _balance(session, stock.cooperative_id) == 0.0

        sale = await service.mark_paid(stock.cooperative_id, sale.id)

        assert sale.status == SaleStatus.PAID.value
        assert await _balance(session, stock.cooperative_id) == 6000.0
        with pytest.raises(BusinessRuleError, match="already paid"):
            await service.mark_paid(stock.cooperative_id, sale.id)

    async def test_sale_above_stock_rejected(self, session, stock, season):
        coop_id = stock.cooperative_id

        with pytest.raises(InsufficientStockError):
            await SaleService(session).create(coop_id, _sale(stock, season, quantity=101))

    async def test_update_paid_sale_adjusts_cash_and_stock(self, session, stock, season):
        service = SaleService(session)
        sale = await service.create(stock.cooperative_id, _sale(stock, season))

        await service.update(stock.cooperative_id, sale.id, SaleUpdate(quantity=20))

        assert stock.quantity == 80
        assert await _balance(session, stock.cooperative_id) == 12000.0

    async def test_switching_paid_sale_to_loan_debits_cash(self, session, stock, season):
        service = SaleService(session)
        sale = await service.create(stock.cooperative_id, _sale(stock, season))

        sale = await service.update(stock.cooperative_id, sale.id, SaleUpdate(payment_type=PaymentType.LOAN))

        assert sale.status == SaleStatus.UNPAID.value
        assert await _balance(session, stock.cooperative_id) == 0.0

    async def test_delete_restores_stock_and_cash(self, session, stock, season):
        service = SaleService(session)
        sale = await service.create(stock.cooperative_id, _sale(stock, season))

        await service.delete(stock.cooperative_id, sale.id)

        assert stock.quantity == 100
        assert await _balance(session, stock.cooperative_id) == 0.0
        assert await service.list(stock.cooperative_id) == []

    async def test_list_filters_by_phone(self, session, stock, season):
        service = SaleService(session)
        await service.create(stock.cooperative_id, _sale(stock, season))

        assert len(await service.list(stock.cooperative_id, phone_number="0788123456")) == 1
        assert await service.list(stock.cooperative_id, phone_number="0788000000") == []


class TestPurchaseInputs:
    async def test_cash_purchase_credits_cash(self, session, stock, member, product, season):
        purchase = await PurchaseInputService(session).create(
            member.cooperative_id,
            PurchaseInputCreate(
                user_id=member.id, product_id=product.id, season_id=season.id, quantity=4, payment_type=PaymentType.CASH
            ),
        )

        assert purchase.total_price == 2000.0
        assert purchase.loan_id is None
        assert stock.quantity == 96
        assert await _balance(session, member.cooperative_id) == 2000.0

    async def test_loan_purchase_opens_interest_free_loan(self, session, stock, member, product, season):
        purchase = await PurchaseInputService(session).create(
            member.cooperative_id,
            PurchaseInputCreate(
                user_id=member.id, product_id=product.id, season_id=season.id, quantity=4, payment_type=PaymentType.LOAN
            ),
        )

        loan = await LoanService(session).get(member.cooperative_id, purchase.loan_id)
        assert loan.principal == 2000.0
        assert loan.interest == 0.0
        assert loan.amount_owed == 2000.0
        assert loan.status == LoanStatus.PENDING.value
        assert loan.purchase_input_id == purchase.id
        assert await _balance(session, member.cooperative_id) == 0.0

    async def test_delete_loan_purchase_removes_loan(self, session, stock, member, product, season):
        service = PurchaseInputService(session)
        purchase = await service.create(
            member.cooperative_id,
            PurchaseInputCreate(
                user_id=member.id, product_id=product.id, season_id=season.id, quantity=4, payment_type=PaymentType.LOAN
            ),
        )

        await service.delete(member.cooperative_id, purchase.id)

        assert await LoanService(session).list(member.cooperative_id) == []
        assert stock.quantity == 100

    async def test_update_cash_purchase_moves_stock_and_cash(self, session, stock, member, product, season):
        coop_id = member.cooperative_id
        service = PurchaseInputService(session)
        purchase = await service.create(
            coop_id,
            PurchaseInputCreate(
                user_id=member.id, product_id=product.id, season_id=season.id, quantity=4, payment_type=PaymentType.CASH
            ),
        )

        updated = await service.update(coop_id, purchase.id, PurchaseInputUpdate(quantity=6))

        assert updated.quantity == 6
        assert updated.total_price == 3000.0
        assert stock.quantity == 94
        assert stock.total_price == 47000.0
        assert await _balance(session, coop_id) == 3000.0

    async def test_update_loan_purchase_reprices_loan(self, session, stock, member, product, season):
        coop_id = member.cooperative_id
        service = PurchaseInputService(session)
        purchase = await service.create(
            coop_id,
            PurchaseInputCreate(
                user_id=member.id, product_id=product.id, season_id=season.id, quantity=4, payment_type=PaymentType.LOAN
            ),
        )
        loans = LoanService(session)
        await loans.repay(coop_id, purchase.loan_id, 500.0)

        updated = await service.update(coop_id, purchase.id, PurchaseInputUpdate(quantity=2))

        loan = await loans.get(coop_id, purchase.loan_id)
        assert updated.loan_id == purchase.loan_id
        assert loan.principal == 1000.0
        assert loan.amount_owed == 500.0
        assert loan.status == LoanStatus.PENDING.value
        assert stock.quantity == 98

        with pytest.raises(BusinessRuleError, match="partly repaid"):
            await service.update(coop_id, purchase.id, PurchaseInputUpdate(payment_type=PaymentType.CASH))

    async def test_switching_payment_type_swaps_loan_and_cash(self, session, stock, member, product, season):
        coop_id = member.cooperative_id
        service = PurchaseInputService(session)
        purchase = await service.create(
            coop_id,
            PurchaseInputCreate(
                user_id=member.id, product_id=product.id, season_id=season.id, quantity=4, payment_type=PaymentType.LOAN
            ),
        )

        updated = await service.update(coop_id, purchase.id, PurchaseInputUpdate(payment_type=PaymentType.CASH))
        assert updated.payment_type == PaymentType.CASH
        assert updated.loan_id is None
        assert await LoanService(session).list(coop_id) == []
        assert await _balance(session, coop_id) == 2000.0

        updated = await service.update(coop_id, purchase.id, PurchaseInputUpdate(payment_type=PaymentType.LOAN))
        loan = await LoanService(session).get(coop_id, updated.loan_id)
        assert loan.amount_owed == 2000.0
        assert loan.purchase_input_id == purchase.id
        assert await _balance(session, coop_id) == 0.0
        assert stock.quantity == 96

    async def test_update_above_stock_rejected(self, session, stock, member, product, season):
        coop_id = member.cooperative_id
        service = PurchaseInputService(session)
        purchase = await service.create(
            coop_id,
            PurchaseInputCreate(
                user_id=member.id, product_id=product.id, season_id=season.id, quantity=4, payment_type=PaymentType.CASH
            ),
        )
        purchase_id = purchase.id

        with pytest.raises(InsufficientStockError):
            await service.update(coop_id, purchase_id, PurchaseInputUpdate(quantity=200))

        assert (await service.get(coop_id, purchase_id)).quantity == 4


class TestPurchaseOuts:
    async def test_purchase_out_needs_cash(self, session, stock, product, season):
        coop_id = stock.cooperative_id

        with pytest.raises(InsufficientFundsError):
            await PurchaseOutService(session).create(
                coop_id, PurchaseOutCreate(product_id=product.id, season_id=season.id, quantity=10, unit_price=550.0)
            )

    async def test_update_and_delete_move_stock_and_cash(self, session, stock, product, season):
        coop_id = stock.cooperative_id
        await CashLedger(SaleService(session).repos).credit(coop_id, 20000.0, "opening")
        await session.commit()
        service = PurchaseOutService(session)

        purchase = await service.create(
            coop_id, PurchaseOutCreate(product_id=product.id, season_id=season.id, quantity=10, unit_price=550.0)
        )
        assert stock.quantity == 90
        assert await _balance(session, coop_id) == 14500.0

        await service.update(coop_id, purchase.id, PurchaseOutUpdate(quantity=20))
        assert stock.quantity == 80
        assert await _balance(session, coop_id) == 9000.0

        await service.delete(coop_id, purchase.id)
        assert stock.quantity == 100
        assert await _balance(session, coop_id) == 20000.0
