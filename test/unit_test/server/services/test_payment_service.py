"""Unit tests for member payments.

A member delivering 100 units of maize at 500 is owed 50000. Outstanding
fees and pending loans are withheld first; only what is left is paid out of
the cooperative cash balance, possibly over several installments.
"""

from __future__ import annotations

import pytest

from unguka.core.database.entities import Season
from unguka.core.errors import BusinessRuleError, InsufficientFundsError, NotFoundError
from unguka.core.models.domain.enums import FeeStatus, LoanStatus, PaymentStatus, ProductionPaymentStatus
from unguka.core.models.io.fees import FeeTypeCreate
from unguka.core.models.io.loans import LoanCreate
from unguka.core.models.io.payments import PaymentProcess
from unguka.core.models.io.productions import ProductionCreate
from unguka.server.services.base import money
from unguka.server.services.fees import FeeService, FeeTypeService
from unguka.server.services.ledgers import CashLedger
from unguka.server.services.loans import LoanService
from unguka.server.services.payments import Netting, PaymentService, payment_status
from unguka.server.services.productions import ProductionService
from unguka.server.services.products import CashService


@pytest.fixture
async def production(session, member, product, season):
    return await ProductionService(session).create(
        member.cooperative_id,
        ProductionCreate(user_id=member.id, product_id=product.id, season_id=season.id, quantity=100),
    )


@pytest.fixture
async def debts(session, member, season):
    """A 5000 season fee and a 20000 loan owed by the member."""
    coop_id = member.cooperative_id
    await FeeTypeService(session).create(coop_id, FeeTypeCreate(name="Season fee", amount=5000))
    loan = await LoanService(session).create(coop_id, LoanCreate(user_id=member.id, season_id=season.id, principal=20000))
    return loan


@pytest.fixture
async def funded(session, cooperative):
    await CashService(session).set(cooperative.id, 100000.0)


class TestPaymentStatus:
    @pytest.mark.parametrize(
        "paid,remaining,expected",
        [
            (0.0, 100.0, PaymentStatus.PENDING.value),
            (50.0, 50.0, PaymentStatus.PARTIAL.value),
            (100.0, 0.0, PaymentStatus.PAID.value),
            (0.0, 0.0, PaymentStatus.PAID.value),
        ],
    )
    def test_status_from_amounts(self, paid, remaining, expected):
        assert payment_status(paid, remaining) == expected


class TestNetting:
    def test_deductions_capped_at_gross(self):
        class _Fee:
            remaining_amount = 3000.0

        class _Loan:
            amount_owed = 4000.0

        netting = Netting(gross_amount=5000.0, fees=[_Fee()], loans=[_Loan()])

        assert netting.outstanding_fees == 3000.0
        assert netting.outstanding_loans == 4000.0
        assert netting.total_deductions == 5000.0
        assert netting.amount_due == 0.0

    def test_figures_kept_after_debts_settled(self):
        class _Fee:
            remaining_amount = 3000.0

        fee = _Fee()
        netting = Netting(gross_amount=10000.0, fees=[fee], loans=[])

        fee.remaining_amount = 0.0

        assert netting.total_deductions == 3000.0
        assert netting.amount_due == 7000.0


class TestPreview:
    async def test_preview_writes_nothing(self, session, production, debts, funded):
        service = PaymentService(session)

        preview = await service.preview(production.cooperative_id, production.id)

        assert preview.gross_amount == 50000.0
        assert preview.outstanding_fees == 5000.0
        assert preview.outstanding_loans == 20000.0
        assert preview.total_deductions == 25000.0
        assert preview.amount_due == 25000.0
        assert preview.payment_id is None
        assert await service.list(production.cooperative_id) == []

    async def test_preview_unknown_production(self, session, cooperative):
        with pytest.raises(NotFoundError):
            await PaymentService(session).preview(cooperative.id, 404)


class TestProcessPayment:
    async def test_first_payment_nets_debts(self, session, production, debts, funded):
        coop_id = production.cooperative_id

        payment, created = await PaymentService(session).process(
            coop_id, PaymentProcess(production_id=production.id, amount_paid=10000.0)
        )

        assert created is True
        assert payment.gross_amount == 50000.0
        assert payment.total_deductions == 25000.0
        assert payment.amount_due == 25000.0
        assert payment.amount_paid == 10000.0
        assert payment.amount_remaining_to_pay == 15000.0
        assert payment.status == PaymentStatus.PARTIAL.value
        assert production.payment_status == ProductionPaymentStatus.PENDING.value

        fees = await FeeService(session).list(coop_id, user_id=production.user_id)
        assert [fee.status for fee in fees] == [FeeStatus.PAID.value]
        assert debts.amount_owed == 0.0
        assert debts.status == LoanStatus.REPAID.value
        assert await CashLedger(PaymentService(session).repos).balance(coop_id) == 90000.0

        transactions = await PaymentService(session).list_transactions(coop_id, payment_id=payment.id)
        assert [t.amount_paid for t in transactions] == [10000.0]

    async def test_stored_payment_matches_preview(self, session, production, debts, funded):
        coop_id = production.cooperative_id
        service = PaymentService(session)
        preview = await service.preview(coop_id, production.id)

        payment, _ = await service.process(coop_id, PaymentProcess(production_id=production.id, amount_paid=5000.0))

        assert payment.total_deductions == preview.total_deductions
        assert payment.amount_due == preview.amount_due
        assert payment.amount_remaining_to_pay == money(preview.amount_due - 5000.0)
        after = await service.preview(coop_id, production.id)
        assert after.payment_id == payment.id
        assert after.total_deductions == preview.total_deductions

    async def test_installments_settle_payment(self, session, production, debts, funded):
        coop_id = production.cooperative_id
        service = PaymentService(session)
        await service.process(coop_id, PaymentProcess(production_id=production.id, amount_paid=10000.0))

        payment, created = await service.process(coop_id, PaymentProcess(production_id=production.id, amount_paid=15000.0))

        assert created is False
        assert payment.amount_paid == 25000.0
        assert payment.amount_remaining_to_pay == 0.0
        assert payment.status == PaymentStatus.PAID.value
        assert production.payment_status == ProductionPaymentStatus.PAID.value
        assert await CashLedger(service.repos).balance(coop_id) == 75000.0
        assert len(await service.list_transactions(coop_id, payment_id=payment.id)) == 2

    async def test_installment_on_paid_payment_rejected(self, session, production, funded):
        coop_id = production.cooperative_id
        service = PaymentService(session)
        await service.process(coop_id, PaymentProcess(production_id=production.id, amount_paid=50000.0))

        with pytest.raises(BusinessRuleError, match="already paid"):
            await service.process(coop_id, PaymentProcess(production_id=production.id, amount_paid=1.0))

    async def test_installment_above_remaining_rejected(self, session, production, funded):
        coop_id = production.cooperative_id
        service = PaymentService(session)
        await service.process(coop_id, PaymentProcess(production_id=production.id, amount_paid=0.0))

        with pytest.raises(BusinessRuleError, match="exceeds the remaining balance"):
            await service.process(coop_id, PaymentProcess(production_id=production.id, amount_paid=50000.01))

    async def test_amount_above_due_rejected_and_nothing_settled(self, session, production, debts, funded):
        coop_id = production.cooperative_id
        production_id = production.id
        user_id = production.user_id
        service = PaymentService(session)

        with pytest.raises(BusinessRuleError, match="exceeds the amount due"):
            await service.process(coop_id, PaymentProcess(production_id=production_id, amount_paid=25000.01))

        assert await service.list(coop_id) == []
        fees = await FeeService(session).list(coop_id, user_id=user_id)
        assert [fee.status for fee in fees] == [FeeStatus.UNPAID.value]

    async def test_insufficient_cash_rolls_back(self, session, production, debts, cooperative):
        coop_id = cooperative.id
        production_id = production.id
        user_id = production.user_id
        service = PaymentService(session)

        with pytest.raises(InsufficientFundsError):
            await service.process(coop_id, PaymentProcess(production_id=production_id, amount_paid=100.0))

        assert await service.list(coop_id) == []
        loans = await LoanService(session).list(coop_id, user_id=user_id)
        assert [loan.amount_owed for loan in loans] == [20000.0]

    async def test_deductions_above_gross_leave_nothing_due(self, session, member, product, season, cooperative):
        coop_id = cooperative.id
        production = await ProductionService(session).create(
            coop_id, ProductionCreate(user_id=member.id, product_id=product.id, season_id=season.id, quantity=10)
        )
        await FeeTypeService(session).create(coop_id, FeeTypeCreate(name="Season fee", amount=3000))
        loan = await LoanService(session).create(coop_id, LoanCreate(user_id=member.id, principal=4000))

        payment, _ = await PaymentService(session).process(
            coop_id, PaymentProcess(production_id=production.id, amount_paid=0.0)
        )

        assert payment.total_deductions == 5000.0
        assert payment.amount_due == 0.0
        assert payment.status == PaymentStatus.PAID.value
        assert production.payment_status == ProductionPaymentStatus.PAID.value
        assert loan.amount_owed == 2000.0
        assert loan.status == LoanStatus.PENDING.value

    async def test_debts_of_other_seasons_are_not_withheld(self, session, repos, member, product, season, cooperative, funded):
        coop_id = cooperative.id
        other = await repos.seasons.create(Season(cooperative_id=coop_id, name="Season-B", year=2026))
        await LoanService(session).create(coop_id, LoanCreate(user_id=member.id, season_id=other.id, principal=1000))
        production = await ProductionService(session).create(
            coop_id, ProductionCreate(user_id=member.id, product_id=product.id, season_id=season.id, quantity=10)
        )

        preview = await PaymentService(session).preview(coop_id, production.id)

        assert preview.outstanding_loans == 0.0
        assert preview.amount_due == 5000.0


class TestDeletePayment:
    async def test_delete_refunds_cash_and_resets_production(self, session, production, funded):
        coop_id = production.cooperative_id
        service = PaymentService(session)
        payment, _ = await service.process(coop_id, PaymentProcess(production_id=production.id, amount_paid=50000.0))

        await service.delete(coop_id, payment.id)

        assert await service.list(coop_id) == []
        assert await service.list_transactions(coop_id) == []
        assert production.payment_status == ProductionPaymentStatus.PENDING.value
        assert await CashLedger(service.repos).balance(coop_id) == 100000.0
