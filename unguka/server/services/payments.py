"""
Member payments for productions.

Paying a member for a production nets the production value against what
the member still owes the cooperative: outstanding fees first, then pending
loans, both oldest first. Fees and loans of the production's season are
netted together with season-less ones. The withheld part settles those
debts without moving cash; only the amount actually handed to the member
is debited from the cash balance. A payment can be settled over several
installments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from unguka.core.database.entities import Fee, Loan, Payment, PaymentTransaction, Production
from unguka.core.database.repositories import SqlRepoBundle
from unguka.core.errors import BusinessRuleError
from unguka.core.logging_config import get_logger
from unguka.core.models.domain.enums import PaymentStatus, ProductionPaymentStatus
from unguka.core.models.io.payments import PaymentPreview, PaymentProcess
from unguka.core.monitoring import log_payment_processed

from .base import BaseService, money
from .cascade import delete_payment_dependents
from .ledgers import CashLedger
from .loans import apply_loan_repayment

logger = get_logger(__name__)


@dataclass
class Netting:
    """Debts of a member that a production payment can withhold.

    The figures are taken when the netting is built, so they still describe
    the withheld amounts after the fees and loans have been settled.
    """

    gross_amount: float
    fees: List[Fee]
    loans: List[Loan]
    outstanding_fees: float = field(init=False)
    outstanding_loans: float = field(init=False)
    total_deductions: float = field(init=False)
    amount_due: float = field(init=False)

    def __post_init__(self) -> None:
        self.outstanding_fees = money(sum(fee.remaining_amount for fee in self.fees))
        self.outstanding_loans = money(sum(loan.amount_owed for loan in self.loans))
        self.total_deductions = money(min(self.gross_amount, self.outstanding_fees + self.outstanding_loans))
        self.amount_due = money(self.gross_amount - self.total_deductions)


def payment_status(amount_paid: float, remaining: float) -> str:
    if remaining <= 0:
        return PaymentStatus.PAID.value
    if amount_paid > 0:
        return PaymentStatus.PARTIAL.value
    return PaymentStatus.PENDING.value


async def settle_debts(repos: SqlRepoBundle, netting: Netting) -> None:
    """Settle fees, then loans, out of the withheld deductions."""
    withheld = netting.total_deductions
    for fee in netting.fees:
        if withheld <= 0:
            return
        applied = money(min(fee.remaining_amount, withheld))
        fee.amount_paid = money(fee.amount_paid + applied)
        fee.refresh_status()
        await repos.fees.stage(fee)
        withheld = money(withheld - applied)
        logger.debug(f"Withheld {applied:.2f} for fee {fee.id}")
    for loan in netting.loans:
        if withheld <= 0:
            return
        withheld = money(withheld - await apply_loan_repayment(repos, loan, withheld))


class PaymentService(BaseService):
    """Service for member payments and their installments."""

    async def _netting(self, production: Production) -> Netting:
        fees = await self.repos.fees.list_outstanding(production.cooperative_id, production.user_id, production.season_id)
        loans = await self.repos.loans.list_pending(production.cooperative_id, production.user_id, production.season_id)
        return Netting(gross_amount=production.total_price, fees=fees, loans=loans)

    async def _other_outstanding(self, production: Production) -> float:
        payments = await self.repos.payments.list_for_cooperative(
            production.cooperative_id, user_id=production.user_id, season_id=production.season_id
        )
        return money(
            sum(payment.amount_remaining_to_pay for payment in payments if payment.production_id != production.id)
        )

    async def preview(self, cooperative_id: int, production_id: int) -> PaymentPreview:
        production = await self.require(self.repos.productions, "Production", cooperative_id, production_id)
        netting = await self._netting(production)
        preview = PaymentPreview(
            production_id=production.id,
            user_id=production.user_id,
            season_id=production.season_id,
            gross_amount=netting.gross_amount,
            outstanding_fees=netting.outstanding_fees,
            outstanding_loans=netting.outstanding_loans,
            total_deductions=netting.total_deductions,
            amount_due=netting.amount_due,
            amount_paid=0.0,
            amount_remaining_to_pay=netting.amount_due,
            outstanding_other_payments=await self._other_outstanding(production),
        )
        payment = await self.repos.payments.get_by_production(production.id)
        if payment is not None:
            preview.payment_id = payment.id
            preview.gross_amount = payment.gross_amount
            preview.total_deductions = payment.total_deductions
            preview.amount_due = payment.amount_due
            preview.amount_paid = payment.amount_paid
            preview.amount_remaining_to_pay = payment.amount_remaining_to_pay
        return preview

    async def _record_transaction(self, repos: SqlRepoBundle, payment: Payment, amount: float) -> None:
        await repos.payment_transactions.stage(
            PaymentTransaction(
                cooperative_id=payment.cooperative_id,
                user_id=payment.user_id,
                payment_id=payment.id,
                amount_paid=amount,
                amount_remaining_to_pay=payment.amount_remaining_to_pay,
            )
        )

    async def _mark_production(self, repos: SqlRepoBundle, production: Production, payment: Payment) -> None:
        if payment.amount_remaining_to_pay <= 0:
            production.payment_status = ProductionPaymentStatus.PAID.value
            await repos.productions.stage(production)

    async def process(self, cooperative_id: int, data: PaymentProcess) -> Tuple[Payment, bool]:
        """Pay a member for a production.

        The first call creates the payment and withholds fees and loans.
        Later calls pay further installments of the remaining balance.

        Returns:
            The payment and whether it was created by this call
        """
        async with self.unit_of_work() as repos:
            production = await self.require(repos.productions, "Production", cooperative_id, data.production_id)
            payment = await repos.payments.get_by_production(production.id)
            if payment is None:
                payment = await self._create(repos, production, data.amount_paid)
                created = True
            else:
                await self._pay_installment(repos, production, payment, data.amount_paid)
                created = False
        log_payment_processed(
            cooperative_id,
            payment.id,
            data.amount_paid,
            payment.amount_remaining_to_pay,
            payment.status,
            deductions=payment.total_deductions if created else None,
        )
        return payment, created

    async def _create(self, repos: SqlRepoBundle, production: Production, amount_paid: float) -> Payment:
        netting = await self._netting(production)
        amount_paid = money(amount_paid)
        if amount_paid > netting.amount_due:
            raise BusinessRuleError(
                f"Amount paid {amount_paid:.2f} exceeds the amount due {netting.amount_due:.2f}"
            )

        cash = CashLedger(repos)
        if amount_paid > 0:
            await cash.debit(production.cooperative_id, amount_paid, f"payment for production {production.id}")
        await settle_debts(repos, netting)

        remaining = money(netting.amount_due - amount_paid)
        payment = await repos.payments.stage(
            Payment(
                cooperative_id=production.cooperative_id,
                user_id=production.user_id,
                production_id=production.id,
                season_id=production.season_id,
                gross_amount=netting.gross_amount,
                total_deductions=netting.total_deductions,
                amount_due=netting.amount_due,
                amount_paid=amount_paid,
                amount_remaining_to_pay=remaining,
                status=payment_status(amount_paid, remaining),
            )
        )
        if amount_paid > 0:
            await self._record_transaction(repos, payment, amount_paid)
        await self._mark_production(repos, production, payment)
        logger.info(
            f"Processed payment {payment.id} for production {production.id}: gross {payment.gross_amount:.2f}, "
            f"withheld {payment.total_deductions:.2f}, paid {amount_paid:.2f}"
        )
        return payment

    async def _pay_installment(
        self, repos: SqlRepoBundle, production: Production, payment: Payment, amount: float
    ) -> Payment:
        amount = money(amount)
        if payment.status == PaymentStatus.PAID.value:
            raise BusinessRuleError(f"Payment {payment.id} is already paid")
        if amount <= 0:
            raise BusinessRuleError("Installment amount must be greater than zero")
        if amount > payment.amount_remaining_to_pay:
            raise BusinessRuleError(
                f"Installment {amount:.2f} exceeds the remaining balance {payment.amount_remaining_to_pay:.2f}"
            )

        await CashLedger(repos).debit(payment.cooperative_id, amount, f"installment on payment {payment.id}")
        payment.amount_paid = money(payment.amount_paid + amount)
        payment.amount_remaining_to_pay = money(payment.amount_due - payment.amount_paid)
        payment.status = payment_status(payment.amount_paid, payment.amount_remaining_to_pay)
        await repos.payments.stage(payment)
        await self._record_transaction(repos, payment, amount)
        await self._mark_production(repos, production, payment)
        logger.info(f"Installment of {amount:.2f} on payment {payment.id}, {payment.amount_remaining_to_pay:.2f} left")
        return payment

    async def list(
        self,
        cooperative_id: int,
        user_id: Optional[int] = None,
        season_id: Optional[int] = None,
        status: Optional[PaymentStatus] = None,
    ) -> List[Payment]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.payments.list_for_cooperative(
            cooperative_id, user_id=user_id, season_id=season_id, status=status.value if status else None
        )

    async def get(self, cooperative_id: int, payment_id: int) -> Payment:
        return await self.require(self.repos.payments, "Payment", cooperative_id, payment_id)

    async def delete(self, cooperative_id: int, payment_id: int) -> None:
        async with self.unit_of_work() as repos:
            payment = await self.get(cooperative_id, payment_id)
            if payment.amount_paid > 0:
                await CashLedger(repos).credit(cooperative_id, payment.amount_paid, f"payment {payment.id} deleted")
            production = await repos.productions.get_in_cooperative(cooperative_id, payment.production_id)
            if production is not None:
                production.payment_status = ProductionPaymentStatus.PENDING.value
                await repos.productions.stage(production)
            await delete_payment_dependents(repos, payment.id)
            await repos.payments.remove(payment)
        logger.info(f"Deleted payment {payment_id}")

    async def list_transactions(
        self, cooperative_id: int, user_id: Optional[int] = None, payment_id: Optional[int] = None
    ) -> List[PaymentTransaction]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.payment_transactions.list_for_cooperative(
            cooperative_id, user_id=user_id, payment_id=payment_id
        )
