"""
Member loans and their repayments.

A loan owes ``principal * (1 + interest / 100)``. Repayments lower the
amount owed (never below zero) and are recorded as loan transactions.
Repaying a loan does not move cash.
"""

from __future__ import annotations

from typing import List, Optional

from unguka.core.database.entities import Loan, LoanTransaction
from unguka.core.database.repositories import SqlRepoBundle
from unguka.core.errors import BusinessRuleError
from unguka.core.logging_config import get_logger
from unguka.core.models.domain.enums import LoanStatus
from unguka.core.models.io.loans import LoanCreate, LoanUpdate

from .base import BaseService, money
from .cascade import delete_loan_dependents

logger = get_logger(__name__)


async def apply_loan_repayment(repos: SqlRepoBundle, loan: Loan, amount: float) -> float:
    """Apply a repayment to a loan and record the transaction.

    Returns:
        The amount actually applied, at most what was owed.
    """
    applied = money(min(amount, loan.amount_owed))
    loan.amount_owed = max(0.0, money(loan.amount_owed - applied))
    if loan.amount_owed <= 0:
        loan.status = LoanStatus.REPAID.value
    await repos.loans.stage(loan)
    await repos.loan_transactions.stage(
        LoanTransaction(
            cooperative_id=loan.cooperative_id,
            loan_id=loan.id,
            amount_paid=applied,
            amount_remaining_to_pay=loan.amount_owed,
        )
    )
    logger.info(f"Loan {loan.id} repaid by {applied:.2f}, {loan.amount_owed:.2f} remaining")
    return applied


class LoanService(BaseService):
    """Service for member loans."""

    async def create(self, cooperative_id: int, data: LoanCreate) -> Loan:
        await self.require_user(cooperative_id, data.user_id)
        await self.optional_season(cooperative_id, data.season_id)
        loan = await self.repos.loans.create(
            Loan(
                cooperative_id=cooperative_id,
                user_id=data.user_id,
                season_id=data.season_id,
                principal=money(data.principal),
                interest=data.interest,
                amount_owed=money(data.principal * (1 + data.interest / 100)),
                status=LoanStatus.PENDING.value,
            )
        )
        logger.info(f"Granted loan {loan.id} to user {loan.user_id}: {loan.amount_owed:.2f} owed")
        return loan

    async def list(
        self,
        cooperative_id: int,
        user_id: Optional[int] = None,
        status: Optional[LoanStatus] = None,
        season_id: Optional[int] = None,
    ) -> List[Loan]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.loans.list_for_cooperative(
            cooperative_id, user_id=user_id, status=status.value if status else None, season_id=season_id
        )

    async def get(self, cooperative_id: int, loan_id: int) -> Loan:
        return await self.require(self.repos.loans, "Loan", cooperative_id, loan_id)

    async def update(self, cooperative_id: int, loan_id: int, data: LoanUpdate) -> Loan:
        loan = await self.get(cooperative_id, loan_id)
        if data.user_id is not None:
            await self.require_user(cooperative_id, data.user_id)
            loan.user_id = data.user_id
        if data.season_id is not None:
            await self.require_season(cooperative_id, data.season_id)
            loan.season_id = data.season_id
        if data.status is not None:
            loan.status = data.status.value
        return await self.repos.loans.update(loan)

    async def repay(self, cooperative_id: int, loan_id: int, amount: float) -> Loan:
        async with self.unit_of_work() as repos:
            loan = await self.get(cooperative_id, loan_id)
            if loan.status == LoanStatus.REPAID.value:
                raise BusinessRuleError(f"Loan {loan.id} is already repaid")
            await apply_loan_repayment(repos, loan, amount)
        return loan

    async def delete(self, cooperative_id: int, loan_id: int) -> None:
        async with self.unit_of_work() as repos:
            loan = await self.get(cooperative_id, loan_id)
            await delete_loan_dependents(repos, loan.id)
            await repos.loans.remove(loan)
        logger.info(f"Deleted loan {loan_id}")

    async def list_transactions(
        self, cooperative_id: int, loan_id: Optional[int] = None, user_id: Optional[int] = None
    ) -> List[LoanTransaction]:
        await self.require_cooperative(cooperative_id)
        if loan_id is not None:
            loan = await self.get(cooperative_id, loan_id)
            if user_id is not None and loan.user_id != user_id:
                return []
            return await self.repos.loan_transactions.list_for_cooperative(cooperative_id, loan_id=loan_id)
        if user_id is not None:
            return await self.repos.loan_transactions.list_for_user(cooperative_id, user_id)
        return await self.repos.loan_transactions.list_for_cooperative(cooperative_id)
