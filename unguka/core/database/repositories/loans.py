"""
Loan and loan transaction repositories.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from unguka.core.models.domain.enums import LoanStatus

from ..entities.loans import Loan, LoanTransaction
from .base import TenantRepository


class LoanRepository(TenantRepository[Loan]):
    """Repository for member loans."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Loan)

    def default_order(self) -> Sequence[Any]:
        return (Loan.created_at.desc(), Loan.id.desc())

    async def list_pending(self, cooperative_id: int, user_id: int, season_id: Optional[int] = None) -> List[Loan]:
        """Pending loans of a member, oldest first.

        With a season, loans of that season and loans without a season are returned.
        """
        stmt = select(Loan).where(
            Loan.cooperative_id == cooperative_id,
            Loan.user_id == user_id,
            Loan.status == LoanStatus.PENDING.value,
        )
        if season_id is not None:
            stmt = stmt.where((Loan.season_id == season_id) | Loan.season_id.is_(None))
        result = await self.session.execute(stmt.order_by(Loan.created_at, Loan.id))
        return list(result.scalars().all())

    async def get_by_purchase_input(self, purchase_input_id: int) -> Optional[Loan]:
        result = await self.session.execute(select(Loan).where(Loan.purchase_input_id == purchase_input_id))
        return result.scalars().first()

    async def list_ids(self, **criteria: Any) -> List[int]:
        """Identifiers of the loans matching equality criteria."""
        stmt = select(Loan.id)
        for key, value in criteria.items():
            stmt = stmt.where(getattr(Loan, key) == value)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class LoanTransactionRepository(TenantRepository[LoanTransaction]):
    """Repository for loan repayments."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, LoanTransaction)

    def default_order(self) -> Sequence[Any]:
        return (LoanTransaction.transaction_date.desc(), LoanTransaction.id.desc())

    async def list_for_user(self, cooperative_id: int, user_id: int) -> List[LoanTransaction]:
        """Repayments on the loans of one member, newest first."""
        stmt = (
            select(LoanTransaction)
            .join(Loan, Loan.id == LoanTransaction.loan_id)
            .where(LoanTransaction.cooperative_id == cooperative_id, Loan.user_id == user_id)
            .order_by(*self.default_order())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
