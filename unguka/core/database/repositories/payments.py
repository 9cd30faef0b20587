"""
Payment and payment transaction repositories.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.payments import Payment, PaymentTransaction
from .base import TenantRepository


class PaymentRepository(TenantRepository[Payment]):
    """Repository for member payments."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Payment)

    def default_order(self) -> Sequence[Any]:
        return (Payment.created_at.desc(), Payment.id.desc())

    async def get_by_production(self, production_id: int) -> Optional[Payment]:
        result = await self.session.execute(select(Payment).where(Payment.production_id == production_id))
        return result.scalars().first()

    async def list_ids(self, **criteria: Any) -> List[int]:
        """Identifiers of the payments matching equality criteria."""
        stmt = select(Payment.id)
        for key, value in criteria.items():
            column = getattr(Payment, key)
            if isinstance(value, (list, tuple, set)):
                stmt = stmt.where(column.in_(list(value)))
            else:
                stmt = stmt.where(column == value)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class PaymentTransactionRepository(TenantRepository[PaymentTransaction]):
    """Repository for payout installments."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PaymentTransaction)

    def default_order(self) -> Sequence[Any]:
        return (PaymentTransaction.transaction_date.desc(), PaymentTransaction.id.desc())
