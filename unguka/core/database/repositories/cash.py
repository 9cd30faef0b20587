"""
Cash repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.cash import Cash
from .base import TenantRepository


class CashRepository(TenantRepository[Cash]):
    """Repository for the per-cooperative cash balance."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Cash)

    async def get_for_cooperative(self, cooperative_id: int) -> Optional[Cash]:
        result = await self.session.execute(select(Cash).where(Cash.cooperative_id == cooperative_id))
        return result.scalars().first()
