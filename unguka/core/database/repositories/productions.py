"""
Production repository.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.productions import Production
from .base import TenantRepository


class ProductionRepository(TenantRepository[Production]):
    """Repository for member productions."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Production)

    def default_order(self) -> Sequence[Any]:
        return (Production.created_at.desc(), Production.id.desc())

    async def find(self, user_id: int, product_id: int, season_id: int) -> Optional[Production]:
        """Get the production of a member for a product in a season."""
        stmt = select(Production).where(
            Production.user_id == user_id,
            Production.product_id == product_id,
            Production.season_id == season_id,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()
