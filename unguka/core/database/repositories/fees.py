"""
Fee type and fee repositories.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from unguka.core.models.domain.enums import FeeStatus

from ..entities.fees import Fee, FeeType
from .base import TenantRepository


class FeeTypeRepository(TenantRepository[FeeType]):
    """Repository for fee types."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, FeeType)

    async def get_by_name(self, cooperative_id: int, name: str) -> Optional[FeeType]:
        stmt = select(FeeType).where(FeeType.cooperative_id == cooperative_id, FeeType.name == name)
        result = await self.session.execute(stmt)
        return result.scalars().first()


class FeeRepository(TenantRepository[Fee]):
    """Repository for fees owed by members."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Fee)

    def default_order(self) -> Sequence[Any]:
        return (Fee.created_at.desc(), Fee.id.desc())

    async def find(
        self, cooperative_id: int, user_id: int, fee_type_id: int, season_id: Optional[int]
    ) -> Optional[Fee]:
        """Get the fee of a member for a fee type, in a season or season-less."""
        stmt = select(Fee).where(
            Fee.cooperative_id == cooperative_id,
            Fee.user_id == user_id,
            Fee.fee_type_id == fee_type_id,
        )
        if season_id is None:
            stmt = stmt.where(Fee.season_id.is_(None))
        else:
            stmt = stmt.where(Fee.season_id == season_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_outstanding(self, cooperative_id: int, user_id: int, season_id: Optional[int] = None) -> List[Fee]:
        """Fees of a member not yet fully paid, oldest first.

        With a season, fees of that season and season-less fees are returned.
        """
        stmt = select(Fee).where(
            Fee.cooperative_id == cooperative_id,
            Fee.user_id == user_id,
            Fee.status != FeeStatus.PAID.value,
        )
        if season_id is not None:
            stmt = stmt.where((Fee.season_id == season_id) | Fee.season_id.is_(None))
        result = await self.session.execute(stmt.order_by(Fee.created_at, Fee.id))
        return list(result.scalars().all())
