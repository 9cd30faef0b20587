"""
Season repository.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from sqlalchemy import update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from unguka.core.models.domain.enums import ActivityStatus, SeasonName

from ..entities.seasons import Season
from .base import TenantRepository


class SeasonRepository(TenantRepository[Season]):
    """Repository for agricultural seasons."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Season)

    def default_order(self) -> Sequence[Any]:
        return (Season.year.desc(), Season.name.desc())

    async def find(self, cooperative_id: int, name: str, year: int) -> Optional[Season]:
        """Get the season of a cooperative by name and year."""
        stmt = select(Season).where(
            Season.cooperative_id == cooperative_id,
            Season.name == name,
            Season.year == year,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_active(self, cooperative_id: int) -> Optional[Season]:
        stmt = (
            select(Season)
            .where(Season.cooperative_id == cooperative_id, Season.status == ActivityStatus.ACTIVE.value)
            .order_by(Season.year.desc(), Season.name.desc())
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def deactivate_all(self, cooperative_id: int) -> None:
        """Mark every season of a cooperative inactive, without committing."""
        stmt = (
            sa_update(Season)
            .where(Season.cooperative_id == cooperative_id)
            .values(status=ActivityStatus.INACTIVE.value)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)

    async def list_history(self, cooperative_id: int, before_year: int, limit: int) -> List[Season]:
        """Seasons of previous years plus Season-A of ``before_year``, newest first."""
        stmt = (
            select(Season)
            .where(
                Season.cooperative_id == cooperative_id,
                (Season.year < before_year) | ((Season.year == before_year) & (Season.name == SeasonName.SEASON_A.value)),
            )
            .order_by(Season.year.desc(), Season.name.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
