"""
Plot repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.plots import Plot
from .base import TenantRepository


class PlotRepository(TenantRepository[Plot]):
    """Repository for member land parcels."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Plot)

    async def get_by_upi(self, upi: str) -> Optional[Plot]:
        result = await self.session.execute(select(Plot).where(Plot.upi == upi))
        return result.scalars().first()
