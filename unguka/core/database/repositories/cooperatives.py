"""
Cooperative repository.

Cooperatives are the tenants themselves, so this repository is the only one
not scoped by ``cooperative_id``.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.cooperatives import Cooperative
from .base import BaseRepository


class CooperativeRepository(BaseRepository[Cooperative]):
    """Repository for cooperative data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Cooperative)

    async def get_by_name(self, name: str) -> Optional[Cooperative]:
        result = await self.session.execute(select(Cooperative).where(Cooperative.name == name))
        return result.scalars().first()

    async def get_by_registration_number(self, registration_number: str) -> Optional[Cooperative]:
        stmt = select(Cooperative).where(Cooperative.registration_number == registration_number)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_active(self) -> List[Cooperative]:
        """List cooperatives flagged as active."""
        return await self.list(filters={"is_active": True})
