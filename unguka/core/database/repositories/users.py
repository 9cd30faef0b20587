"""
User repository.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.users import User
from .base import TenantRepository


class UserRepository(TenantRepository[User]):
    """Repository for cooperative members and staff."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_phone(self, phone_number: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.phone_number == phone_number))
        return result.scalars().first()

    async def get_by_national_id(self, national_id: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.national_id == national_id))
        return result.scalars().first()

    async def list_ids(self, cooperative_id: int) -> List[int]:
        """Identifiers of every user of a cooperative."""
        result = await self.session.execute(select(User.id).where(User.cooperative_id == cooperative_id))
        return list(result.scalars().all())
