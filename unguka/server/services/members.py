"""
Member registration and maintenance.
"""

from __future__ import annotations

from typing import List, Optional

from unguka.core.database.entities import User
from unguka.core.database.entities.users import DEFAULT_PROFILE_PICTURE
from unguka.core.errors import ConflictError
from unguka.core.logging_config import get_logger
from unguka.core.models.domain.enums import UserRole
from unguka.core.models.io.members import MemberCreate, MemberUpdate

from .base import BaseService
from .cascade import delete_user_dependents

logger = get_logger(__name__)


class MemberService(BaseService):
    """Service for the people of a cooperative."""

    async def _check_unique(
        self, phone_number: Optional[str], national_id: Optional[str], exclude_id: Optional[int] = None
    ) -> None:
        if phone_number is not None:
            existing = await self.repos.users.get_by_phone(phone_number)
            if existing is not None and existing.id != exclude_id:
                raise ConflictError(f"Phone number {phone_number} is already registered")
        if national_id is not None:
            existing = await self.repos.users.get_by_national_id(national_id)
            if existing is not None and existing.id != exclude_id:
                raise ConflictError(f"National ID {national_id} is already registered")

    async def register(self, cooperative_id: int, data: MemberCreate) -> User:
        await self.require_cooperative(cooperative_id)
        await self._check_unique(data.phone_number, data.national_id)
        user = User(
            cooperative_id=cooperative_id,
            names=data.names,
            phone_number=data.phone_number,
            national_id=data.national_id,
            role=data.role.value,
            profile_picture=data.profile_picture or DEFAULT_PROFILE_PICTURE,
        )
        user = await self.repos.users.create(user)
        logger.info(f"Registered {user.role} {user.id} in cooperative {cooperative_id}")
        return user

    async def list(
        self,
        cooperative_id: int,
        role: Optional[UserRole] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[User]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.users.list_for_cooperative(
            cooperative_id, limit=limit, offset=offset, role=role.value if role else None
        )

    async def get(self, cooperative_id: int, user_id: int) -> User:
        return await self.require_user(cooperative_id, user_id)

    async def update(self, cooperative_id: int, user_id: int, data: MemberUpdate) -> User:
        user = await self.require_user(cooperative_id, user_id)
        update_data = data.model_dump(exclude_unset=True)
        await self._check_unique(update_data.get("phone_number"), update_data.get("national_id"), exclude_id=user.id)
        if update_data.get("role") is not None:
            update_data["role"] = update_data["role"].value
        for key, value in update_data.items():
            if value is not None:
                setattr(user, key, value)
        return await self.repos.users.update(user)

    async def delete(self, cooperative_id: int, user_id: int) -> None:
        async with self.unit_of_work() as repos:
            user = await self.require_user(cooperative_id, user_id)
            await delete_user_dependents(repos, user_id)
            await repos.users.remove(user)
        logger.info(f"Deleted user {user_id} of cooperative {cooperative_id}")
