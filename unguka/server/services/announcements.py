"""
Announcements posted to a cooperative.
"""

from __future__ import annotations

from typing import List

from unguka.core.database.entities import Announcement
from unguka.core.models.io.announcements import AnnouncementCreate, AnnouncementUpdate

from .base import BaseService


class AnnouncementService(BaseService):
    """Service for cooperative announcements."""

    async def create(self, cooperative_id: int, data: AnnouncementCreate) -> Announcement:
        await self.require_user(cooperative_id, data.user_id)
        return await self.repos.announcements.create(
            Announcement(
                cooperative_id=cooperative_id,
                user_id=data.user_id,
                title=data.title,
                description=data.description,
            )
        )

    async def list(self, cooperative_id: int) -> List[Announcement]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.announcements.list_for_cooperative(cooperative_id)

    async def get(self, cooperative_id: int, announcement_id: int) -> Announcement:
        return await self.require(self.repos.announcements, "Announcement", cooperative_id, announcement_id)

    async def update(self, cooperative_id: int, announcement_id: int, data: AnnouncementUpdate) -> Announcement:
        announcement = await self.get(cooperative_id, announcement_id)
        for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(announcement, key, value)
        return await self.repos.announcements.update(announcement)

    async def delete(self, cooperative_id: int, announcement_id: int) -> None:
        announcement = await self.get(cooperative_id, announcement_id)
        await self.repos.announcements.delete(announcement.id)
