"""
Announcement repository.
"""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.announcements import Announcement
from .base import TenantRepository


class AnnouncementRepository(TenantRepository[Announcement]):
    """Repository for cooperative announcements."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Announcement)

    def default_order(self) -> Sequence[Any]:
        return (Announcement.created_at.desc(), Announcement.id.desc())
