"""
Announcement entity model.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class Announcement(Base, table=True):
    """Entity for a notice posted to a cooperative.

    Table: announcements
    """

    __tablename__ = "announcements"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)

    title: str = Field(max_length=100)
    description: str

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Announcement(id={self.id}, title={self.title})"
