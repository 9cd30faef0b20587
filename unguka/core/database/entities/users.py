"""
User entity model.

Users are the people of a cooperative: members who farm and sell produce,
plus accountants and managers who run the books.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from unguka.core.models.domain.enums import UserRole

from ..base import Base, utc_now

DEFAULT_PROFILE_PICTURE = "https://www.w3schools.com/howto/img_avatar.png"


class User(Base, table=True):
    """Entity for a person belonging to a cooperative.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)

    names: str = Field(max_length=50)
    phone_number: str = Field(max_length=13, unique=True, index=True)
    national_id: str = Field(max_length=16, unique=True)
    role: str = Field(default=UserRole.MEMBER.value, max_length=16, index=True)
    profile_picture: str = Field(default=DEFAULT_PROFILE_PICTURE, max_length=512)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"User(id={self.id}, names={self.names}, role={self.role})"
