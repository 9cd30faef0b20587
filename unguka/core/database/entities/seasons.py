"""
Season entity model.

Seasons bucket productions, purchases, sales, fees and loans in time. A
cooperative has at most one season of a given name per year.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from unguka.core.models.domain.enums import ActivityStatus

from ..base import Base, utc_now


class Season(Base, table=True):
    """Entity for an agricultural season of a cooperative.

    Table: seasons
    """

    __tablename__ = "seasons"
    __table_args__ = (
        UniqueConstraint("cooperative_id", "name", "year", name="uq_seasons_cooperative_name_year"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)

    name: str = Field(max_length=16)
    year: int
    status: str = Field(default=ActivityStatus.INACTIVE.value, max_length=16)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def label(self) -> str:
        return f"{self.name} {self.year}"

    def __repr__(self) -> str:
        return f"Season(id={self.id}, name={self.name}, year={self.year}, status={self.status})"
