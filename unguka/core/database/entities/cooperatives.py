"""
Cooperative entity model.

A cooperative is the tenant of the system. Every other table carries the
identifier of the cooperative that owns the row.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class Cooperative(Base, table=True):
    """Entity for a registered agricultural cooperative.

    Table: cooperatives
    """

    __tablename__ = "cooperatives"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(max_length=50, unique=True, index=True)
    registration_number: str = Field(max_length=7, unique=True)
    district: str = Field(max_length=50)
    sector: str = Field(max_length=50)
    contact_email: Optional[str] = Field(default=None, max_length=254)
    contact_phone: str = Field(max_length=16)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Cooperative(id={self.id}, name={self.name})"
