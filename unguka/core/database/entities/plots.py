"""
Plot entity model.

Plots are the land parcels farmed by members. Their surface feeds the yield
predictions of the reports.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class Plot(Base, table=True):
    """Entity for a land parcel farmed by a member.

    The UPI (unique parcel identifier) is unique across all cooperatives.

    Table: plots
    """

    __tablename__ = "plots"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)

    size: float
    upi: str = Field(max_length=20, unique=True, index=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Plot(id={self.id}, upi={self.upi}, size={self.size})"
