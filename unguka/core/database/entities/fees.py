"""
Fee entity models.

- FeeType: a charge defined by the cooperative (membership, per-season
  contribution, ...).
- Fee: what a given member owes for a fee type, optionally per season.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from unguka.core.models.domain.enums import ActivityStatus, FeeStatus

from ..base import Base, utc_now


class FeeType(Base, table=True):
    """Entity for a kind of fee charged to members.

    Table: fee_types
    """

    __tablename__ = "fee_types"
    __table_args__ = (
        UniqueConstraint("cooperative_id", "name", name="uq_fee_types_cooperative_name"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)

    name: str = Field(max_length=100)
    amount: float
    description: Optional[str] = Field(default=None, max_length=500)
    status: str = Field(default=ActivityStatus.ACTIVE.value, max_length=16)
    is_per_season: bool = Field(default=True)
    auto_apply_on_create: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"FeeType(id={self.id}, name={self.name}, amount={self.amount})"


class Fee(Base, table=True):
    """Entity for a fee owed by a member.

    The status is derived from the amounts, see ``refresh_status``.

    Table: fees
    """

    __tablename__ = "fees"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    cooperative_id: int = Field(foreign_key="cooperatives.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    season_id: Optional[int] = Field(default=None, foreign_key="seasons.id", index=True)
    fee_type_id: int = Field(foreign_key="fee_types.id", index=True)

    amount_owed: float
    amount_paid: float = Field(default=0.0)
    status: str = Field(default=FeeStatus.UNPAID.value, max_length=16, index=True)
    paid_at: Optional[datetime] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def remaining_amount(self) -> float:
        return self.amount_owed - self.amount_paid

    def refresh_status(self) -> None:
        """Derive ``status`` and ``paid_at`` from the owed and paid amounts."""
        if self.remaining_amount <= 0:
            self.status = FeeStatus.PAID.value
            if self.paid_at is None:
                self.paid_at = utc_now()
        elif self.amount_paid > 0:
            self.status = FeeStatus.PARTIAL.value
            self.paid_at = None
        else:
            self.status = FeeStatus.UNPAID.value
            self.paid_at = None

    def __repr__(self) -> str:
        return f"Fee(id={self.id}, user_id={self.user_id}, owed={self.amount_owed}, paid={self.amount_paid})"
