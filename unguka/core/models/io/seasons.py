"""
Season I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from unguka.core.models.domain.enums import ActivityStatus, SeasonName


class SeasonRead(BaseModel):
    """Schema for reading a season from API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cooperative_id: int
    name: SeasonName
    year: int
    status: ActivityStatus
    created_at: datetime
    updated_at: datetime


class SeasonCreate(BaseModel):
    """Schema for creating a season via API."""

    name: SeasonName
    year: int = Field(ge=2000, le=2100)
    status: ActivityStatus = Field(default=ActivityStatus.INACTIVE)


class SeasonUpdate(BaseModel):
    """Schema for updating a season via API."""

    name: Optional[SeasonName] = None
    year: Optional[int] = Field(default=None, ge=2000, le=2100)
    status: Optional[ActivityStatus] = None


class SeasonRefRead(BaseModel):
    """A season named by its calendar position."""

    name: SeasonName
    year: int


class SeasonCalendarRead(BaseModel):
    """Calendar position of a date: current, next and previous season."""

    current: SeasonRefRead
    next: SeasonRefRead
    previous: SeasonRefRead


class SeasonAutoCreateResult(BaseModel):
    """Outcome of the automatic season rollover for one cooperative."""

    cooperative_id: int
    created: List[SeasonRefRead]
    active_season_id: int
