"""
Season management and the automatic season rollover.

At most one season of a cooperative is active. Creating or updating a
season as active, or activating it explicitly, deactivates all others.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from unguka.core.database.entities import Season
from unguka.core.errors import ConflictError, NotFoundError
from unguka.core.logging_config import get_logger
from unguka.core.models.domain.enums import ActivityStatus
from unguka.core.models.domain.season_calendar import SeasonRef, current_season, next_season, previous_season
from unguka.core.models.io.seasons import (
    SeasonAutoCreateResult,
    SeasonCalendarRead,
    SeasonCreate,
    SeasonRefRead,
    SeasonUpdate,
)

from .base import BaseService
from .cascade import delete_season_dependents

logger = get_logger(__name__)


def _ref(season: SeasonRef) -> SeasonRefRead:
    return SeasonRefRead(name=season.name, year=season.year)


def season_calendar(today: Optional[date] = None) -> SeasonCalendarRead:
    """Current, next and previous season for a date."""
    current = current_season(today)
    return SeasonCalendarRead(
        current=_ref(current),
        next=_ref(next_season(current)),
        previous=_ref(previous_season(current)),
    )


class SeasonService(BaseService):
    """Service for agricultural seasons."""

    async def _check_unique(self, cooperative_id: int, name: str, year: int, exclude_id: Optional[int] = None) -> None:
        existing = await self.repos.seasons.find(cooperative_id, name, year)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError(f"{name} {year} already exists in this cooperative")

    async def create(self, cooperative_id: int, data: SeasonCreate) -> Season:
        async with self.unit_of_work() as repos:
            await self.require_cooperative(cooperative_id)
            await self._check_unique(cooperative_id, data.name.value, data.year)
            if data.status == ActivityStatus.ACTIVE:
                await repos.seasons.deactivate_all(cooperative_id)
            season = await repos.seasons.stage(
                Season(cooperative_id=cooperative_id, name=data.name.value, year=data.year, status=data.status.value)
            )
        logger.info(f"Created season {season.label} in cooperative {cooperative_id}")
        return season

    async def list(self, cooperative_id: int, status: Optional[ActivityStatus] = None) -> List[Season]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.seasons.list_for_cooperative(cooperative_id, status=status.value if status else None)

    async def get(self, cooperative_id: int, season_id: int) -> Season:
        return await self.require_season(cooperative_id, season_id)

    async def get_active(self, cooperative_id: int) -> Season:
        await self.require_cooperative(cooperative_id)
        season = await self.repos.seasons.get_active(cooperative_id)
        if season is None:
            raise NotFoundError("Active season")
        return season

    async def update(self, cooperative_id: int, season_id: int, data: SeasonUpdate) -> Season:
        async with self.unit_of_work() as repos:
            season = await self.require_season(cooperative_id, season_id)
            name = data.name.value if data.name is not None else season.name
            year = data.year if data.year is not None else season.year
            if (name, year) != (season.name, season.year):
                await self._check_unique(cooperative_id, name, year, exclude_id=season.id)
            if data.status == ActivityStatus.ACTIVE:
                await repos.seasons.deactivate_all(cooperative_id)
            season.name = name
            season.year = year
            if data.status is not None:
                season.status = data.status.value
            await repos.seasons.stage(season)
        return season

    async def activate(self, cooperative_id: int, season_id: int) -> Season:
        async with self.unit_of_work() as repos:
            season = await self.require_season(cooperative_id, season_id)
            await repos.seasons.deactivate_all(cooperative_id)
            season.status = ActivityStatus.ACTIVE.value
            await repos.seasons.stage(season)
        logger.info(f"Activated season {season.label} in cooperative {cooperative_id}")
        return season

    async def delete(self, cooperative_id: int, season_id: int) -> None:
        async with self.unit_of_work() as repos:
            season = await self.require_season(cooperative_id, season_id)
            await delete_season_dependents(repos, season_id)
            await repos.seasons.remove(season)
        logger.info(f"Deleted season {season_id} of cooperative {cooperative_id}")

    async def auto_create(self, today: Optional[date] = None) -> List[SeasonAutoCreateResult]:
        """Roll every active cooperative onto the current season.

        The current and next seasons are created when missing; only the
        current one is left active.
        """
        current = current_season(today)
        upcoming = next_season(current)
        results: List[SeasonAutoCreateResult] = []
        async with self.unit_of_work() as repos:
            for cooperative in await repos.cooperatives.list_active():
                created: List[SeasonRefRead] = []
                await repos.seasons.deactivate_all(cooperative.id)
                active: Optional[Season] = None
                for ref in (current, upcoming):
                    season = await repos.seasons.find(cooperative.id, ref.name.value, ref.year)
                    if season is None:
                        season = Season(cooperative_id=cooperative.id, name=ref.name.value, year=ref.year)
                        created.append(_ref(ref))
                    if ref == current:
                        season.status = ActivityStatus.ACTIVE.value
                        active = season
                    else:
                        season.status = ActivityStatus.INACTIVE.value
                    await repos.seasons.stage(season)
                results.append(
                    SeasonAutoCreateResult(cooperative_id=cooperative.id, created=created, active_season_id=active.id)
                )
        logger.info(f"Season rollover to {current.name.value} {current.year} done for {len(results)} cooperatives")
        return results
