"""
API endpoints for agricultural seasons.

Two routers are exposed: ``router`` for the seasons of one cooperative and
``calendar_router`` for the calendar and the rollover across all
cooperatives.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, status

from unguka.core.models.domain.enums import ActivityStatus
from unguka.core.models.io.seasons import (
    SeasonAutoCreateResult,
    SeasonCalendarRead,
    SeasonCreate,
    SeasonRead,
    SeasonUpdate,
)
from unguka.server.services.deps import SeasonServiceDep
from unguka.server.services.seasons import season_calendar

router = APIRouter(tags=["seasons"])
calendar_router = APIRouter(tags=["seasons"])


@calendar_router.get(
    "/calendar",
    response_model=SeasonCalendarRead,
    summary="Season Calendar",
    description="Current, next and previous season for a date (today by default).",
)
async def get_season_calendar(on: Optional[date] = None) -> SeasonCalendarRead:
    """
    Season calendar.

    Season-A runs from September to January and is named after the year it
    ends in. Season-B runs from February to August.
    """
    return season_calendar(on)


@calendar_router.post(
    "/auto-create",
    response_model=list[SeasonAutoCreateResult],
    summary="Roll Seasons Over",
    description="For every active cooperative, create the current and next seasons when missing and activate the current one.",
)
async def auto_create_seasons(service: SeasonServiceDep, on: Optional[date] = None) -> list[SeasonAutoCreateResult]:
    return await service.auto_create(on)


@router.post(
    "",
    response_model=SeasonRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Season",
    description="Create a season. Creating it active deactivates every other season of the cooperative.",
    responses={
        201: {"description": "Season created successfully"},
        409: {"description": "The season already exists for this year"},
    },
)
async def create_season(cooperative_id: int, data: SeasonCreate, service: SeasonServiceDep) -> SeasonRead:
    return SeasonRead.model_validate(await service.create(cooperative_id, data))


@router.get(
    "",
    response_model=list[SeasonRead],
    summary="List Seasons",
    description="Retrieve the seasons of a cooperative, newest first.",
)
async def list_seasons(
    cooperative_id: int, service: SeasonServiceDep, status: Optional[ActivityStatus] = None
) -> list[SeasonRead]:
    return [SeasonRead.model_validate(season) for season in await service.list(cooperative_id, status=status)]


@router.get(
    "/active",
    response_model=SeasonRead,
    summary="Get Active Season",
    responses={404: {"description": "No active season"}},
)
async def get_active_season(cooperative_id: int, service: SeasonServiceDep) -> SeasonRead:
    return SeasonRead.model_validate(await service.get_active(cooperative_id))


@router.get(
    "/{season_id}",
    response_model=SeasonRead,
    summary="Get Season",
    responses={404: {"description": "Season not found in this cooperative"}},
)
async def get_season(cooperative_id: int, season_id: int, service: SeasonServiceDep) -> SeasonRead:
    return SeasonRead.model_validate(await service.get(cooperative_id, season_id))


@router.patch(
    "/{season_id}",
    response_model=SeasonRead,
    summary="Update Season",
    responses={
        404: {"description": "Season not found in this cooperative"},
        409: {"description": "The season already exists for this year"},
    },
)
async def update_season(
    cooperative_id: int, season_id: int, data: SeasonUpdate, service: SeasonServiceDep
) -> SeasonRead:
    return SeasonRead.model_validate(await service.update(cooperative_id, season_id, data))


@router.post(
    "/{season_id}/activate",
    response_model=SeasonRead,
    summary="Activate Season",
    description="Make this season the active one; all other seasons of the cooperative become inactive.",
    responses={404: {"description": "Season not found in this cooperative"}},
)
async def activate_season(cooperative_id: int, season_id: int, service: SeasonServiceDep) -> SeasonRead:
    return SeasonRead.model_validate(await service.activate(cooperative_id, season_id))


@router.delete(
    "/{season_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Season",
    description="Delete a season with its productions, purchases, sales, fees, loans and payments.",
    responses={404: {"description": "Season not found in this cooperative"}},
)
async def delete_season(cooperative_id: int, season_id: int, service: SeasonServiceDep) -> None:
    await service.delete(cooperative_id, season_id)
