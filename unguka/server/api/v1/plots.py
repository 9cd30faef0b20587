"""
API endpoints for the plots (land parcels) farmed by members.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, status

from unguka.core.models.io.plots import PlotCreate, PlotRead, PlotUpdate
from unguka.server.services.deps import PlotServiceDep

router = APIRouter(tags=["plots"])


@router.post(
    "",
    response_model=PlotRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register Plot",
    description="Register a plot for a member. UPIs are unique across all cooperatives.",
    responses={
        201: {"description": "Plot registered successfully"},
        404: {"description": "Member not found in this cooperative"},
        409: {"description": "UPI already registered"},
    },
)
async def create_plot(cooperative_id: int, data: PlotCreate, service: PlotServiceDep) -> PlotRead:
    return PlotRead.model_validate(await service.create(cooperative_id, data))


@router.get("", response_model=list[PlotRead], summary="List Plots")
async def list_plots(cooperative_id: int, service: PlotServiceDep, user_id: Optional[int] = None) -> list[PlotRead]:
    return [PlotRead.model_validate(plot) for plot in await service.list(cooperative_id, user_id=user_id)]


@router.get(
    "/{plot_id}",
    response_model=PlotRead,
    summary="Get Plot",
    responses={404: {"description": "Plot not found in this cooperative"}},
)
async def get_plot(cooperative_id: int, plot_id: int, service: PlotServiceDep) -> PlotRead:
    return PlotRead.model_validate(await service.get(cooperative_id, plot_id))


@router.patch(
    "/{plot_id}",
    response_model=PlotRead,
    summary="Update Plot",
    responses={
        404: {"description": "Plot or member not found in this cooperative"},
        409: {"description": "UPI already registered"},
    },
)
async def update_plot(cooperative_id: int, plot_id: int, data: PlotUpdate, service: PlotServiceDep) -> PlotRead:
    return PlotRead.model_validate(await service.update(cooperative_id, plot_id, data))


@router.delete(
    "/{plot_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Plot",
    responses={404: {"description": "Plot not found in this cooperative"}},
)
async def delete_plot(cooperative_id: int, plot_id: int, service: PlotServiceDep) -> None:
    await service.delete(cooperative_id, plot_id)
