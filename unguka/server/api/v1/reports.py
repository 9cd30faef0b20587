"""
API endpoints for JSON reports.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter

from unguka.core.models.io.reports import (
    ManagerReport,
    MemberProductionPrediction,
    MemberReport,
    ProductionPrediction,
)
from unguka.server.services.deps import ReportServiceDep

router = APIRouter(tags=["reports"])


@router.get(
    "/manager",
    response_model=ManagerReport,
    summary="Manager Report",
    description="Cooperative-wide totals, per-season analysis and a production forecast.",
    responses={404: {"description": "Cooperative or season not found"}},
)
async def manager_report(
    cooperative_id: int, service: ReportServiceDep, season_id: Optional[int] = None
) -> ManagerReport:
    """
    Manager report.

    - **season_id**: restrict season-scoped totals to one season.
    """
    return await service.manager_report(cooperative_id, season_id=season_id)


@router.get(
    "/members/{user_id}",
    response_model=MemberReport,
    summary="Member Report",
    description="Totals, per-season analysis and a production forecast for one member.",
    responses={404: {"description": "Cooperative, member or season not found"}},
)
async def member_report(
    cooperative_id: int, user_id: int, service: ReportServiceDep, season_id: Optional[int] = None
) -> MemberReport:
    return await service.member_report(cooperative_id, user_id, season_id=season_id)


@router.get(
    "/predictions",
    response_model=ProductionPrediction,
    summary="Production Forecast",
    responses={404: {"description": "Cooperative not found"}},
)
async def production_prediction(
    cooperative_id: int, service: ReportServiceDep, season_id: Optional[int] = None
) -> ProductionPrediction:
    await service.require_cooperative(cooperative_id)
    return await service.cooperative_prediction(cooperative_id, season_id=season_id)


@router.get(
    "/predictions/members/{user_id}",
    response_model=MemberProductionPrediction,
    summary="Member Production Forecast",
    responses={404: {"description": "Member not found in this cooperative"}},
)
async def member_production_prediction(
    cooperative_id: int, user_id: int, service: ReportServiceDep, season_id: Optional[int] = None
) -> MemberProductionPrediction:
    await service.require_user(cooperative_id, user_id)
    return await service.member_prediction(cooperative_id, user_id, season_id=season_id)
