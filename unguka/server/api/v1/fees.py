"""
API endpoints for fee types and member fees.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, status

from unguka.core.models.domain.enums import ActivityStatus, FeeStatus
from unguka.core.models.io.fees import (
    FeeAssign,
    FeeAssignResult,
    FeePaymentCreate,
    FeeRead,
    FeeTypeCreate,
    FeeTypeRead,
    FeeTypeUpdate,
    FeeUpdate,
)
from unguka.server.services.deps import FeeServiceDep, FeeTypeServiceDep

types_router = APIRouter(tags=["fee-types"])
router = APIRouter(tags=["fees"])


@types_router.post(
    "",
    response_model=FeeTypeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Fee Type",
    description="Define a fee charged to members, once or per season.",
    responses={
        201: {"description": "Fee type created"},
        409: {"description": "Fee type name already used"},
    },
)
async def create_fee_type(cooperative_id: int, data: FeeTypeCreate, service: FeeTypeServiceDep) -> FeeTypeRead:
    """
    Create a fee type.

    When the type is active and `auto_apply_on_create` is set, it is assigned
    to every member right away: season-less types immediately, per-season
    types for the active season when there is one.
    """
    return FeeTypeRead.model_validate(await service.create(cooperative_id, data))


@types_router.get("", response_model=list[FeeTypeRead], summary="List Fee Types")
async def list_fee_types(
    cooperative_id: int, service: FeeTypeServiceDep, status: Optional[ActivityStatus] = None
) -> list[FeeTypeRead]:
    return [FeeTypeRead.model_validate(item) for item in await service.list(cooperative_id, status=status)]


@types_router.get(
    "/{fee_type_id}",
    response_model=FeeTypeRead,
    summary="Get Fee Type",
    responses={404: {"description": "Fee type not found in this cooperative"}},
)
async def get_fee_type(cooperative_id: int, fee_type_id: int, service: FeeTypeServiceDep) -> FeeTypeRead:
    return FeeTypeRead.model_validate(await service.get(cooperative_id, fee_type_id))


@types_router.patch(
    "/{fee_type_id}",
    response_model=FeeTypeRead,
    summary="Update Fee Type",
    responses={
        404: {"description": "Fee type not found in this cooperative"},
        409: {"description": "Fee type name already used"},
    },
)
async def update_fee_type(
    cooperative_id: int, fee_type_id: int, data: FeeTypeUpdate, service: FeeTypeServiceDep
) -> FeeTypeRead:
    return FeeTypeRead.model_validate(await service.update(cooperative_id, fee_type_id, data))


@types_router.delete(
    "/{fee_type_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Fee Type",
    description="Delete a fee type and every fee assigned from it.",
    responses={404: {"description": "Fee type not found in this cooperative"}},
)
async def delete_fee_type(cooperative_id: int, fee_type_id: int, service: FeeTypeServiceDep) -> None:
    await service.delete(cooperative_id, fee_type_id)


@types_router.post(
    "/{fee_type_id}/assign",
    response_model=FeeAssignResult,
    summary="Assign Fee Type",
    description="Create the fee of this type for every member who does not have it yet.",
    responses={
        400: {"description": "Inactive type, or season missing for a per-season type"},
        404: {"description": "Fee type or season not found in this cooperative"},
    },
)
async def assign_fee_type(
    cooperative_id: int, fee_type_id: int, data: FeeAssign, service: FeeTypeServiceDep
) -> FeeAssignResult:
    return await service.assign(cooperative_id, fee_type_id, data.season_id)


@router.post(
    "/payments",
    response_model=FeeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Fee Payment",
    description="Record a fee paid in cash by a member. The fee is created when missing.",
    responses={
        400: {"description": "Fee already paid, or season missing for a per-season type"},
        404: {"description": "Member, fee type or season not found in this cooperative"},
    },
)
async def record_fee_payment(cooperative_id: int, data: FeePaymentCreate, service: FeeServiceDep) -> FeeRead:
    """
    Record a fee payment.

    Only what is still owed is applied; the applied amount is credited to
    the cooperative cash balance.
    """
    return FeeRead.model_validate(await service.record_payment(cooperative_id, data))


@router.get("", response_model=list[FeeRead], summary="List Fees")
async def list_fees(
    cooperative_id: int,
    service: FeeServiceDep,
    user_id: Optional[int] = None,
    season_id: Optional[int] = None,
    status: Optional[FeeStatus] = None,
) -> list[FeeRead]:
    fees = await service.list(cooperative_id, user_id=user_id, season_id=season_id, status=status)
    return [FeeRead.model_validate(fee) for fee in fees]


@router.get(
    "/{fee_id}",
    response_model=FeeRead,
    summary="Get Fee",
    responses={404: {"description": "Fee not found in this cooperative"}},
)
async def get_fee(cooperative_id: int, fee_id: int, service: FeeServiceDep) -> FeeRead:
    return FeeRead.model_validate(await service.get(cooperative_id, fee_id))


@router.patch(
    "/{fee_id}",
    response_model=FeeRead,
    summary="Correct Fee",
    description="Correct the owed or paid amount of a fee. The status is derived again.",
    responses={
        400: {"description": "Paid amount above the owed amount"},
        404: {"description": "Fee not found in this cooperative"},
    },
)
async def update_fee(cooperative_id: int, fee_id: int, data: FeeUpdate, service: FeeServiceDep) -> FeeRead:
    return FeeRead.model_validate(await service.update(cooperative_id, fee_id, data))


@router.delete(
    "/{fee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Fee",
    responses={404: {"description": "Fee not found in this cooperative"}},
)
async def delete_fee(cooperative_id: int, fee_id: int, service: FeeServiceDep) -> None:
    await service.delete(cooperative_id, fee_id)
