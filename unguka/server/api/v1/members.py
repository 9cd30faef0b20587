"""
API endpoints for the members (users) of a cooperative.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from unguka.core.models.domain.enums import UserRole
from unguka.core.models.io.members import MemberCreate, MemberRead, MemberUpdate
from unguka.server.services.deps import MemberServiceDep

router = APIRouter(tags=["members"])


@router.post(
    "",
    response_model=MemberRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register Member",
    description="Register a user of the cooperative. The role defaults to member.",
    responses={
        201: {"description": "Member registered successfully"},
        404: {"description": "Cooperative not found"},
        409: {"description": "Phone number or national ID already registered"},
    },
)
async def register_member(cooperative_id: int, data: MemberCreate, service: MemberServiceDep) -> MemberRead:
    """
    Register a member.

    - **names**: full names, 3 to 50 characters.
    - **phone_number**: Rwandan mobile number, unique.
    - **national_id**: 16 digits, unique.
    - **role**: member, accountant or manager.
    """
    return MemberRead.model_validate(await service.register(cooperative_id, data))


@router.get(
    "",
    response_model=list[MemberRead],
    summary="List Members",
    description="Retrieve the users of a cooperative, optionally filtered by role.",
)
async def list_members(
    cooperative_id: int,
    service: MemberServiceDep,
    role: Optional[UserRole] = None,
    limit: Optional[int] = Query(default=None, ge=1, le=500),
    offset: Optional[int] = Query(default=None, ge=0),
) -> list[MemberRead]:
    users = await service.list(cooperative_id, role=role, limit=limit, offset=offset)
    return [MemberRead.model_validate(user) for user in users]


@router.get(
    "/{user_id}",
    response_model=MemberRead,
    summary="Get Member",
    responses={404: {"description": "Member not found in this cooperative"}},
)
async def get_member(cooperative_id: int, user_id: int, service: MemberServiceDep) -> MemberRead:
    return MemberRead.model_validate(await service.get(cooperative_id, user_id))


@router.patch(
    "/{user_id}",
    response_model=MemberRead,
    summary="Update Member",
    responses={
        404: {"description": "Member not found in this cooperative"},
        409: {"description": "Phone number or national ID already registered"},
    },
)
async def update_member(cooperative_id: int, user_id: int, data: MemberUpdate, service: MemberServiceDep) -> MemberRead:
    return MemberRead.model_validate(await service.update(cooperative_id, user_id, data))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Member",
    description="Delete a member with their plots, productions, purchases, loans, fees, payments and announcements.",
    responses={404: {"description": "Member not found in this cooperative"}},
)
async def delete_member(cooperative_id: int, user_id: int, service: MemberServiceDep) -> None:
    await service.delete(cooperative_id, user_id)
