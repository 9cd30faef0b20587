"""
API endpoints for managing cooperatives.

A cooperative is the tenant every other resource belongs to. Deleting one
removes everything recorded for it.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from unguka.core.models.io.cooperatives import CooperativeCreate, CooperativeRead, CooperativeUpdate
from unguka.server.services.deps import CooperativeServiceDep

router = APIRouter(tags=["cooperatives"])


@router.post(
    "",
    response_model=CooperativeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register Cooperative",
    description="Register a new cooperative. Names and registration numbers are unique.",
    response_description="The created cooperative with its generated ID.",
    responses={
        201: {"description": "Cooperative registered successfully"},
        409: {"description": "Name or registration number already registered"},
        422: {"description": "Invalid cooperative data"},
    },
)
async def create_cooperative(data: CooperativeCreate, service: CooperativeServiceDep) -> CooperativeRead:
    """
    Register a cooperative.

    - **name**: 3 to 50 characters, unique.
    - **registration_number**: `CF` followed by five digits, unique.
    - **district** / **sector**: location of the cooperative.
    - **contact_email** / **contact_phone**: how to reach the cooperative.
    """
    return CooperativeRead.model_validate(await service.create(data))


@router.get(
    "",
    response_model=list[CooperativeRead],
    summary="List Cooperatives",
    description="Retrieve registered cooperatives.",
)
async def list_cooperatives(
    service: CooperativeServiceDep,
    limit: Optional[int] = Query(default=None, ge=1, le=500),
    offset: Optional[int] = Query(default=None, ge=0),
) -> list[CooperativeRead]:
    return [CooperativeRead.model_validate(item) for item in await service.list(limit=limit, offset=offset)]


@router.get(
    "/{cooperative_id}",
    response_model=CooperativeRead,
    summary="Get Cooperative",
    responses={404: {"description": "Cooperative not found"}},
)
async def get_cooperative(cooperative_id: int, service: CooperativeServiceDep) -> CooperativeRead:
    return CooperativeRead.model_validate(await service.get(cooperative_id))


@router.patch(
    "/{cooperative_id}",
    response_model=CooperativeRead,
    summary="Update Cooperative",
    description="Partially update a cooperative. Uniqueness is checked again for changed fields.",
    responses={
        404: {"description": "Cooperative not found"},
        409: {"description": "Name or registration number already registered"},
    },
)
async def update_cooperative(
    cooperative_id: int, data: CooperativeUpdate, service: CooperativeServiceDep
) -> CooperativeRead:
    return CooperativeRead.model_validate(await service.update(cooperative_id, data))


@router.delete(
    "/{cooperative_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Cooperative",
    description="Permanently delete a cooperative together with all of its records.",
    responses={
        204: {"description": "Cooperative deleted successfully"},
        404: {"description": "Cooperative not found"},
    },
)
async def delete_cooperative(cooperative_id: int, service: CooperativeServiceDep) -> None:
    """
    Delete a cooperative.

    Members, seasons, products, stock, cash and every ledger of the
    cooperative are removed with it. This operation cannot be undone.
    """
    await service.delete(cooperative_id)
