"""
API endpoints for cooperative announcements.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from unguka.core.models.io.announcements import AnnouncementCreate, AnnouncementRead, AnnouncementUpdate
from unguka.server.services.deps import AnnouncementServiceDep

router = APIRouter(tags=["announcements"])


@router.post(
    "",
    response_model=AnnouncementRead,
    status_code=status.HTTP_201_CREATED,
    summary="Post Announcement",
    responses={404: {"description": "Author not found in this cooperative"}},
)
async def create_announcement(
    cooperative_id: int, data: AnnouncementCreate, service: AnnouncementServiceDep
) -> AnnouncementRead:
    return AnnouncementRead.model_validate(await service.create(cooperative_id, data))


@router.get("", response_model=list[AnnouncementRead], summary="List Announcements")
async def list_announcements(cooperative_id: int, service: AnnouncementServiceDep) -> list[AnnouncementRead]:
    return [AnnouncementRead.model_validate(item) for item in await service.list(cooperative_id)]


@router.get(
    "/{announcement_id}",
    response_model=AnnouncementRead,
    summary="Get Announcement",
    responses={404: {"description": "Announcement not found in this cooperative"}},
)
async def get_announcement(
    cooperative_id: int, announcement_id: int, service: AnnouncementServiceDep
) -> AnnouncementRead:
    return AnnouncementRead.model_validate(await service.get(cooperative_id, announcement_id))


@router.patch(
    "/{announcement_id}",
    response_model=AnnouncementRead,
    summary="Edit Announcement",
    responses={404: {"description": "Announcement not found in this cooperative"}},
)
async def update_announcement(
    cooperative_id: int, announcement_id: int, data: AnnouncementUpdate, service: AnnouncementServiceDep
) -> AnnouncementRead:
    return AnnouncementRead.model_validate(await service.update(cooperative_id, announcement_id, data))


@router.delete(
    "/{announcement_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Announcement",
    responses={404: {"description": "Announcement not found in this cooperative"}},
)
async def delete_announcement(cooperative_id: int, announcement_id: int, service: AnnouncementServiceDep) -> None:
    await service.delete(cooperative_id, announcement_id)
