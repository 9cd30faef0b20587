"""
Cooperative management: registration, updates and cascading removal.
"""

from __future__ import annotations

from typing import List, Optional

from unguka.core.database.entities import Cooperative
from unguka.core.errors import ConflictError
from unguka.core.logging_config import get_logger
from unguka.core.models.io.cooperatives import CooperativeCreate, CooperativeUpdate

from .base import BaseService
from .cascade import delete_cooperative_dependents

logger = get_logger(__name__)

# Columns a PATCH may explicitly clear
NULLABLE_FIELDS = {"contact_email"}


class CooperativeService(BaseService):
    """Service for cooperative records."""

    async def _check_unique(
        self, name: Optional[str], registration_number: Optional[str], exclude_id: Optional[int] = None
    ) -> None:
        if name is not None:
            existing = await self.repos.cooperatives.get_by_name(name)
            if existing is not None and existing.id != exclude_id:
                raise ConflictError(f"Cooperative name '{name}' is already registered")
        if registration_number is not None:
            existing = await self.repos.cooperatives.get_by_registration_number(registration_number)
            if existing is not None and existing.id != exclude_id:
                raise ConflictError(f"Registration number '{registration_number}' is already registered")

    async def create(self, data: CooperativeCreate) -> Cooperative:
        await self._check_unique(data.name, data.registration_number)
        cooperative = await self.repos.cooperatives.create(Cooperative(**data.model_dump()))
        logger.info(f"Registered cooperative {cooperative.id} ({cooperative.name})")
        return cooperative

    async def list(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Cooperative]:
        return await self.repos.cooperatives.list(limit=limit, offset=offset)

    async def get(self, cooperative_id: int) -> Cooperative:
        return await self.require_cooperative(cooperative_id)

    async def update(self, cooperative_id: int, data: CooperativeUpdate) -> Cooperative:
        cooperative = await self.require_cooperative(cooperative_id)
        update_data = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }
        await self._check_unique(
            update_data.get("name"), update_data.get("registration_number"), exclude_id=cooperative.id
        )
        for key, value in update_data.items():
            setattr(cooperative, key, value)
        return await self.repos.cooperatives.update(cooperative)

    async def delete(self, cooperative_id: int) -> None:
        async with self.unit_of_work() as repos:
            cooperative = await self.require_cooperative(cooperative_id)
            await delete_cooperative_dependents(repos, cooperative_id)
            await repos.cooperatives.remove(cooperative)
        logger.info(f"Deleted cooperative {cooperative_id}")
