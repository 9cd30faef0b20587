"""
Plots farmed by members.
"""

from __future__ import annotations

from typing import List, Optional

from unguka.core.database.entities import Plot
from unguka.core.errors import ConflictError
from unguka.core.logging_config import get_logger
from unguka.core.models.io.plots import PlotCreate, PlotUpdate

from .base import BaseService

logger = get_logger(__name__)


class PlotService(BaseService):
    """Service for member land parcels."""

    async def _check_upi(self, upi: str, exclude_id: Optional[int] = None) -> None:
        existing = await self.repos.plots.get_by_upi(upi)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError(f"A plot with UPI {upi} is already registered")

    async def create(self, cooperative_id: int, data: PlotCreate) -> Plot:
        await self.require_user(cooperative_id, data.user_id)
        await self._check_upi(data.upi)
        plot = await self.repos.plots.create(
            Plot(cooperative_id=cooperative_id, user_id=data.user_id, size=data.size, upi=data.upi)
        )
        logger.info(f"Registered plot {plot.upi} for user {plot.user_id}")
        return plot

    async def list(self, cooperative_id: int, user_id: Optional[int] = None) -> List[Plot]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.plots.list_for_cooperative(cooperative_id, user_id=user_id)

    async def get(self, cooperative_id: int, plot_id: int) -> Plot:
        return await self.require(self.repos.plots, "Plot", cooperative_id, plot_id)

    async def update(self, cooperative_id: int, plot_id: int, data: PlotUpdate) -> Plot:
        plot = await self.get(cooperative_id, plot_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if "user_id" in update_data:
            await self.require_user(cooperative_id, update_data["user_id"])
        if "upi" in update_data:
            await self._check_upi(update_data["upi"], exclude_id=plot.id)
        for key, value in update_data.items():
            setattr(plot, key, value)
        return await self.repos.plots.update(plot)

    async def delete(self, cooperative_id: int, plot_id: int) -> None:
        plot = await self.get(cooperative_id, plot_id)
        await self.repos.plots.delete(plot.id)
