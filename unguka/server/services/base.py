"""
Shared plumbing for the service layer.

Services own one ``AsyncSession`` per request. Multi-step operations run
inside ``unit_of_work`` so every staged write is committed together, or
rolled back together when a business rule fails halfway.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from unguka.core.database.entities import Cooperative, Product, Season, User
from unguka.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from unguka.core.database.repositories.base import TenantRepository
from unguka.core.errors import NotFoundError
from unguka.core.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def money(value: float) -> float:
    """Round an amount to cents."""
    return round(float(value) + 0.0, 2)


class BaseService:
    """Base class giving services a repository bundle on a shared session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repos: SqlRepoBundle = build_sql_repos_from_session(session=session)

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[SqlRepoBundle]:
        """Commit staged writes on success, roll them back on any error."""
        try:
            yield self.repos
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def require_cooperative(self, cooperative_id: int) -> Cooperative:
        cooperative = await self.repos.cooperatives.get_by_id(cooperative_id)
        if cooperative is None:
            raise NotFoundError("Cooperative", cooperative_id)
        return cooperative

    async def require(self, repo: TenantRepository[T], resource: str, cooperative_id: int, entity_id: int) -> T:
        """Fetch a row of the cooperative or raise ``NotFoundError``."""
        entity = await repo.get_in_cooperative(cooperative_id, entity_id)
        if entity is None:
            raise NotFoundError(resource, entity_id)
        return entity

    async def require_user(self, cooperative_id: int, user_id: int) -> User:
        return await self.require(self.repos.users, "User", cooperative_id, user_id)

    async def require_season(self, cooperative_id: int, season_id: int) -> Season:
        return await self.require(self.repos.seasons, "Season", cooperative_id, season_id)

    async def optional_season(self, cooperative_id: int, season_id: Optional[int]) -> Optional[Season]:
        if season_id is None:
            return None
        return await self.require_season(cooperative_id, season_id)

    async def require_product(self, cooperative_id: int, product_id: int) -> Product:
        return await self.require(self.repos.products, "Product", cooperative_id, product_id)
