"""Seed fixtures shared by the repository, service and API tests.

Rows are written straight through the repositories so each test starts from
a small cooperative: one active season, one priced product and one member.
"""

from __future__ import annotations

import itertools
from typing import Awaitable, Callable

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from unguka.core.database.entities import Cooperative, Product, Season, User
from unguka.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from unguka.core.models.domain.enums import ActivityStatus, SeasonName, UserRole


@pytest.fixture
def repos(session: AsyncSession) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


@pytest_asyncio.fixture
async def cooperative(repos: SqlRepoBundle) -> Cooperative:
    return await repos.cooperatives.create(
        Cooperative(
            name="Abahuzamugambi",
            registration_number="CF00123",
            district="Huye",
            sector="Maraba",
            contact_email="info@abahuzamugambi.rw",
            contact_phone="+250788000000",
        )
    )


@pytest_asyncio.fixture
async def season(repos: SqlRepoBundle, cooperative: Cooperative) -> Season:
    return await repos.seasons.create(
        Season(
            cooperative_id=cooperative.id,
            name=SeasonName.SEASON_A.value,
            year=2027,
            status=ActivityStatus.ACTIVE.value,
        )
    )


@pytest_asyncio.fixture
async def product(repos: SqlRepoBundle, cooperative: Cooperative) -> Product:
    return await repos.products.create(Product(cooperative_id=cooperative.id, product_name="maize", unit_price=500.0))


@pytest.fixture
def make_user(repos: SqlRepoBundle, cooperative: Cooperative) -> Callable[..., Awaitable[User]]:
    """Factory registering users with distinct phone numbers and national IDs."""
    counter = itertools.count(1)

    async def _make(role: UserRole = UserRole.MEMBER, names: str = "") -> User:
        n = next(counter)
        return await repos.users.create(
            User(
                cooperative_id=cooperative.id,
                names=names or f"Member {n}",
                phone_number=f"07880000{n:02d}",
                national_id=f"{1199080000000000 + n}",
                role=role.value,
            )
        )

    return _make


@pytest_asyncio.fixture
async def member(make_user) -> User:
    return await make_user(names="Uwase Aline")
