"""
Sale repository.
"""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.sales import Sale
from .base import TenantRepository


class SaleRepository(TenantRepository[Sale]):
    """Repository for sales to outside buyers."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Sale)

    def default_order(self) -> Sequence[Any]:
        return (Sale.created_at.desc(), Sale.id.desc())
