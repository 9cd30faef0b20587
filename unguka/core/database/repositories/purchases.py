"""
Purchase input and purchase out repositories.
"""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.purchases import PurchaseInput, PurchaseOut
from .base import TenantRepository


class PurchaseInputRepository(TenantRepository[PurchaseInput]):
    """Repository for inputs sold to members."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PurchaseInput)

    def default_order(self) -> Sequence[Any]:
        return (PurchaseInput.created_at.desc(), PurchaseInput.id.desc())


class PurchaseOutRepository(TenantRepository[PurchaseOut]):
    """Repository for produce taken out of stock."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PurchaseOut)

    def default_order(self) -> Sequence[Any]:
        return (PurchaseOut.created_at.desc(), PurchaseOut.id.desc())
