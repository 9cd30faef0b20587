"""
Fee types and the fees members owe for them.

A fee type is either charged once (season-less) or once per season. Fees
are assigned to every member of the cooperative; assigning twice never
creates a duplicate. Fee payments made in cash are credited to the
cooperative cash balance.
"""

from __future__ import annotations

from typing import List, Optional

from unguka.core.database.entities import Fee, FeeType
from unguka.core.database.repositories import SqlRepoBundle
from unguka.core.errors import BusinessRuleError, ConflictError
from unguka.core.logging_config import get_logger
from unguka.core.models.domain.enums import ActivityStatus, FeeStatus, UserRole
from unguka.core.models.io.fees import (
    FeeAssignResult,
    FeePaymentCreate,
    FeeTypeCreate,
    FeeTypeUpdate,
    FeeUpdate,
)

from .base import BaseService, money
from .cascade import delete_fee_type_dependents
from .ledgers import CashLedger

logger = get_logger(__name__)


async def assign_fee_type(repos: SqlRepoBundle, fee_type: FeeType, season_id: Optional[int]) -> int:
    """Create the missing fees of a fee type for every member.

    Returns:
        Number of fees created
    """
    members = await repos.users.list_for_cooperative(fee_type.cooperative_id, role=UserRole.MEMBER.value)
    created = 0
    for member in members:
        if await repos.fees.find(fee_type.cooperative_id, member.id, fee_type.id, season_id) is not None:
            continue
        await repos.fees.stage(
            Fee(
                cooperative_id=fee_type.cooperative_id,
                user_id=member.id,
                season_id=season_id,
                fee_type_id=fee_type.id,
                amount_owed=fee_type.amount,
                amount_paid=0.0,
                status=FeeStatus.UNPAID.value,
            )
        )
        created += 1
    logger.info(f"Assigned fee type {fee_type.name} to {created} members")
    return created


class FeeTypeService(BaseService):
    """Service for fee types."""

    async def _check_unique(self, cooperative_id: int, name: str, exclude_id: Optional[int] = None) -> None:
        existing = await self.repos.fee_types.get_by_name(cooperative_id, name)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError(f"Fee type '{name}' already exists in this cooperative")

    async def create(self, cooperative_id: int, data: FeeTypeCreate) -> FeeType:
        async with self.unit_of_work() as repos:
            await self.require_cooperative(cooperative_id)
            await self._check_unique(cooperative_id, data.name)
            fee_type = await repos.fee_types.stage(
                FeeType(
                    cooperative_id=cooperative_id,
                    name=data.name,
                    amount=money(data.amount),
                    description=data.description,
                    status=data.status.value,
                    is_per_season=data.is_per_season,
                    auto_apply_on_create=data.auto_apply_on_create,
                )
            )
            if fee_type.auto_apply_on_create and fee_type.status == ActivityStatus.ACTIVE.value:
                if not fee_type.is_per_season:
                    await assign_fee_type(repos, fee_type, None)
                else:
                    active = await repos.seasons.get_active(cooperative_id)
                    if active is not None:
                        await assign_fee_type(repos, fee_type, active.id)
        logger.info(f"Created fee type {fee_type.name} in cooperative {cooperative_id}")
        return fee_type

    async def list(self, cooperative_id: int, status: Optional[ActivityStatus] = None) -> List[FeeType]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.fee_types.list_for_cooperative(
            cooperative_id, status=status.value if status else None
        )

    async def get(self, cooperative_id: int, fee_type_id: int) -> FeeType:
        return await self.require(self.repos.fee_types, "Fee type", cooperative_id, fee_type_id)

    async def update(self, cooperative_id: int, fee_type_id: int, data: FeeTypeUpdate) -> FeeType:
        fee_type = await self.get(cooperative_id, fee_type_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in update_data:
            await self._check_unique(cooperative_id, update_data["name"], exclude_id=fee_type.id)
        if data.status is not None:
            update_data["status"] = data.status.value
        for key, value in update_data.items():
            setattr(fee_type, key, value)
        return await self.repos.fee_types.update(fee_type)

    async def delete(self, cooperative_id: int, fee_type_id: int) -> None:
        async with self.unit_of_work() as repos:
            fee_type = await self.get(cooperative_id, fee_type_id)
            await delete_fee_type_dependents(repos, fee_type.id)
            await repos.fee_types.remove(fee_type)
        logger.info(f"Deleted fee type {fee_type_id}")

    async def assign(self, cooperative_id: int, fee_type_id: int, season_id: Optional[int] = None) -> FeeAssignResult:
        async with self.unit_of_work() as repos:
            fee_type = await self.get(cooperative_id, fee_type_id)
            if fee_type.status != ActivityStatus.ACTIVE.value:
                raise BusinessRuleError(f"Fee type '{fee_type.name}' is inactive")
            if fee_type.is_per_season:
                if season_id is None:
                    raise BusinessRuleError(f"Fee type '{fee_type.name}' is charged per season, a season is required")
                await self.require_season(cooperative_id, season_id)
            else:
                season_id = None
            created = await assign_fee_type(repos, fee_type, season_id)
        return FeeAssignResult(fee_type_id=fee_type_id, season_id=season_id, created=created)


class FeeService(BaseService):
    """Service for the fees owed by members."""

    async def record_payment(self, cooperative_id: int, data: FeePaymentCreate) -> Fee:
        async with self.unit_of_work() as repos:
            await self.require_user(cooperative_id, data.user_id)
            fee_type = await self.require(repos.fee_types, "Fee type", cooperative_id, data.fee_type_id)
            season_id = data.season_id
            if fee_type.is_per_season:
                if season_id is None:
                    raise BusinessRuleError(f"Fee type '{fee_type.name}' is charged per season, a season is required")
                await self.require_season(cooperative_id, season_id)
            else:
                season_id = None

            fee = await repos.fees.find(cooperative_id, data.user_id, fee_type.id, season_id)
            if fee is None:
                fee = await repos.fees.stage(
                    Fee(
                        cooperative_id=cooperative_id,
                        user_id=data.user_id,
                        season_id=season_id,
                        fee_type_id=fee_type.id,
                        amount_owed=fee_type.amount,
                        amount_paid=0.0,
                    )
                )
            if fee.status == FeeStatus.PAID.value or fee.remaining_amount <= 0:
                raise BusinessRuleError(f"Fee {fee.id} is already paid")

            applied = money(min(data.amount, fee.remaining_amount))
            fee.amount_paid = money(fee.amount_paid + applied)
            fee.refresh_status()
            await repos.fees.stage(fee)
            await CashLedger(repos).credit(cooperative_id, applied, f"fee {fee.id} payment")
        logger.info(f"Recorded fee payment of {applied:.2f} on fee {fee.id}, status {fee.status}")
        return fee

    async def list(
        self,
        cooperative_id: int,
        user_id: Optional[int] = None,
        season_id: Optional[int] = None,
        status: Optional[FeeStatus] = None,
    ) -> List[Fee]:
        await self.require_cooperative(cooperative_id)
        return await self.repos.fees.list_for_cooperative(
            cooperative_id, user_id=user_id, season_id=season_id, status=status.value if status else None
        )

    async def get(self, cooperative_id: int, fee_id: int) -> Fee:
        return await self.require(self.repos.fees, "Fee", cooperative_id, fee_id)

    async def update(self, cooperative_id: int, fee_id: int, data: FeeUpdate) -> Fee:
        fee = await self.get(cooperative_id, fee_id)
        amount_owed = data.amount_owed if data.amount_owed is not None else fee.amount_owed
        amount_paid = data.amount_paid if data.amount_paid is not None else fee.amount_paid
        if amount_paid > amount_owed:
            raise BusinessRuleError("Amount paid cannot exceed the amount owed")
        fee.amount_owed = money(amount_owed)
        fee.amount_paid = money(amount_paid)
        fee.refresh_status()
        return await self.repos.fees.update(fee)

    async def delete(self, cooperative_id: int, fee_id: int) -> None:
        fee = await self.get(cooperative_id, fee_id)
        await self.repos.fees.delete(fee.id)
