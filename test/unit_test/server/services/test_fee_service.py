"""Unit tests for fee types, fee assignment and fee payments."""

from __future__ import annotations

import pytest

from unguka.core.errors import BusinessRuleError, ConflictError
from unguka.core.models.domain.enums import ActivityStatus, FeeStatus, UserRole
from unguka.core.models.io.fees import FeePaymentCreate, FeeTypeCreate, FeeTypeUpdate, FeeUpdate
from unguka.server.services.fees import FeeService, FeeTypeService
from unguka.server.services.ledgers import CashLedger


class TestFeeTypeCreate:
    async def test_season_less_type_applied_to_members_only(self, session, cooperative, member, make_user):
        await make_user(role=UserRole.MANAGER)

        fee_type = await FeeTypeService(session).create(
            cooperative.id, FeeTypeCreate(name="Membership", amount=10000, is_per_season=False)
        )

        fees = await FeeService(session).list(cooperative.id)
        assert [(fee.user_id, fee.season_id, fee.fee_type_id) for fee in fees] == [(member.id, None, fee_type.id)]
        assert fees[0].status == FeeStatus.UNPAID.value

    async def test_per_season_type_uses_active_season(self, session, cooperative, season, member):
        await FeeTypeService(session).create(cooperative.id, FeeTypeCreate(name="Season fee", amount=2000))

        fees = await FeeService(session).list(cooperative.id)
        assert [fee.season_id for fee in fees] == [season.id]

    async def test_per_season_type_without_active_season_assigns_nothing(self, session, cooperative, member):
        await FeeTypeService(session).create(cooperative.id, FeeTypeCreate(name="Season fee", amount=2000))

        assert await FeeService(session).list(cooperative.id) == []

    async def test_inactive_or_manual_types_assign_nothing(self, session, cooperative, member):
        service = FeeTypeService(session)
        await service.create(
            cooperative.id,
            FeeTypeCreate(name="Dormant", amount=100, is_per_season=False, status=ActivityStatus.INACTIVE),
        )
        await service.create(
            cooperative.id, FeeTypeCreate(name="Manual", amount=100, is_per_season=False, auto_apply_on_create=False)
        )

        assert await FeeService(session).list(cooperative.id) == []

    async def test_duplicate_name_conflicts(self, session, cooperative):
        service = FeeTypeService(session)
        await service.create(cooperative.id, FeeTypeCreate(name="Membership", amount=100, is_per_season=False))

        with pytest.raises(ConflictError):
            await service.create(cooperative.id, FeeTypeCreate(name="Membership", amount=200, is_per_season=False))


class TestFeeTypeAssign:
    async def test_assign_is_idempotent(self, session, cooperative, season, member, make_user):
        service = FeeTypeService(session)
        fee_type = await service.create(
            cooperative.id, FeeTypeCreate(name="Season fee", amount=2000, auto_apply_on_create=False)
        )

        first = await service.assign(cooperative.id, fee_type.id, season.id)
        await make_user()
        second = await service.assign(cooperative.id, fee_type.id, season.id)

        assert first.created == 1
        assert second.created == 1
        assert len(await FeeService(session).list(cooperative.id)) == 2

    async def test_per_season_assign_requires_season(self, session, cooperative, member):
        service = FeeTypeService(session)
        fee_type = await service.create(cooperative.id, FeeTypeCreate(name="Season fee", amount=2000))
        fee_type_id = fee_type.id

        with pytest.raises(BusinessRuleError, match="season is required"):
            await service.assign(cooperative.id, fee_type_id)

    async def test_season_less_assign_ignores_season(self, session, cooperative, season, member):
        service = FeeTypeService(session)
        fee_type = await service.create(
            cooperative.id,
            FeeTypeCreate(name="Membership", amount=2000, is_per_season=False, auto_apply_on_create=False),
        )

        result = await service.assign(cooperative.id, fee_type.id, season.id)

        assert result.season_id is None
        assert result.created == 1

    async def test_inactive_type_cannot_be_assigned(self, session, cooperative, member):
        service = FeeTypeService(session)
        fee_type = await service.create(cooperative.id, FeeTypeCreate(name="Membership", amount=2000, is_per_season=False))
        fee_type_id = fee_type.id
        await service.update(cooperative.id, fee_type_id, FeeTypeUpdate(status=ActivityStatus.INACTIVE))

        with pytest.raises(BusinessRuleError, match="inactive"):
            await service.assign(cooperative.id, fee_type_id)

    async def test_delete_type_removes_its_fees(self, session, cooperative, member):
        service = FeeTypeService(session)
        fee_type = await service.create(cooperative.id, FeeTypeCreate(name="Membership", amount=2000, is_per_season=False))

        await service.delete(cooperative.id, fee_type.id)

        assert await service.list(cooperative.id) == []
        assert await FeeService(session).list(cooperative.id) == []


class TestFeePayments:
    @pytest.fixture
    async def membership(self, session, cooperative, member):
        return await FeeTypeService(session).create(
            cooperative.id, FeeTypeCreate(name="Membership", amount=5000, is_per_season=False)
        )

    async def test_partial_then_full_payment(self, session, cooperative, member, membership):
        service = FeeService(session)

        fee = await service.record_payment(
            cooperative.id, FeePaymentCreate(user_id=member.id, fee_type_id=membership.id, amount=2000)
        )
        assert fee.status == FeeStatus.PARTIAL.value
        assert fee.remaining_amount == 3000.0

        fee = await service.record_payment(
            cooperative.id, FeePaymentCreate(user_id=member.id, fee_type_id=membership.id, amount=4000)
        )
        assert fee.status == FeeStatus.PAID.value
        assert fee.amount_paid == 5000.0
        assert fee.paid_at is not None
        assert await CashLedger(service.repos).balance(cooperative.id) == 5000.0

    async def test_paying_a_paid_fee_is_rejected(self, session, cooperative, member, membership):
        service = FeeService(session)
        data = FeePaymentCreate(user_id=member.id, fee_type_id=membership.id, amount=5000)
        await service.record_payment(cooperative.id, data)

        with pytest.raises(BusinessRuleError, match="already paid"):
            await service.record_payment(cooperative.id, data)

    async def test_payment_creates_missing_fee(self, session, cooperative, season, member):
        fee_type = await FeeTypeService(session).create(
            cooperative.id, FeeTypeCreate(name="Harvest levy", amount=1000, auto_apply_on_create=False)
        )

        fee = await FeeService(session).record_payment(
            cooperative.id, FeePaymentCreate(user_id=member.id, fee_type_id=fee_type.id, season_id=season.id, amount=1000)
        )

        assert fee.season_id == season.id
        assert fee.status == FeeStatus.PAID.value

    async def test_update_rejects_paid_above_owed(self, session, cooperative, member, membership):
        service = FeeService(session)
        fee = (await service.list(cooperative.id))[0]

        with pytest.raises(BusinessRuleError):
            await service.update(cooperative.id, fee.id, FeeUpdate(amount_paid=6000))

        updated = await service.update(cooperative.id, fee.id, FeeUpdate(amount_owed=4000, amount_paid=4000))
        assert updated.status == FeeStatus.PAID.value
