"""Unit tests for member loans and repayments."""

from __future__ import annotations

import pytest

from unguka.core.errors import BusinessRuleError, NotFoundError
from unguka.core.models.domain.enums import LoanStatus
from unguka.core.models.io.loans import LoanCreate, LoanUpdate
from unguka.server.services.ledgers import CashLedger
from unguka.server.services.loans import LoanService


class TestLoanService:
    async def test_interest_added_once(self, session, member, season):
        loan = await LoanService(session).create(
            member.cooperative_id, LoanCreate(user_id=member.id, season_id=season.id, principal=10000, interest=5)
        )

        assert loan.principal == 10000.0
        assert loan.amount_owed == 10500.0
        assert loan.status == LoanStatus.PENDING.value

    async def test_unknown_season_rejected(self, session, member):
        with pytest.raises(NotFoundError, match="Season 42"):
            await LoanService(session).create(member.cooperative_id, LoanCreate(user_id=member.id, season_id=42, principal=1))

    async def test_repayments_until_repaid(self, session, member):
        coop_id = member.cooperative_id
        service = LoanService(session)
        loan = await service.create(coop_id, LoanCreate(user_id=member.id, principal=3000))

        await service.repay(coop_id, loan.id, 1000)
        assert loan.amount_owed == 2000.0
        assert loan.status == LoanStatus.PENDING.value

        await service.repay(coop_id, loan.id, 5000)
        assert loan.amount_owed == 0.0
        assert loan.status == LoanStatus.REPAID.value

        transactions = await service.list_transactions(coop_id, loan_id=loan.id)
        assert sorted(t.amount_paid for t in transactions) == [1000.0, 2000.0]
        assert await CashLedger(service.repos).balance(coop_id) == 0.0

        with pytest.raises(BusinessRuleError, match="already repaid"):
            await service.repay(coop_id, loan.id, 1)

    async def test_transactions_of_other_member_are_hidden(self, session, member, make_user):
        coop_id = member.cooperative_id
        other = await make_user()
        service = LoanService(session)
        loan = await service.create(coop_id, LoanCreate(user_id=member.id, principal=3000))
        await service.repay(coop_id, loan.id, 1000)

        assert await service.list_transactions(coop_id, loan_id=loan.id, user_id=other.id) == []
        assert len(await service.list_transactions(coop_id, user_id=member.id)) == 1
        assert len(await service.list_transactions(coop_id)) == 1

    async def test_update_and_delete(self, session, member, make_user):
        coop_id = member.cooperative_id
        other = await make_user()
        service = LoanService(session)
        loan = await service.create(coop_id, LoanCreate(user_id=member.id, principal=3000))
        await service.repay(coop_id, loan.id, 1000)

        updated = await service.update(coop_id, loan.id, LoanUpdate(user_id=other.id))
        assert updated.user_id == other.id

        await service.delete(coop_id, loan.id)
        assert await service.list(coop_id) == []
        assert await service.list_transactions(coop_id) == []
