"""Unit tests for entity helpers.

Covers the derived fee status and the season label, which services and
reports rely on instead of storing redundant columns.
"""

from __future__ import annotations

from unguka.core.database.entities import Fee, Season
from unguka.core.models.domain.enums import FeeStatus


def _fee(owed: float, paid: float) -> Fee:
    return Fee(cooperative_id=1, user_id=1, season_id=1, fee_type_id=1, amount_owed=owed, amount_paid=paid)


class TestFeeStatus:
    """Tests for Fee.refresh_status."""

    def test_unpaid_when_nothing_paid(self):
        fee = _fee(5000.0, 0.0)
        fee.refresh_status()

        assert fee.status == FeeStatus.UNPAID.value
        assert fee.paid_at is None
        assert fee.remaining_amount == 5000.0

    def test_partial_when_some_paid(self):
        fee = _fee(5000.0, 1500.0)
        fee.refresh_status()

        assert fee.status == FeeStatus.PARTIAL.value
        assert fee.paid_at is None
        assert fee.remaining_amount == 3500.0

    def test_paid_sets_paid_at_once(self):
        fee = _fee(5000.0, 5000.0)
        fee.refresh_status()
        first_paid_at = fee.paid_at

        fee.refresh_status()

        assert fee.status == FeeStatus.PAID.value
        assert first_paid_at is not None
        assert fee.paid_at == first_paid_at

    def test_zero_amount_fee_is_paid(self):
        fee = _fee(0.0, 0.0)
        fee.refresh_status()

        assert fee.status == FeeStatus.PAID.value

    def test_lowering_paid_amount_clears_paid_at(self):
        fee = _fee(5000.0, 5000.0)
        fee.refresh_status()

        fee.amount_paid = 1000.0
        fee.refresh_status()

        assert fee.status == FeeStatus.PARTIAL.value
        assert fee.paid_at is None


def test_season_label():
    season = Season(cooperative_id=1, name="Season-B", year=2027)

    assert season.label == "Season-B 2027"
    assert season.status == "inactive"
