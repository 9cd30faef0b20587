"""Unit tests for the domain error hierarchy."""

import pytest

from unguka.core.errors import (
    BusinessRuleError,
    ConflictError,
    InsufficientFundsError,
    InsufficientStockError,
    NotFoundError,
    UngukaError,
)


class TestStatusCodes:
    @pytest.mark.parametrize(
        "error,status_code",
        [
            (UngukaError("bad"), 400),
            (NotFoundError("Member", 7), 404),
            (ConflictError("taken"), 409),
            (BusinessRuleError("nope"), 400),
            (InsufficientStockError(2, 5), 400),
            (InsufficientFundsError(10.0, 20.0), 400),
        ],
    )
    def test_error_carries_status_code(self, error, status_code):
        assert error.status_code == status_code
        assert isinstance(error, UngukaError)


class TestMessages:
    def test_not_found_with_identifier(self):
        error = NotFoundError("Season", 3)

        assert error.message == "Season 3 not found"
        assert error.resource == "Season"
        assert error.resource_id == 3

    def test_not_found_without_identifier(self):
        assert NotFoundError("Active season").message == "Active season not found"

    def test_insufficient_stock_keeps_quantities(self):
        error = InsufficientStockError(available=4, requested=10)

        assert error.available == 4
        assert error.requested == 10
        assert "4 available" in error.message
        assert isinstance(error, BusinessRuleError)

    def test_insufficient_funds_formats_amounts(self):
        error = InsufficientFundsError(available=1500.5, requested=2000)

        assert error.message == "Insufficient cash: 1500.50 available, 2000.00 requested"
        assert str(error) == error.message
