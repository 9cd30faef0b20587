"""Enumerations shared by entities, I/O schemas and services."""

from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """Role of a person inside a cooperative."""

    MEMBER = "member"
    ACCOUNTANT = "accountant"
    MANAGER = "manager"


class SeasonName(str, Enum):
    """The two agricultural seasons of a year."""

    SEASON_A = "Season-A"
    SEASON_B = "Season-B"


class ActivityStatus(str, Enum):
    """Active flag used by seasons and fee types."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class PaymentType(str, Enum):
    """How a purchase input or a sale is settled."""

    CASH = "cash"
    LOAN = "loan"


class ProductionPaymentStatus(str, Enum):
    """Whether a member has been fully paid for a production."""

    PENDING = "pending"
    PAID = "paid"


class SaleStatus(str, Enum):
    """Settlement state of a sale."""

    PAID = "paid"
    UNPAID = "unpaid"


class LoanStatus(str, Enum):
    """Lifecycle of a loan: pending -> repaid."""

    PENDING = "pending"
    REPAID = "repaid"


class FeeStatus(str, Enum):
    """Lifecycle of a fee: unpaid -> partial -> paid."""

    UNPAID = "unpaid"
    PARTIAL = "partial"
    PAID = "paid"


class PaymentStatus(str, Enum):
    """Lifecycle of a member payment: pending -> partial -> paid."""

    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"


class PredictionConfidence(str, Enum):
    """Confidence label attached to yield predictions."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    VERY_LOW = "Very Low"
