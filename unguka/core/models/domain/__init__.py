"""Domain enums and pure domain helpers shared across the backend."""

from .enums import (
    ActivityStatus,
    FeeStatus,
    LoanStatus,
    PaymentStatus,
    PaymentType,
    PredictionConfidence,
    ProductionPaymentStatus,
    SaleStatus,
    SeasonName,
    UserRole,
)
from .season_calendar import SeasonRef, current_season, next_season, previous_season

__all__ = [
    "ActivityStatus",
    "FeeStatus",
    "LoanStatus",
    "PaymentStatus",
    "PaymentType",
    "PredictionConfidence",
    "ProductionPaymentStatus",
    "SaleStatus",
    "SeasonName",
    "SeasonRef",
    "UserRole",
    "current_season",
    "next_season",
    "previous_season",
]
