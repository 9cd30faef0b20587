"""
Report I/O models.

Reports are read-only aggregates computed from the ledgers of a
cooperative or of one member.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .cooperatives import CooperativeRead
from .members import MemberRead
from .seasons import SeasonRead


class AmountTotals(BaseModel):
    """Count, quantity and value of a set of priced records."""

    count: int = 0
    total_quantity: float = 0.0
    total_value: float = 0.0


class FeeTotals(BaseModel):
    count: int = 0
    total_owed: float = 0.0
    total_paid: float = 0.0
    total_remaining: float = 0.0
    by_status: Dict[str, int] = Field(default_factory=dict)


class LoanTotals(BaseModel):
    count: int = 0
    total_principal: float = 0.0
    total_owed: float = 0.0
    by_status: Dict[str, int] = Field(default_factory=dict)


class PaymentTotals(BaseModel):
    count: int = 0
    total_gross: float = 0.0
    total_deductions: float = 0.0
    total_due: float = 0.0
    total_paid: float = 0.0
    total_remaining: float = 0.0
    by_status: Dict[str, int] = Field(default_factory=dict)


class SalesTotals(AmountTotals):
    paid_value: float = 0.0
    unpaid_value: float = 0.0


class StockTotals(BaseModel):
    products_in_stock: int = 0
    total_quantity: int = 0
    total_value: float = 0.0


class CooperativeSummary(BaseModel):
    """Head-count and ledger totals of a cooperative."""

    members: int
    managers: int
    accountants: int
    seasons: int
    products: int
    plots: int
    total_land_area: float
    cash_balance: float
    active_season: Optional[SeasonRead] = None
    fees: FeeTotals
    loans: LoanTotals
    payments: PaymentTotals
    productions: AmountTotals
    sales: SalesTotals
    purchase_inputs: AmountTotals
    purchase_outs: AmountTotals
    stock: StockTotals


class MemberSummary(BaseModel):
    """Ledger totals of one member."""

    plots: int
    total_land_area: float
    fees: FeeTotals
    loans: LoanTotals
    payments: PaymentTotals
    productions: AmountTotals
    purchase_inputs: AmountTotals


class SeasonAnalysis(BaseModel):
    """Activity recorded in one season."""

    season_id: int
    label: str
    status: str
    fees: FeeTotals
    loans: LoanTotals
    productions: AmountTotals
    purchase_inputs: AmountTotals
    purchase_outs: Optional[AmountTotals] = None
    sales: Optional[SalesTotals] = None
    payments: Optional[PaymentTotals] = None


class HistoricalYield(BaseModel):
    season_id: int
    label: str
    production: float
    land_area: float
    yield_per_are: float


class ProductionPrediction(BaseModel):
    """Next-season production forecast of a cooperative."""

    total_land_area: float
    total_production: float
    total_production_value: float
    current_yield_per_are: float
    historical_seasons: List[HistoricalYield]
    average_historical_yield: float
    growth_factor: float
    predicted_yield_per_are: float
    predicted_total_production: float
    method: str
    confidence: str
    assumptions: List[str]


class MemberProductionPrediction(BaseModel):
    """Next-season production forecast of one member."""

    land_area: float
    total_production: float
    total_production_value: float
    current_yield_per_are: float
    cooperative_average_yield: float
    historical_seasons_count: int
    growth_factor: float
    predicted_yield_per_are: float
    predicted_total_production: float
    method: str
    confidence: str
    assumptions: List[str]


class ManagerReport(BaseModel):
    cooperative: CooperativeRead
    season: Optional[SeasonRead] = None
    summary: CooperativeSummary
    seasonal_analysis: List[SeasonAnalysis]
    predictions: ProductionPrediction
    generated_at: datetime


class MemberReport(BaseModel):
    cooperative: CooperativeRead
    member: MemberRead
    season: Optional[SeasonRead] = None
    summary: MemberSummary
    seasonal_analysis: List[SeasonAnalysis]
    predictions: MemberProductionPrediction
    generated_at: datetime
