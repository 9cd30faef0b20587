"""
Manager and member reports.

Reports are JSON aggregates computed from the ledgers of a cooperative, or
of one of its members, optionally restricted to one season. They include a
naive next-season production forecast: the yield per are observed in recent
seasons, grown by a fixed factor, applied to the land currently farmed.
"""

from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from unguka.core.database.base import utc_now
from unguka.core.database.entities import (
    Fee,
    Loan,
    Payment,
    Plot,
    Production,
    Sale,
    Season,
    Stock,
)
from unguka.core.logging_config import get_logger
from unguka.core.models.domain.enums import PredictionConfidence, SaleStatus, UserRole
from unguka.core.models.io.cooperatives import CooperativeRead
from unguka.core.models.io.members import MemberRead
from unguka.core.models.io.reports import (
    AmountTotals,
    CooperativeSummary,
    FeeTotals,
    HistoricalYield,
    LoanTotals,
    ManagerReport,
    MemberProductionPrediction,
    MemberReport,
    MemberSummary,
    PaymentTotals,
    ProductionPrediction,
    SalesTotals,
    SeasonAnalysis,
    StockTotals,
)
from unguka.core.models.io.seasons import SeasonRead

from .base import BaseService, money
from .ledgers import CashLedger

logger = get_logger(__name__)

GROWTH_FACTOR = 1.05
HISTORY_SEASONS = 3


def _by_status(records: Iterable) -> Dict[str, int]:
    return dict(Counter(record.status for record in records))


def amount_totals(records: Sequence) -> AmountTotals:
    """Totals of records carrying ``quantity`` and ``total_price``."""
    return AmountTotals(
        count=len(records),
        total_quantity=float(sum(record.quantity for record in records)),
        total_value=money(sum(record.total_price for record in records)),
    )


def fee_totals(fees: Sequence[Fee]) -> FeeTotals:
    return FeeTotals(
        count=len(fees),
        total_owed=money(sum(fee.amount_owed for fee in fees)),
        total_paid=money(sum(fee.amount_paid for fee in fees)),
        total_remaining=money(sum(max(fee.remaining_amount, 0.0) for fee in fees)),
        by_status=_by_status(fees),
    )


def loan_totals(loans: Sequence[Loan]) -> LoanTotals:
    return LoanTotals(
        count=len(loans),
        total_principal=money(sum(loan.principal for loan in loans)),
        total_owed=money(sum(loan.amount_owed for loan in loans)),
        by_status=_by_status(loans),
    )


def payment_totals(payments: Sequence[Payment]) -> PaymentTotals:
    return PaymentTotals(
        count=len(payments),
        total_gross=money(sum(payment.gross_amount for payment in payments)),
        total_deductions=money(sum(payment.total_deductions for payment in payments)),
        total_due=money(sum(payment.amount_due for payment in payments)),
        total_paid=money(sum(payment.amount_paid for payment in payments)),
        total_remaining=money(sum(payment.amount_remaining_to_pay for payment in payments)),
        by_status=_by_status(payments),
    )


def sales_totals(sales: Sequence[Sale]) -> SalesTotals:
    totals = amount_totals(sales)
    paid = [sale for sale in sales if sale.status == SaleStatus.PAID.value]
    return SalesTotals(
        **totals.model_dump(),
        paid_value=money(sum(sale.total_price for sale in paid)),
        unpaid_value=money(totals.total_value - sum(sale.total_price for sale in paid)),
    )


def stock_totals(stocks: Sequence[Stock]) -> StockTotals:
    return StockTotals(
        products_in_stock=sum(1 for stock in stocks if stock.quantity > 0),
        total_quantity=sum(stock.quantity for stock in stocks),
        total_value=money(sum(stock.total_price for stock in stocks)),
    )


def _in_season(records: Iterable, season_id: int) -> List:
    return [record for record in records if record.season_id == season_id]


def land_area(plots: Iterable[Plot], user_ids: Optional[Iterable[int]] = None) -> float:
    if user_ids is not None:
        wanted = set(user_ids)
        plots = [plot for plot in plots if plot.user_id in wanted]
    return round(sum(plot.size for plot in plots), 2)


def historical_yields(seasons: Sequence[Season], productions: Sequence[Production], plots: Sequence[Plot]) -> List[HistoricalYield]:
    """Yield per are of past seasons.

    A season's yield is its production divided by the land of the members
    who produced in it. Seasons where no producing member has land are
    skipped.
    """
    yields = []
    for season in seasons:
        season_productions = _in_season(productions, season.id)
        area = land_area(plots, {production.user_id for production in season_productions})
        if area <= 0:
            continue
        produced = float(sum(production.quantity for production in season_productions))
        yields.append(
            HistoricalYield(
                season_id=season.id,
                label=season.label,
                production=produced,
                land_area=area,
                yield_per_are=round(produced / area, 4),
            )
        )
    return yields


def _average(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


class ReportService(BaseService):
    """Service computing JSON reports."""

    async def _history(self, cooperative_id: int, plots: Sequence[Plot], today: Optional[date]) -> List[HistoricalYield]:
        year = (today or date.today()).year
        seasons = await self.repos.seasons.list_history(cooperative_id, before_year=year, limit=HISTORY_SEASONS)
        productions = await self.repos.productions.list_for_cooperative(cooperative_id)
        return historical_yields(seasons, productions, plots)

    async def cooperative_prediction(
        self, cooperative_id: int, season_id: Optional[int] = None, today: Optional[date] = None
    ) -> ProductionPrediction:
        plots = await self.repos.plots.list_for_cooperative(cooperative_id)
        productions = await self.repos.productions.list_for_cooperative(cooperative_id, season_id=season_id)
        land = land_area(plots)
        produced = float(sum(production.quantity for production in productions))
        current_yield = produced / land if land > 0 else 0.0

        history = await self._history(cooperative_id, plots, today)
        average = _average([item.yield_per_are for item in history])
        base_yield = average if average > 0 else current_yield
        predicted_yield = base_yield * GROWTH_FACTOR

        if len(history) >= 2:
            confidence = PredictionConfidence.HIGH
        elif len(history) == 1:
            confidence = PredictionConfidence.MEDIUM
        else:
            confidence = PredictionConfidence.LOW

        return ProductionPrediction(
            total_land_area=land,
            total_production=produced,
            total_production_value=money(sum(production.total_price for production in productions)),
            current_yield_per_are=round(current_yield, 4),
            historical_seasons=history,
            average_historical_yield=round(average, 4),
            growth_factor=GROWTH_FACTOR,
            predicted_yield_per_are=round(predicted_yield, 4),
            predicted_total_production=round(land * predicted_yield, 2),
            method="historical" if average > 0 else "current",
            confidence=confidence.value,
            assumptions=[
                "Land farmed next season equals the land registered today",
                f"Yield grows by {round((GROWTH_FACTOR - 1) * 100)}% over the base yield",
                f"History covers at most the {HISTORY_SEASONS} most recent past seasons",
            ],
        )

    async def member_prediction(
        self, cooperative_id: int, user_id: int, season_id: Optional[int] = None, today: Optional[date] = None
    ) -> MemberProductionPrediction:
        plots = await self.repos.plots.list_for_cooperative(cooperative_id)
        productions = await self.repos.productions.list_for_cooperative(
            cooperative_id, user_id=user_id, season_id=season_id
        )
        land = land_area(plots, [user_id])
        produced = float(sum(production.quantity for production in productions))
        member_yield = produced / land if land > 0 else 0.0

        history = await self._history(cooperative_id, plots, today)
        cooperative_average = _average([item.yield_per_are for item in history])

        if cooperative_average > 0:
            base_yield, method = cooperative_average, "cooperative_historical"
        elif member_yield > 0:
            base_yield, method = member_yield, "member_current"
        else:
            base_yield, method = 0.0, "none"
        predicted_yield = base_yield * GROWTH_FACTOR

        if cooperative_average > 0 and len(history) >= 2:
            confidence = PredictionConfidence.HIGH
        elif cooperative_average > 0:
            confidence = PredictionConfidence.MEDIUM
        elif member_yield > 0:
            confidence = PredictionConfidence.LOW
        else:
            confidence = PredictionConfidence.VERY_LOW

        return MemberProductionPrediction(
            land_area=land,
            total_production=produced,
            total_production_value=money(sum(production.total_price for production in productions)),
            current_yield_per_are=round(member_yield, 4),
            cooperative_average_yield=round(cooperative_average, 4),
            historical_seasons_count=len(history),
            growth_factor=GROWTH_FACTOR,
            predicted_yield_per_are=round(predicted_yield, 4),
            predicted_total_production=round(land * predicted_yield, 2),
            method=method,
            confidence=confidence.value,
            assumptions=[
                "The member farms the same plots next season",
                "The cooperative's historical yield applies to every member" if method == "cooperative_historical"
                else "The member's current yield is repeated next season",
            ],
        )

    async def _seasons(self, cooperative_id: int, season_id: Optional[int]) -> List[Season]:
        if season_id is not None:
            return [await self.require_season(cooperative_id, season_id)]
        return await self.repos.seasons.list_for_cooperative(cooperative_id)

    async def manager_report(
        self, cooperative_id: int, season_id: Optional[int] = None, today: Optional[date] = None
    ) -> ManagerReport:
        cooperative = await self.require_cooperative(cooperative_id)
        seasons = await self._seasons(cooperative_id, season_id)
        repos = self.repos

        users = await repos.users.list_for_cooperative(cooperative_id)
        roles = Counter(user.role for user in users)
        plots = await repos.plots.list_for_cooperative(cooperative_id)
        fees = await repos.fees.list_for_cooperative(cooperative_id, season_id=season_id)
        loans = await repos.loans.list_for_cooperative(cooperative_id, season_id=season_id)
        payments = await repos.payments.list_for_cooperative(cooperative_id, season_id=season_id)
        productions = await repos.productions.list_for_cooperative(cooperative_id, season_id=season_id)
        sales = await repos.sales.list_for_cooperative(cooperative_id, season_id=season_id)
        purchase_inputs = await repos.purchase_inputs.list_for_cooperative(cooperative_id, season_id=season_id)
        purchase_outs = await repos.purchase_outs.list_for_cooperative(cooperative_id, season_id=season_id)
        active = await repos.seasons.get_active(cooperative_id)

        summary = CooperativeSummary(
            members=roles.get(UserRole.MEMBER.value, 0),
            managers=roles.get(UserRole.MANAGER.value, 0),
            accountants=roles.get(UserRole.ACCOUNTANT.value, 0),
            seasons=await repos.seasons.count({"cooperative_id": cooperative_id}),
            products=await repos.products.count({"cooperative_id": cooperative_id}),
            plots=len(plots),
            total_land_area=land_area(plots),
            cash_balance=await CashLedger(repos).balance(cooperative_id),
            active_season=SeasonRead.model_validate(active) if active is not None else None,
            fees=fee_totals(fees),
            loans=loan_totals(loans),
            payments=payment_totals(payments),
            productions=amount_totals(productions),
            sales=sales_totals(sales),
            purchase_inputs=amount_totals(purchase_inputs),
            purchase_outs=amount_totals(purchase_outs),
            stock=stock_totals(await repos.stocks.list_for_cooperative(cooperative_id)),
        )
        analysis = [
            SeasonAnalysis(
                season_id=season.id,
                label=season.label,
                status=season.status,
                fees=fee_totals(_in_season(fees, season.id)),
                loans=loan_totals(_in_season(loans, season.id)),
                productions=amount_totals(_in_season(productions, season.id)),
                purchase_inputs=amount_totals(_in_season(purchase_inputs, season.id)),
                purchase_outs=amount_totals(_in_season(purchase_outs, season.id)),
                sales=sales_totals(_in_season(sales, season.id)),
                payments=payment_totals(_in_season(payments, season.id)),
            )
            for season in seasons
        ]
        logger.info(f"Generated manager report for cooperative {cooperative_id}")
        return ManagerReport(
            cooperative=CooperativeRead.model_validate(cooperative),
            season=SeasonRead.model_validate(seasons[0]) if season_id is not None else None,
            summary=summary,
            seasonal_analysis=analysis,
            predictions=await self.cooperative_prediction(cooperative_id, season_id, today),
            generated_at=utc_now(),
        )

    async def member_report(
        self, cooperative_id: int, user_id: int, season_id: Optional[int] = None, today: Optional[date] = None
    ) -> MemberReport:
        cooperative = await self.require_cooperative(cooperative_id)
        member = await self.require_user(cooperative_id, user_id)
        seasons = await self._seasons(cooperative_id, season_id)
        repos = self.repos

        plots = await repos.plots.list_for_cooperative(cooperative_id, user_id=user_id)
        fees = await repos.fees.list_for_cooperative(cooperative_id, user_id=user_id, season_id=season_id)
        loans = await repos.loans.list_for_cooperative(cooperative_id, user_id=user_id, season_id=season_id)
        payments = await repos.payments.list_for_cooperative(cooperative_id, user_id=user_id, season_id=season_id)
        productions = await repos.productions.list_for_cooperative(
            cooperative_id, user_id=user_id, season_id=season_id
        )
        purchase_inputs = await repos.purchase_inputs.list_for_cooperative(
            cooperative_id, user_id=user_id, season_id=season_id
        )

        summary = MemberSummary(
            plots=len(plots),
            total_land_area=land_area(plots),
            fees=fee_totals(fees),
            loans=loan_totals(loans),
            payments=payment_totals(payments),
            productions=amount_totals(productions),
            purchase_inputs=amount_totals(purchase_inputs),
        )
        analysis = [
            SeasonAnalysis(
                season_id=season.id,
                label=season.label,
                status=season.status,
                fees=fee_totals(_in_season(fees, season.id)),
                loans=loan_totals(_in_season(loans, season.id)),
                productions=amount_totals(_in_season(productions, season.id)),
                purchase_inputs=amount_totals(_in_season(purchase_inputs, season.id)),
                payments=payment_totals(_in_season(payments, season.id)),
            )
            for season in seasons
        ]
        logger.info(f"Generated member report for user {user_id} of cooperative {cooperative_id}")
        return MemberReport(
            cooperative=CooperativeRead.model_validate(cooperative),
            member=MemberRead.model_validate(member),
            season=SeasonRead.model_validate(seasons[0]) if season_id is not None else None,
            summary=summary,
            seasonal_analysis=analysis,
            predictions=await self.member_prediction(cooperative_id, user_id, season_id, today),
            generated_at=utc_now(),
        )
