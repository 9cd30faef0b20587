"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session, so a service can run several repositories inside a
single transaction.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .announcements import AnnouncementRepository
from .cash import CashRepository
from .cooperatives import CooperativeRepository
from .fees import FeeRepository, FeeTypeRepository
from .loans import LoanRepository, LoanTransactionRepository
from .payments import PaymentRepository, PaymentTransactionRepository
from .plots import PlotRepository
from .productions import ProductionRepository
from .products import ProductRepository, StockRepository
from .purchases import PurchaseInputRepository, PurchaseOutRepository
from .sales import SaleRepository
from .seasons import SeasonRepository
from .users import UserRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    session: AsyncSession
    cooperatives: CooperativeRepository
    users: UserRepository
    seasons: SeasonRepository
    products: ProductRepository
    stocks: StockRepository
    cash: CashRepository
    plots: PlotRepository
    productions: ProductionRepository
    purchase_inputs: PurchaseInputRepository
    purchase_outs: PurchaseOutRepository
    sales: SaleRepository
    loans: LoanRepository
    loan_transactions: LoanTransactionRepository
    fee_types: FeeTypeRepository
    fees: FeeRepository
    payments: PaymentRepository
    payment_transactions: PaymentTransactionRepository
    announcements: AnnouncementRepository

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        session=session,
        cooperatives=CooperativeRepository(session),
        users=UserRepository(session),
        seasons=SeasonRepository(session),
        products=ProductRepository(session),
        stocks=StockRepository(session),
        cash=CashRepository(session),
        plots=PlotRepository(session),
        productions=ProductionRepository(session),
        purchase_inputs=PurchaseInputRepository(session),
        purchase_outs=PurchaseOutRepository(session),
        sales=SaleRepository(session),
        loans=LoanRepository(session),
        loan_transactions=LoanTransactionRepository(session),
        fee_types=FeeTypeRepository(session),
        fees=FeeRepository(session),
        payments=PaymentRepository(session),
        payment_transactions=PaymentTransactionRepository(session),
        announcements=AnnouncementRepository(session),
    )
