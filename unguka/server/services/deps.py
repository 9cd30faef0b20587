"""
Service Dependencies.

Provides one service instance per request, bound to the request's database
session, for API endpoints.
"""

from typing import Annotated, Callable, Type, TypeVar

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from unguka.core.database import get_session

from .announcements import AnnouncementService
from .base import BaseService
from .cooperatives import CooperativeService
from .fees import FeeService, FeeTypeService
from .loans import LoanService
from .members import MemberService
from .payments import PaymentService
from .plots import PlotService
from .productions import ProductionService
from .products import CashService, ProductService
from .purchases import PurchaseInputService, PurchaseOutService
from .reports import ReportService
from .sales import SaleService
from .seasons import SeasonService

S = TypeVar("S", bound=BaseService)


def service_provider(service_cls: Type[S]) -> Callable[..., S]:
    """Build a FastAPI dependency creating ``service_cls`` on the request session."""

    def provide(session: AsyncSession = Depends(get_session)) -> S:
        return service_cls(session)

    provide.__name__ = f"get_{service_cls.__name__}"
    return provide


CooperativeServiceDep = Annotated[CooperativeService, Depends(service_provider(CooperativeService))]
MemberServiceDep = Annotated[MemberService, Depends(service_provider(MemberService))]
SeasonServiceDep = Annotated[SeasonService, Depends(service_provider(SeasonService))]
ProductServiceDep = Annotated[ProductService, Depends(service_provider(ProductService))]
CashServiceDep = Annotated[CashService, Depends(service_provider(CashService))]
PlotServiceDep = Annotated[PlotService, Depends(service_provider(PlotService))]
ProductionServiceDep = Annotated[ProductionService, Depends(service_provider(ProductionService))]
PurchaseInputServiceDep = Annotated[PurchaseInputService, Depends(service_provider(PurchaseInputService))]
PurchaseOutServiceDep = Annotated[PurchaseOutService, Depends(service_provider(PurchaseOutService))]
SaleServiceDep = Annotated[SaleService, Depends(service_provider(SaleService))]
LoanServiceDep = Annotated[LoanService, Depends(service_provider(LoanService))]
FeeTypeServiceDep = Annotated[FeeTypeService, Depends(service_provider(FeeTypeService))]
FeeServiceDep = Annotated[FeeService, Depends(service_provider(FeeService))]
PaymentServiceDep = Annotated[PaymentService, Depends(service_provider(PaymentService))]
AnnouncementServiceDep = Annotated[AnnouncementService, Depends(service_provider(AnnouncementService))]
ReportServiceDep = Annotated[ReportService, Depends(service_provider(ReportService))]
