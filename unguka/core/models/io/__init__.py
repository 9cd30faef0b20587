"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. They validate request shapes (lengths,
patterns, ranges) before any service code runs. These models are separate
from database entities to allow independent evolution of API contracts.
"""

from .announcements import AnnouncementCreate, AnnouncementRead, AnnouncementUpdate
from .cash import CashRead, CashSet
from .cooperatives import CooperativeCreate, CooperativeRead, CooperativeUpdate
from .fees import (
    FeeAssign,
    FeeAssignResult,
    FeePaymentCreate,
    FeeRead,
    FeeTypeCreate,
    FeeTypeRead,
    FeeTypeUpdate,
    FeeUpdate,
)
from .loans import LoanCreate, LoanRead, LoanRepayment, LoanTransactionRead, LoanUpdate
from .members import MemberCreate, MemberRead, MemberUpdate
from .payments import PaymentPreview, PaymentProcess, PaymentRead, PaymentTransactionRead
from .plots import PlotCreate, PlotRead, PlotUpdate
from .productions import ProductionCreate, ProductionRead, ProductionUpdate
from .products import ProductCreate, ProductRead, ProductUpdate, StockRead
from .purchases import (
    PurchaseInputCreate,
    PurchaseInputRead,
    PurchaseInputUpdate,
    PurchaseOutCreate,
    PurchaseOutRead,
    PurchaseOutUpdate,
)
from .reports import ManagerReport, MemberReport
from .sales import SaleCreate, SaleRead, SaleUpdate
from .seasons import (
    SeasonAutoCreateResult,
    SeasonCalendarRead,
    SeasonCreate,
    SeasonRead,
    SeasonRefRead,
    SeasonUpdate,
)

__all__ = [
    "AnnouncementCreate",
    "AnnouncementRead",
    "AnnouncementUpdate",
    "CashRead",
    "CashSet",
    "CooperativeCreate",
    "CooperativeRead",
    "CooperativeUpdate",
    "FeeAssign",
    "FeeAssignResult",
    "FeePaymentCreate",
    "FeeRead",
    "FeeTypeCreate",
    "FeeTypeRead",
    "FeeTypeUpdate",
    "FeeUpdate",
    "LoanCreate",
    "LoanRead",
    "LoanRepayment",
    "LoanTransactionRead",
    "LoanUpdate",
    "ManagerReport",
    "MemberCreate",
    "MemberRead",
    "MemberReport",
    "MemberUpdate",
    "PaymentPreview",
    "PaymentProcess",
    "PaymentRead",
    "PaymentTransactionRead",
    "PlotCreate",
    "PlotRead",
    "PlotUpdate",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
    "ProductionCreate",
    "ProductionRead",
    "ProductionUpdate",
    "PurchaseInputCreate",
    "PurchaseInputRead",
    "PurchaseInputUpdate",
    "PurchaseOutCreate",
    "PurchaseOutRead",
    "PurchaseOutUpdate",
    "SaleCreate",
    "SaleRead",
    "SaleUpdate",
    "SeasonAutoCreateResult",
    "SeasonCalendarRead",
    "SeasonCreate",
    "SeasonRead",
    "SeasonRefRead",
    "SeasonUpdate",
    "StockRead",
]
