"""
Database entity models.

This package contains all database entity models organized by business
domain. Importing it registers every table on the shared SQLModel metadata.

Modules:
- cooperatives: Tenants of the system
- users: Members, accountants and managers
- seasons: Agricultural seasons
- products: Products and their stock
- cash: Cooperative cash balance
- plots: Land parcels of members
- productions: Harvest delivered by members
- purchases: Purchase inputs and purchase outs
- sales: Sales to outside buyers
- loans: Loans and repayment transactions
- fees: Fee types and per-member fees
- payments: Member payments and payout transactions
- announcements: Notices posted to a cooperative
"""

from .announcements import Announcement
from .cash import Cash
from .cooperatives import Cooperative
from .fees import Fee, FeeType
from .loans import Loan, LoanTransaction
from .payments import Payment, PaymentTransaction
from .plots import Plot
from .productions import Production
from .products import Product, Stock
from .purchases import PurchaseInput, PurchaseOut
from .sales import Sale
from .seasons import Season
from .users import User

__all__ = [
    "Announcement",
    "Cash",
    "Cooperative",
    "Fee",
    "FeeType",
    "Loan",
    "LoanTransaction",
    "Payment",
    "PaymentTransaction",
    "Plot",
    "Production",
    "Product",
    "PurchaseInput",
    "PurchaseOut",
    "Sale",
    "Season",
    "Stock",
    "User",
]
