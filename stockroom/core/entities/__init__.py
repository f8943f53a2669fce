"""Core domain entities."""

from stockroom.core.entities.caller import CallerIdentity, Role
from stockroom.core.entities.expense import Expense
from stockroom.core.entities.purchase import Purchase, PurchaseItem
from stockroom.core.entities.report import MonthlyReport
from stockroom.core.entities.stock import StockItem
from stockroom.core.entities.supplier import Supplier
from stockroom.core.entities.usage import Usage

__all__ = [
    # Stock catalog
    "StockItem",
    # Suppliers
    "Supplier",
    # Ledger events
    "Purchase",
    "PurchaseItem",
    "Usage",
    "Expense",
    # Reporting
    "MonthlyReport",
    # Access
    "CallerIdentity",
    "Role",
]
