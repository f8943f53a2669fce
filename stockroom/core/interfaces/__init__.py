"""Core interfaces (ports) for dependency injection."""

from stockroom.core.interfaces.expense_store import IExpenseStore
from stockroom.core.interfaces.ledger import ILedger, ILedgerTransaction
from stockroom.core.interfaces.purchase_store import IPurchaseStore
from stockroom.core.interfaces.stock_store import IStockStore
from stockroom.core.interfaces.supplier_store import ISupplierStore
from stockroom.core.interfaces.usage_store import IUsageStore

__all__ = [
    # Catalog and directory
    "IStockStore",
    "ISupplierStore",
    # Ledger
    "ILedger",
    "ILedgerTransaction",
    "IPurchaseStore",
    "IUsageStore",
    "IExpenseStore",
]
