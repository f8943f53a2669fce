"""SQLite storage implementations."""

from stockroom.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from stockroom.infrastructure.storage.sqlite.expense_store import SQLiteExpenseStore
from stockroom.infrastructure.storage.sqlite.ledger import (
    SQLiteLedger,
    SQLiteLedgerTransaction,
)
from stockroom.infrastructure.storage.sqlite.purchase_store import SQLitePurchaseStore
from stockroom.infrastructure.storage.sqlite.stock_store import SQLiteStockStore
from stockroom.infrastructure.storage.sqlite.supplier_store import SQLiteSupplierStore
from stockroom.infrastructure.storage.sqlite.usage_store import SQLiteUsageStore

# Singleton instances
_stock_store: SQLiteStockStore | None = None
_supplier_store: SQLiteSupplierStore | None = None
_purchase_store: SQLitePurchaseStore | None = None
_usage_store: SQLiteUsageStore | None = None
_expense_store: SQLiteExpenseStore | None = None
_ledger: SQLiteLedger | None = None


async def get_stock_store() -> SQLiteStockStore:
    """Get singleton stock store instance."""
    global _stock_store
    if _stock_store is None:
        _stock_store = SQLiteStockStore()
    return _stock_store


async def get_supplier_store() -> SQLiteSupplierStore:
    """Get singleton supplier store instance."""
    global _supplier_store
    if _supplier_store is None:
        _supplier_store = SQLiteSupplierStore()
    return _supplier_store


async def get_purchase_store() -> SQLitePurchaseStore:
    """Get singleton purchase store instance."""
    global _purchase_store
    if _purchase_store is None:
        _purchase_store = SQLitePurchaseStore()
    return _purchase_store


async def get_usage_store() -> SQLiteUsageStore:
    """Get singleton usage store instance."""
    global _usage_store
    if _usage_store is None:
        _usage_store = SQLiteUsageStore()
    return _usage_store


async def get_expense_store() -> SQLiteExpenseStore:
    """Get singleton expense store instance."""
    global _expense_store
    if _expense_store is None:
        _expense_store = SQLiteExpenseStore()
    return _expense_store


async def get_ledger() -> SQLiteLedger:
    """Get singleton ledger instance."""
    global _ledger
    if _ledger is None:
        _ledger = SQLiteLedger()
    return _ledger


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteStockStore",
    "SQLiteSupplierStore",
    "SQLitePurchaseStore",
    "SQLiteUsageStore",
    "SQLiteExpenseStore",
    "SQLiteLedger",
    "SQLiteLedgerTransaction",
    # Factory functions
    "get_stock_store",
    "get_supplier_store",
    "get_purchase_store",
    "get_usage_store",
    "get_expense_store",
    "get_ledger",
]
