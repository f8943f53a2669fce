"""Storage infrastructure implementations."""

from stockroom.infrastructure.storage.sqlite import (
    SQLiteExpenseStore,
    SQLiteLedger,
    SQLitePurchaseStore,
    SQLiteStockStore,
    SQLiteSupplierStore,
    SQLiteUsageStore,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteStockStore",
    "SQLiteSupplierStore",
    "SQLitePurchaseStore",
    "SQLiteUsageStore",
    "SQLiteExpenseStore",
    "SQLiteLedger",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
