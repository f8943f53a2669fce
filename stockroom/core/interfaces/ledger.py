"""Abstract interface for reconciled stock ledger writes.

A ledger transaction spans stock quantity changes and the Purchase/Usage
records that cause them. Implementations must make the whole block atomic
and must serialize transactions that touch the same stock item, so a
sufficiency check cannot be made against a quantity another transaction is
about to change.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from stockroom.core.entities.purchase import Purchase
from stockroom.core.entities.stock import StockItem
from stockroom.core.entities.usage import Usage


class ILedgerTransaction(ABC):
    """Operations available inside one atomic ledger transaction."""

    @abstractmethod
    async def get_stock_item(self, item_id: int) -> StockItem | None:
        """Read a stock item as seen by this transaction."""
        pass

    @abstractmethod
    async def supplier_exists(self, supplier_id: int) -> bool:
        pass

    @abstractmethod
    async def adjust_stock_quantity(self, item_id: int, delta: float) -> float:
        """Add a signed delta to a stock item's quantity.

        Returns the new quantity. A negative delta that would take the
        quantity below zero raises InsufficientStockError.
        """
        pass

    @abstractmethod
    async def add_purchase(self, purchase: Purchase) -> Purchase:
        """Persist a purchase and its items, assigning ids."""
        pass

    @abstractmethod
    async def get_purchase(self, purchase_id: int) -> Purchase | None:
        pass

    @abstractmethod
    async def delete_purchase(self, purchase_id: int) -> bool:
        """Delete a purchase and its items."""
        pass

    @abstractmethod
    async def get_usage(self, usage_id: int) -> Usage | None:
        pass

    @abstractmethod
    async def add_usage(self, usage: Usage) -> Usage:
        pass

    @abstractmethod
    async def save_usage(self, usage: Usage) -> Usage:
        """Persist changed fields of an existing usage."""
        pass

    @abstractmethod
    async def delete_usage(self, usage_id: int) -> bool:
        pass


class ILedger(ABC):
    """Factory for atomic ledger transactions."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[ILedgerTransaction]:
        """Open a transaction; commits on normal exit, rolls back on error."""
        pass
