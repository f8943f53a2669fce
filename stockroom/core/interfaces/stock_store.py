"""Abstract interface for the stock catalog."""

from abc import ABC, abstractmethod

from stockroom.core.entities.stock import StockItem


class IStockStore(ABC):
    """Interface for stock item persistence.

    ``update_item`` is the administrative overwrite path. It replaces every
    field, quantity included, and performs no reconciliation; quantity
    changes driven by purchases and usages go through ``ILedger`` instead.
    """

    @abstractmethod
    async def create_item(self, item: StockItem) -> StockItem:
        """Create a new stock item."""
        pass

    @abstractmethod
    async def get_item(self, item_id: int) -> StockItem | None:
        """Get stock item by ID."""
        pass

    @abstractmethod
    async def list_items(self, limit: int | None = None, offset: int = 0) -> list[StockItem]:
        """List stock items with pagination."""
        pass

    @abstractmethod
    async def update_item(self, item: StockItem) -> StockItem | None:
        """Overwrite all fields of an existing stock item. None if absent."""
        pass

    @abstractmethod
    async def delete_item(self, item_id: int) -> bool:
        """Delete a stock item unconditionally."""
        pass

    @abstractmethod
    async def list_low_stock(self, limit: int | None = None) -> list[StockItem]:
        """List stock items whose quantity is at or below their reorder level."""
        pass

    @abstractmethod
    async def count_low_stock(self) -> int:
        """Count stock items at or below their reorder level."""
        pass
