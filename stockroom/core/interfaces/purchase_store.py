"""Abstract read interface for purchases."""

from abc import ABC, abstractmethod
from datetime import date

from stockroom.core.entities.purchase import Purchase


class IPurchaseStore(ABC):
    """Read access to persisted purchases.

    Writes go through ``ILedger`` so they are reconciled with stock.
    """

    @abstractmethod
    async def get_purchase(self, purchase_id: int) -> Purchase | None:
        """Get purchase by ID with items."""
        pass

    @abstractmethod
    async def list_purchases(self, limit: int | None = None, offset: int = 0) -> list[Purchase]:
        """List purchases with items, newest first."""
        pass

    @abstractmethod
    async def sum_totals_between(self, start: date, end: date) -> float:
        """Sum purchase totals dated in [start, end)."""
        pass
