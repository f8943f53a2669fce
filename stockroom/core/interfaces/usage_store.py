"""Abstract read interface for usages."""

from abc import ABC, abstractmethod
from datetime import date

from stockroom.core.entities.usage import Usage


class IUsageStore(ABC):
    """Read access to persisted usages."""

    @abstractmethod
    async def get_usage(self, usage_id: int) -> Usage | None:
        pass

    @abstractmethod
    async def list_usages(self, limit: int | None = None, offset: int = 0) -> list[Usage]:
        pass

    @abstractmethod
    async def count_between(self, start: date, end: date) -> int:
        """Count usages dated in [start, end)."""
        pass
