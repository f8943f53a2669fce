"""Abstract interface for supplier storage."""

from abc import ABC, abstractmethod

from stockroom.core.entities.supplier import Supplier


class ISupplierStore(ABC):
    """Interface for supplier persistence."""

    @abstractmethod
    async def create(self, supplier: Supplier) -> Supplier:
        pass

    @abstractmethod
    async def get(self, supplier_id: int) -> Supplier | None:
        pass

    @abstractmethod
    async def list_suppliers(self, limit: int | None = None, offset: int = 0) -> list[Supplier]:
        pass

    @abstractmethod
    async def update(self, supplier: Supplier) -> Supplier | None:
        pass

    @abstractmethod
    async def delete(self, supplier_id: int) -> bool:
        pass
