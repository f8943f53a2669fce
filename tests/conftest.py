"""Pytest configuration and fixtures."""

import asyncio
import copy
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

from stockroom.core.entities import Purchase, StockItem, Supplier, Usage
from stockroom.core.exceptions import InsufficientStockError, StockItemNotFoundError
from stockroom.core.interfaces import ILedger, ILedgerTransaction


class InMemoryLedgerTransaction(ILedgerTransaction):
    """Ledger transaction over plain dicts owned by an InMemoryLedger."""

    def __init__(self, ledger: "InMemoryLedger"):
        self._ledger = ledger

    async def get_stock_item(self, item_id: int) -> StockItem | None:
        item = self._ledger.stock_items.get(item_id)
        return item.model_copy() if item else None

    async def supplier_exists(self, supplier_id: int) -> bool:
        return supplier_id in self._ledger.suppliers

    async def adjust_stock_quantity(self, item_id: int, delta: float) -> float:
        item = self._ledger.stock_items.get(item_id)
        if item is None:
            raise StockItemNotFoundError(item_id)
        if delta < 0 and item.quantity + delta < 0:
            raise InsufficientStockError(
                stock_item_id=item_id, available=item.quantity, requested=-delta
            )
        item.quantity += delta
        self._ledger.adjustments.append((item_id, delta))
        return item.quantity

    async def add_purchase(self, purchase: Purchase) -> Purchase:
        purchase.id = self._ledger.next_id()
        for item in purchase.items:
            item.id = self._ledger.next_id()
        self._ledger.purchases[purchase.id] = purchase.model_copy(deep=True)
        return purchase

    async def get_purchase(self, purchase_id: int) -> Purchase | None:
        purchase = self._ledger.purchases.get(purchase_id)
        return purchase.model_copy(deep=True) if purchase else None

    async def delete_purchase(self, purchase_id: int) -> bool:
        return self._ledger.purchases.pop(purchase_id, None) is not None

    async def get_usage(self, usage_id: int) -> Usage | None:
        usage = self._ledger.usages.get(usage_id)
        return usage.model_copy() if usage else None

    async def add_usage(self, usage: Usage) -> Usage:
        usage.id = self._ledger.next_id()
        self._ledger.usages[usage.id] = usage.model_copy()
        return usage

    async def save_usage(self, usage: Usage) -> Usage:
        self._ledger.usages[usage.id] = usage.model_copy()
        return usage

    async def delete_usage(self, usage_id: int) -> bool:
        return self._ledger.usages.pop(usage_id, None) is not None


class InMemoryLedger(ILedger):
    """Serialized, all-or-nothing ledger for use case tests."""

    def __init__(self):
        self.stock_items: dict[int, StockItem] = {}
        self.suppliers: dict[int, Supplier] = {}
        self.purchases: dict[int, Purchase] = {}
        self.usages: dict[int, Usage] = {}
        self.adjustments: list[tuple[int, float]] = []
        self.commits = 0
        self.rollbacks = 0
        self._ids = 0
        self._lock = asyncio.Lock()

    def next_id(self) -> int:
        self._ids += 1
        return self._ids

    def add_stock_item(self, quantity: float, reorder_level: float = 0.0, **fields) -> StockItem:
        item = StockItem(
            id=self.next_id(),
            name=fields.pop("name", "Flour"),
            category=fields.pop("category", "Baking"),
            quantity=quantity,
            unit_price=fields.pop("unit_price", 2.5),
            reorder_level=reorder_level,
        )
        self.stock_items[item.id] = item
        return item

    def add_supplier(self, name: str = "Acme Supplies") -> Supplier:
        supplier = Supplier(
            id=self.next_id(), name=name, phone="555-0100", email="orders@acme-supplies.com"
        )
        self.suppliers[supplier.id] = supplier
        return supplier

    def quantity(self, item_id: int) -> float:
        return self.stock_items[item_id].quantity

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[InMemoryLedgerTransaction]:
        async with self._lock:
            snapshot = copy.deepcopy(
                (self.stock_items, self.purchases, self.usages, self.adjustments)
            )
            try:
                yield InMemoryLedgerTransaction(self)
            except BaseException:
                self.stock_items, self.purchases, self.usages, self.adjustments = snapshot
                self.rollbacks += 1
                raise
            self.commits += 1


@pytest.fixture
def ledger() -> InMemoryLedger:
    """Empty in-memory ledger."""
    return InMemoryLedger()


@pytest.fixture
def supplier(ledger: InMemoryLedger) -> Supplier:
    return ledger.add_supplier()


def auth_headers(username: str = "alice", role: str = "STAFF") -> dict[str, str]:
    """Headers the authenticating gateway forwards for a caller."""
    return {"X-User": username, "X-User-Role": role}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return auth_headers("root", "ADMIN")


@pytest.fixture
def manager_headers() -> dict[str, str]:
    return auth_headers("mia", "MANAGER")


@pytest.fixture
def staff_headers() -> dict[str, str]:
    return auth_headers("alice", "STAFF")


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Async client against the application; dependency overrides are cleared after."""
    from stockroom.api.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
