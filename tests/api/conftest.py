"""Fixtures for API tests: stores and ledger replaced through dependency overrides."""

import datetime as dt
from unittest.mock import AsyncMock

import pytest

from stockroom.api.dependencies import (
    get_expense_store_dep,
    get_ledger_dep,
    get_purchase_store_dep,
    get_stock_store_dep,
    get_supplier_store_dep,
    get_usage_store_dep,
)
from stockroom.api.main import app
from stockroom.core.entities import Expense, StockItem, Supplier


@pytest.fixture
def stock_store():
    store = AsyncMock()
    flour = StockItem(id=1, name="Flour", category="Baking", quantity=100, unit_price=2.0, reorder_level=20)
    sugar = StockItem(id=2, name="Sugar", category="Baking", quantity=5, unit_price=1.5, reorder_level=10)
    store.list_items.return_value = [flour, sugar]
    store.list_low_stock.return_value = [sugar]
    store.get_item.side_effect = lambda item_id: {1: flour, 2: sugar}.get(item_id)
    store.count_low_stock.return_value = 1

    async def create(item):
        item.id = 3
        return item

    store.create_item.side_effect = create
    store.update_item.side_effect = lambda item: item if item.id in (1, 2) else None
    store.delete_item.side_effect = lambda item_id: item_id in (1, 2)
    return store


@pytest.fixture
def supplier_store():
    store = AsyncMock()
    acme = Supplier(id=1, name="Acme Supplies", phone="555-0100", email="orders@acme-supplies.com")
    store.list_suppliers.return_value = [acme]
    store.get.side_effect = lambda supplier_id: acme if supplier_id == 1 else None

    async def create(supplier):
        supplier.id = 2
        return supplier

    store.create.side_effect = create
    store.update.side_effect = lambda supplier: supplier if supplier.id == 1 else None
    store.delete.side_effect = lambda supplier_id: supplier_id == 1
    return store


@pytest.fixture
def expense_store():
    store = AsyncMock()
    rent = Expense(
        id=1, category="Rent", amount=1200.0, description="June rent", date=dt.date(2024, 6, 1)
    )
    store.list_expenses.return_value = [rent]
    store.get.side_effect = lambda expense_id: rent.model_copy() if expense_id == 1 else None

    async def create(expense):
        expense.id = 2
        return expense

    store.create.side_effect = create
    store.update.side_effect = lambda expense: expense if expense.id == 1 else None
    store.delete.side_effect = lambda expense_id: expense_id == 1
    store.sum_amounts_between.return_value = 1200.0
    return store


@pytest.fixture
def event_stores():
    """Purchase and usage read stores."""
    return AsyncMock(), AsyncMock()


@pytest.fixture
def overrides(ledger, stock_store, supplier_store, expense_store, event_stores):
    """Wire every store dependency to a test double."""
    purchase_store, usage_store = event_stores
    app.dependency_overrides[get_ledger_dep] = lambda: ledger
    app.dependency_overrides[get_stock_store_dep] = lambda: stock_store
    app.dependency_overrides[get_supplier_store_dep] = lambda: supplier_store
    app.dependency_overrides[get_expense_store_dep] = lambda: expense_store
    app.dependency_overrides[get_purchase_store_dep] = lambda: purchase_store
    app.dependency_overrides[get_usage_store_dep] = lambda: usage_store
    yield
    app.dependency_overrides.clear()
