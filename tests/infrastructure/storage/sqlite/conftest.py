"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

import stockroom.infrastructure.storage.sqlite.connection as conn_module
import stockroom.infrastructure.storage.sqlite.migrations.migrator as migrator_module
from stockroom.core.entities import StockItem, Supplier
from stockroom.infrastructure.storage.sqlite import SQLiteStockStore, SQLiteSupplierStore


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 3
    mock.storage.busy_timeout = 5000
    mock.storage.backup_before_migrate = False
    return mock


@pytest.fixture
async def migrated_db(mock_settings, temp_db_path: Path) -> AsyncGenerator[Path, None]:
    """Migrated temporary database wired into the global connection pool."""
    conn_module._pool = None
    with (
        patch.object(conn_module, "get_settings", return_value=mock_settings),
        patch.object(migrator_module, "get_settings", return_value=mock_settings),
    ):
        results = await migrator_module.initialize_database(temp_db_path)
        assert all(r.success for r in results)
        try:
            yield temp_db_path
        finally:
            await conn_module.close_pool()


@pytest.fixture
async def stock_item(migrated_db) -> StockItem:
    return await SQLiteStockStore().create_item(
        StockItem(name="Flour", category="Baking", quantity=100, unit_price=2.0, reorder_level=20)
    )


@pytest.fixture
async def supplier(migrated_db) -> Supplier:
    return await SQLiteSupplierStore().create(
        Supplier(name="Acme Supplies", phone="555-0100", email="orders@acme-supplies.com")
    )
