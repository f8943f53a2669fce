"""
SQLite ledger: reconciled writes of stock quantities and stock events.

Each ledger transaction runs on one pooled connection opened with
``BEGIN IMMEDIATE``. SQLite then holds the database write lock from the
first read to the commit, so a sufficiency check and the decrement that
follows it cannot interleave with another ledger transaction.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiosqlite

from stockroom.config import get_logger
from stockroom.core.entities.purchase import Purchase
from stockroom.core.entities.stock import StockItem
from stockroom.core.entities.usage import Usage
from stockroom.core.exceptions import InsufficientStockError, StockItemNotFoundError
from stockroom.core.interfaces.ledger import ILedger, ILedgerTransaction
from stockroom.infrastructure.storage.sqlite.connection import get_transaction
from stockroom.infrastructure.storage.sqlite.purchase_store import load_purchase
from stockroom.infrastructure.storage.sqlite.stock_store import row_to_stock_item
from stockroom.infrastructure.storage.sqlite.usage_store import row_to_usage

logger = get_logger(__name__)


class SQLiteLedgerTransaction(ILedgerTransaction):
    """Ledger operations bound to one open SQLite transaction."""

    def __init__(self, conn: aiosqlite.Connection):
        self._conn = conn

    async def get_stock_item(self, item_id: int) -> StockItem | None:
        cursor = await self._conn.execute(
            "SELECT * FROM stock_items WHERE id = ?", (item_id,)
        )
        row = await cursor.fetchone()
        return row_to_stock_item(row) if row else None

    async def supplier_exists(self, supplier_id: int) -> bool:
        cursor = await self._conn.execute(
            "SELECT 1 FROM suppliers WHERE id = ?", (supplier_id,)
        )
        return await cursor.fetchone() is not None

    async def adjust_stock_quantity(self, item_id: int, delta: float) -> float:
        """Add ``delta`` to the item's quantity and return the new quantity."""
        # Only decrements are guarded; a credit is always accepted
        cursor = await self._conn.execute(
            """
            UPDATE stock_items
            SET quantity = quantity + ?
            WHERE id = ? AND (? >= 0 OR quantity + ? >= 0)
            """,
            (delta, item_id, delta, delta),
        )
        if cursor.rowcount == 0:
            item = await self.get_stock_item(item_id)
            if item is None:
                raise StockItemNotFoundError(item_id)
            raise InsufficientStockError(
                stock_item_id=item_id,
                available=item.quantity,
                requested=-delta,
            )

        cursor = await self._conn.execute(
            "SELECT quantity FROM stock_items WHERE id = ?", (item_id,)
        )
        quantity = float((await cursor.fetchone())[0])
        logger.debug(
            "stock_quantity_adjusted",
            stock_item_id=item_id,
            delta=delta,
            quantity=quantity,
        )
        return quantity

    async def add_purchase(self, purchase: Purchase) -> Purchase:
        """Insert the purchase header and its items in line order."""
        cursor = await self._conn.execute(
            """
            INSERT INTO purchases (supplier_id, purchase_date, total_amount)
            VALUES (?, ?, ?)
            """,
            (purchase.supplier_id, purchase.date.isoformat(), purchase.total_amount),
        )
        purchase.id = cursor.lastrowid

        for line_number, item in enumerate(purchase.items, start=1):
            item_cursor = await self._conn.execute(
                """
                INSERT INTO purchase_items (
                    purchase_id, line_number, stock_item_id, quantity, price
                ) VALUES (?, ?, ?, ?, ?)
                """,
                (purchase.id, line_number, item.stock_item_id, item.quantity, item.price),
            )
            item.id = item_cursor.lastrowid

        return purchase

    async def get_purchase(self, purchase_id: int) -> Purchase | None:
        return await load_purchase(self._conn, purchase_id)

    async def delete_purchase(self, purchase_id: int) -> bool:
        # purchase_items rows go with it through ON DELETE CASCADE
        cursor = await self._conn.execute(
            "DELETE FROM purchases WHERE id = ?", (purchase_id,)
        )
        return cursor.rowcount > 0

    async def get_usage(self, usage_id: int) -> Usage | None:
        cursor = await self._conn.execute(
            "SELECT * FROM usages WHERE id = ?", (usage_id,)
        )
        row = await cursor.fetchone()
        return row_to_usage(row) if row else None

    async def add_usage(self, usage: Usage) -> Usage:
        cursor = await self._conn.execute(
            """
            INSERT INTO usages (stock_item_id, quantity_used, usage_date, username)
            VALUES (?, ?, ?, ?)
            """,
            (usage.stock_item_id, usage.quantity_used, usage.date.isoformat(), usage.user),
        )
        usage.id = cursor.lastrowid
        return usage

    async def save_usage(self, usage: Usage) -> Usage:
        await self._conn.execute(
            """
            UPDATE usages SET
                stock_item_id = ?, quantity_used = ?, usage_date = ?, username = ?
            WHERE id = ?
            """,
            (
                usage.stock_item_id,
                usage.quantity_used,
                usage.date.isoformat(),
                usage.user,
                usage.id,
            ),
        )
        return usage

    async def delete_usage(self, usage_id: int) -> bool:
        cursor = await self._conn.execute(
            "DELETE FROM usages WHERE id = ?", (usage_id,)
        )
        return cursor.rowcount > 0


class SQLiteLedger(ILedger):
    """Opens write-locked SQLite transactions for the reconciliation use cases."""

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[SQLiteLedgerTransaction]:
        async with get_transaction(immediate=True) as conn:
            yield SQLiteLedgerTransaction(conn)
