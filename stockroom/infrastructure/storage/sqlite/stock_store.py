"""SQLite implementation of the stock catalog."""

import aiosqlite

from stockroom.config import get_logger
from stockroom.core.entities.stock import StockItem
from stockroom.core.interfaces.stock_store import IStockStore
from stockroom.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


def row_to_stock_item(row: aiosqlite.Row) -> StockItem:
    """Convert a database row to a StockItem entity."""
    return StockItem(
        id=row["id"],
        name=row["name"],
        category=row["category"],
        quantity=float(row["quantity"]),
        unit_price=float(row["unit_price"]),
        reorder_level=float(row["reorder_level"]),
    )


class SQLiteStockStore(IStockStore):
    """SQLite implementation of stock item storage."""

    async def create_item(self, item: StockItem) -> StockItem:
        """Create a new stock item."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO stock_items (
                    name, category, quantity, unit_price, reorder_level
                ) VALUES (?, ?, ?, ?, ?)
                """,
                (
                    item.name,
                    item.category,
                    item.quantity,
                    item.unit_price,
                    item.reorder_level,
                ),
            )
            item.id = cursor.lastrowid
            logger.info("stock_item_created", item_id=item.id, name=item.name)
            return item

    async def get_item(self, item_id: int) -> StockItem | None:
        """Get stock item by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM stock_items WHERE id = ?", (item_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return row_to_stock_item(row)

    async def list_items(self, limit: int | None = None, offset: int = 0) -> list[StockItem]:
        """List stock items, optionally paginated. No limit returns every row."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM stock_items
                ORDER BY id
                LIMIT ? OFFSET ?
                """,
                (limit if limit is not None else -1, offset),
            )
            rows = await cursor.fetchall()
            return [row_to_stock_item(row) for row in rows]

    async def update_item(self, item: StockItem) -> StockItem | None:
        """Overwrite every field of a stock item, quantity included."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE stock_items SET
                    name = ?,
                    category = ?,
                    quantity = ?,
                    unit_price = ?,
                    reorder_level = ?
                WHERE id = ?
                """,
                (
                    item.name,
                    item.category,
                    item.quantity,
                    item.unit_price,
                    item.reorder_level,
                    item.id,
                ),
            )
            if cursor.rowcount == 0:
                return None
            logger.info(
                "stock_item_overwritten",
                item_id=item.id,
                quantity=item.quantity,
            )
            return item

    async def delete_item(self, item_id: int) -> bool:
        """Delete a stock item; purchases and usages referencing it are kept."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM stock_items WHERE id = ?", (item_id,)
            )
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("stock_item_deleted", item_id=item_id)
            return deleted

    async def list_low_stock(self, limit: int | None = None) -> list[StockItem]:
        """List items whose quantity is at or below their reorder level."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM stock_items
                WHERE quantity <= reorder_level
                ORDER BY quantity - reorder_level, id
                LIMIT ?
                """,
                (limit if limit is not None else -1,),
            )
            rows = await cursor.fetchall()
            return [row_to_stock_item(row) for row in rows]

    async def count_low_stock(self) -> int:
        """Count items whose quantity is at or below their reorder level."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT COUNT(*) FROM stock_items WHERE quantity <= reorder_level"
            )
            row = await cursor.fetchone()
            return int(row[0])
