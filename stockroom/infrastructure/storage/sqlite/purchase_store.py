"""SQLite read side of purchases."""

from datetime import date

import aiosqlite

from stockroom.core.entities.purchase import Purchase, PurchaseItem
from stockroom.core.interfaces.purchase_store import IPurchaseStore
from stockroom.infrastructure.storage.sqlite.connection import get_connection


def row_to_purchase_item(row: aiosqlite.Row) -> PurchaseItem:
    """Convert a purchase_items row to a PurchaseItem entity."""
    return PurchaseItem(
        id=row["id"],
        stock_item_id=row["stock_item_id"],
        quantity=float(row["quantity"]),
        price=float(row["price"]),
    )


async def load_purchase(
    conn: aiosqlite.Connection,
    purchase_id: int,
) -> Purchase | None:
    """Load a purchase with its items, in line order, on the given connection."""
    cursor = await conn.execute(
        "SELECT * FROM purchases WHERE id = ?", (purchase_id,)
    )
    row = await cursor.fetchone()
    if row is None:
        return None
    return await _with_items(conn, row)


async def _with_items(conn: aiosqlite.Connection, row: aiosqlite.Row) -> Purchase:
    items_cursor = await conn.execute(
        """
        SELECT * FROM purchase_items
        WHERE purchase_id = ?
        ORDER BY line_number, id
        """,
        (row["id"],),
    )
    items = [row_to_purchase_item(r) for r in await items_cursor.fetchall()]
    return Purchase(
        id=row["id"],
        supplier_id=row["supplier_id"],
        date=date.fromisoformat(row["purchase_date"]),
        items=items,
    )


class SQLitePurchaseStore(IPurchaseStore):
    """SQLite implementation of purchase reads."""

    async def get_purchase(self, purchase_id: int) -> Purchase | None:
        """Get purchase by ID with items."""
        async with get_connection() as conn:
            return await load_purchase(conn, purchase_id)

    async def list_purchases(self, limit: int | None = None, offset: int = 0) -> list[Purchase]:
        """List purchases with items, newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM purchases
                ORDER BY purchase_date DESC, id DESC
                LIMIT ? OFFSET ?
                """,
                (limit if limit is not None else -1, offset),
            )
            rows = await cursor.fetchall()
            return [await _with_items(conn, row) for row in rows]

    async def sum_totals_between(self, start: date, end: date) -> float:
        """Sum purchase totals dated in [start, end)."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT COALESCE(SUM(total_amount), 0.0) FROM purchases
                WHERE purchase_date >= ? AND purchase_date < ?
                """,
                (start.isoformat(), end.isoformat()),
            )
            row = await cursor.fetchone()
            return float(row[0])
