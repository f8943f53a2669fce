"""SQLite read side of usages."""

from datetime import date

import aiosqlite

from stockroom.core.entities.usage import Usage
from stockroom.core.interfaces.usage_store import IUsageStore
from stockroom.infrastructure.storage.sqlite.connection import get_connection


def row_to_usage(row: aiosqlite.Row) -> Usage:
    """Convert a usages row to a Usage entity."""
    return Usage(
        id=row["id"],
        stock_item_id=row["stock_item_id"],
        quantity_used=float(row["quantity_used"]),
        date=date.fromisoformat(row["usage_date"]),
        user=row["username"],
    )


class SQLiteUsageStore(IUsageStore):
    """SQLite implementation of usage reads."""

    async def get_usage(self, usage_id: int) -> Usage | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM usages WHERE id = ?", (usage_id,)
            )
            row = await cursor.fetchone()
            return row_to_usage(row) if row else None

    async def list_usages(self, limit: int | None = None, offset: int = 0) -> list[Usage]:
        """List usages, newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM usages
                ORDER BY usage_date DESC, id DESC
                LIMIT ? OFFSET ?
                """,
                (limit if limit is not None else -1, offset),
            )
            rows = await cursor.fetchall()
            return [row_to_usage(row) for row in rows]

    async def count_between(self, start: date, end: date) -> int:
        """Count usages dated in [start, end)."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT COUNT(*) FROM usages
                WHERE usage_date >= ? AND usage_date < ?
                """,
                (start.isoformat(), end.isoformat()),
            )
            row = await cursor.fetchone()
            return int(row[0])
