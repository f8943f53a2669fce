"""SQLite implementation of expense storage."""

from datetime import date

import aiosqlite

from stockroom.config import get_logger
from stockroom.core.entities.expense import Expense
from stockroom.core.interfaces.expense_store import IExpenseStore
from stockroom.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteExpenseStore(IExpenseStore):
    """SQLite implementation of expense storage."""

    async def create(self, expense: Expense) -> Expense:
        """Create a new expense."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO expenses (category, amount, description, expense_date)
                VALUES (?, ?, ?, ?)
                """,
                (
                    expense.category,
                    expense.amount,
                    expense.description,
                    expense.date.isoformat(),
                ),
            )
            expense.id = cursor.lastrowid
            logger.info("expense_created", expense_id=expense.id, amount=expense.amount)
            return expense

    async def get(self, expense_id: int) -> Expense | None:
        """Get expense by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM expenses WHERE id = ?", (expense_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_expense(row)

    async def list_expenses(self, limit: int | None = None, offset: int = 0) -> list[Expense]:
        """List expenses, newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM expenses
                ORDER BY expense_date DESC, id DESC
                LIMIT ? OFFSET ?
                """,
                (limit if limit is not None else -1, offset),
            )
            rows = await cursor.fetchall()
            return [self._row_to_expense(row) for row in rows]

    async def update(self, expense: Expense) -> Expense | None:
        """Update an existing expense. None if it does not exist."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE expenses SET
                    category = ?, amount = ?, description = ?, expense_date = ?
                WHERE id = ?
                """,
                (
                    expense.category,
                    expense.amount,
                    expense.description,
                    expense.date.isoformat(),
                    expense.id,
                ),
            )
            if cursor.rowcount == 0:
                return None
            logger.info("expense_updated", expense_id=expense.id)
            return expense

    async def delete(self, expense_id: int) -> bool:
        """Delete an expense by ID."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM expenses WHERE id = ?", (expense_id,)
            )
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("expense_deleted", expense_id=expense_id)
            return deleted

    async def sum_amounts_between(self, start: date, end: date) -> float:
        """Sum expense amounts dated in [start, end)."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT COALESCE(SUM(amount), 0.0) FROM expenses
                WHERE expense_date >= ? AND expense_date < ?
                """,
                (start.isoformat(), end.isoformat()),
            )
            row = await cursor.fetchone()
            return float(row[0])

    @staticmethod
    def _row_to_expense(row: aiosqlite.Row) -> Expense:
        return Expense(
            id=row["id"],
            category=row["category"],
            amount=float(row["amount"]),
            description=row["description"],
            date=date.fromisoformat(row["expense_date"]),
        )
