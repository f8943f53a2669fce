"""SQLite implementation of supplier storage."""

import aiosqlite

from stockroom.config import get_logger
from stockroom.core.entities.supplier import Supplier
from stockroom.core.interfaces.supplier_store import ISupplierStore
from stockroom.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteSupplierStore(ISupplierStore):
    """SQLite implementation of supplier storage."""

    async def create(self, supplier: Supplier) -> Supplier:
        """Create a new supplier."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO suppliers (name, phone, email, contact_person, address)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    supplier.name,
                    supplier.phone,
                    supplier.email,
                    supplier.contact_person,
                    supplier.address,
                ),
            )
            supplier.id = cursor.lastrowid
            logger.info("supplier_created", supplier_id=supplier.id)
            return supplier

    async def get(self, supplier_id: int) -> Supplier | None:
        """Get supplier by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM suppliers WHERE id = ?", (supplier_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_supplier(row)

    async def list_suppliers(self, limit: int | None = None, offset: int = 0) -> list[Supplier]:
        """List suppliers ordered by name."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM suppliers
                ORDER BY name, id
                LIMIT ? OFFSET ?
                """,
                (limit if limit is not None else -1, offset),
            )
            rows = await cursor.fetchall()
            return [self._row_to_supplier(row) for row in rows]

    async def update(self, supplier: Supplier) -> Supplier | None:
        """Update an existing supplier. None if it does not exist."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE suppliers SET
                    name = ?, phone = ?, email = ?,
                    contact_person = ?, address = ?
                WHERE id = ?
                """,
                (
                    supplier.name,
                    supplier.phone,
                    supplier.email,
                    supplier.contact_person,
                    supplier.address,
                    supplier.id,
                ),
            )
            if cursor.rowcount == 0:
                return None
            logger.info("supplier_updated", supplier_id=supplier.id)
            return supplier

    async def delete(self, supplier_id: int) -> bool:
        """Delete a supplier by ID. Purchases keep their supplier_id."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM suppliers WHERE id = ?", (supplier_id,)
            )
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("supplier_deleted", supplier_id=supplier_id)
            return deleted

    @staticmethod
    def _row_to_supplier(row: aiosqlite.Row) -> Supplier:
        return Supplier(
            id=row["id"],
            name=row["name"],
            phone=row["phone"],
            email=row["email"],
            contact_person=row["contact_person"],
            address=row["address"],
        )
