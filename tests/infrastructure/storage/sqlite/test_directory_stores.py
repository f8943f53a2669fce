"""Tests for SQLite supplier and expense stores."""

from datetime import date

from stockroom.core.entities import Expense, Supplier
from stockroom.infrastructure.storage.sqlite import SQLiteExpenseStore, SQLiteSupplierStore


class TestSQLiteSupplierStore:
    async def test_crud(self, migrated_db):
        store = SQLiteSupplierStore()
        created = await store.create(
            Supplier(name="Beta", phone="1", email="b@beta.test", contact_person="Ann")
        )
        assert (await store.get(created.id)).contact_person == "Ann"

        created.address = "1 Main St"
        created.contact_person = None
        await store.update(created)
        fetched = await store.get(created.id)
        assert fetched.address == "1 Main St"
        assert fetched.contact_person is None

        assert await store.delete(created.id) is True
        assert await store.get(created.id) is None

    async def test_list_ordered_by_name(self, migrated_db):
        store = SQLiteSupplierStore()
        await store.create(Supplier(name="Zed", phone="1", email="z@z.test"))
        await store.create(Supplier(name="Alpha", phone="1", email="a@a.test"))
        assert [s.name for s in await store.list_suppliers()] == ["Alpha", "Zed"]

    async def test_update_missing(self, migrated_db):
        supplier = Supplier(id=999, name="X", phone="1", email="x@x.test")
        assert await SQLiteSupplierStore().update(supplier) is None


class TestSQLiteExpenseStore:
    async def test_crud(self, migrated_db):
        store = SQLiteExpenseStore()
        created = await store.create(
            Expense(category="Rent", amount=500, description="May rent", date=date(2024, 5, 1))
        )
        fetched = await store.get(created.id)
        assert fetched.date == date(2024, 5, 1)
        assert fetched.amount == 500

        created.amount = 550
        await store.update(created)
        assert (await store.get(created.id)).amount == 550

        assert await store.delete(created.id) is True
        assert await store.delete(created.id) is False

    async def test_sum_is_half_open(self, migrated_db):
        store = SQLiteExpenseStore()
        await store.create(Expense(category="a", amount=10, description="", date=date(2024, 4, 30)))
        await store.create(Expense(category="a", amount=20, description="", date=date(2024, 5, 1)))
        await store.create(Expense(category="a", amount=30, description="", date=date(2024, 5, 31)))
        await store.create(Expense(category="a", amount=40, description="", date=date(2024, 6, 1)))

        total = await store.sum_amounts_between(date(2024, 5, 1), date(2024, 6, 1))
        assert total == 50

    async def test_sum_empty_is_zero(self, migrated_db):
        assert await SQLiteExpenseStore().sum_amounts_between(date(2024, 1, 1), date(2024, 2, 1)) == 0.0
