"""Unit tests for database migrator."""

from pathlib import Path
from unittest.mock import patch

import aiosqlite
import pytest

import stockroom.infrastructure.storage.sqlite.migrations.migrator as migrator_module
from stockroom.infrastructure.storage.sqlite.migrations.migrator import (
    REQUIRED_TABLES,
    MigrationInfo,
    create_backup,
    discover_migrations,
    get_applied_migrations,
    get_current_version,
    get_migration_status,
    initialize_database,
    restore_backup,
    verify_schema_integrity,
)


class TestMigrationInfo:
    def test_from_file_parses_filename(self, tmp_path: Path):
        migration_file = tmp_path / "v001_initial_schema.sql"
        migration_file.write_text("-- Test migration\nSELECT 1;")

        info = MigrationInfo.from_file(migration_file)

        assert info.version == "001"
        assert info.name == "initial_schema"
        assert len(info.checksum) == 16

    def test_invalid_filename_raises(self, tmp_path: Path):
        invalid_file = tmp_path / "invalid_migration.sql"
        invalid_file.write_text("SELECT 1;")

        with pytest.raises(ValueError, match="Invalid migration filename"):
            MigrationInfo.from_file(invalid_file)


class TestDiscoverMigrations:
    def test_bundled_migrations(self):
        versions = [m.version for m in discover_migrations()]
        assert versions[0] == "001"
        assert versions == sorted(versions)

    def test_skips_invalid_filenames(self, tmp_path: Path):
        (tmp_path / "v002_second.sql").write_text("SELECT 1;")
        (tmp_path / "v001_first.sql").write_text("SELECT 1;")
        (tmp_path / "vbad.sql").write_text("SELECT 1;")

        found = discover_migrations(tmp_path)

        assert [m.name for m in found] == ["first", "second"]


class TestInitializeDatabase:
    async def test_creates_schema(self, tmp_path: Path, mock_settings):
        db_path = tmp_path / "nested" / "stock.db"
        with patch.object(migrator_module, "get_settings", return_value=mock_settings):
            results = await initialize_database(db_path)

        assert [r.version for r in results] == ["001"]
        assert all(r.success for r in results)
        async with aiosqlite.connect(db_path) as conn:
            cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
            tables = {row[0] for row in await cursor.fetchall()}
            assert set(REQUIRED_TABLES) <= tables
            assert await get_current_version(conn) == "001"

    async def test_skips_already_applied(self, temp_db_path: Path, mock_settings):
        with patch.object(migrator_module, "get_settings", return_value=mock_settings):
            await initialize_database(temp_db_path)
            second = await initialize_database(temp_db_path)

        assert second == []

    async def test_failed_migration_is_reported(self, tmp_path: Path, mock_settings):
        migrations = tmp_path / "migrations"
        migrations.mkdir()
        (migrations / "v001_base.sql").write_text(
            "CREATE TABLE schema_migrations (version TEXT PRIMARY KEY, name TEXT, "
            "checksum TEXT, applied_at TEXT, execution_time_ms INTEGER);"
        )
        (migrations / "v002_broken.sql").write_text("CREATE TABLE oops (;")
        (migrations / "v003_never.sql").write_text("CREATE TABLE never (id INTEGER);")

        with patch.object(migrator_module, "get_settings", return_value=mock_settings):
            results = await initialize_database(
                tmp_path / "db.sqlite", migrations_dir=migrations
            )

        assert [(r.version, r.success) for r in results] == [("001", True), ("002", False)]
        assert results[1].error

    async def test_changed_checksum_stops_run(self, tmp_path: Path, mock_settings):
        migrations = tmp_path / "migrations"
        migrations.mkdir()
        first = migrations / "v001_base.sql"
        first.write_text(
            "CREATE TABLE schema_migrations (version TEXT PRIMARY KEY, name TEXT, "
            "checksum TEXT, applied_at TEXT, execution_time_ms INTEGER);"
        )
        db_path = tmp_path / "db.sqlite"

        with patch.object(migrator_module, "get_settings", return_value=mock_settings):
            await initialize_database(db_path, migrations_dir=migrations)
            first.write_text(first.read_text() + "\n-- edited")
            (migrations / "v002_next.sql").write_text("CREATE TABLE later (id INTEGER);")
            results = await initialize_database(db_path, migrations_dir=migrations)

        assert len(results) == 1
        assert results[0].version == "001"
        assert results[0].success is False
        assert results[0].error.startswith("Checksum changed")

    async def test_backup_removed_after_success(self, temp_db_path: Path, mock_settings):
        with patch.object(migrator_module, "get_settings", return_value=mock_settings):
            await initialize_database(temp_db_path, create_backup_before=False)
            await initialize_database(temp_db_path, create_backup_before=True)

        assert list(temp_db_path.parent.glob("*.backup_*")) == []


class TestBackup:
    def test_create_and_restore(self, tmp_path: Path):
        db_path = tmp_path / "test.db"
        db_path.write_bytes(b"original")

        backup = create_backup(db_path)
        db_path.write_bytes(b"changed")
        restore_backup(db_path, backup)

        assert ".backup_" in backup.name
        assert db_path.read_bytes() == b"original"


class TestStatusAndIntegrity:
    async def test_status_when_missing(self, tmp_path: Path, mock_settings):
        with patch.object(migrator_module, "get_settings", return_value=mock_settings):
            status = await get_migration_status(tmp_path / "absent.db")
        assert status["exists"] is False

    async def test_status_after_migration(self, migrated_db: Path, mock_settings):
        with patch.object(migrator_module, "get_settings", return_value=mock_settings):
            status = await get_migration_status(migrated_db)

        assert status["current_version"] == "001"
        assert status["pending_migrations"] == []
        async with aiosqlite.connect(migrated_db) as conn:
            assert "001" in await get_applied_migrations(conn)

    async def test_integrity_passes_on_fresh_schema(self, migrated_db: Path, mock_settings):
        with patch.object(migrator_module, "get_settings", return_value=mock_settings):
            checks = await verify_schema_integrity(migrated_db)

        assert {c["check"]: c["status"] for c in checks} == {
            "foreign_keys": "PASS",
            "integrity": "PASS",
            "required_tables": "PASS",
            "non_negative_stock": "PASS",
        }

    async def test_negative_stock_is_a_warning(self, migrated_db: Path, mock_settings):
        async with aiosqlite.connect(migrated_db) as conn:
            await conn.execute(
                "INSERT INTO stock_items (name, category, quantity, unit_price) "
                "VALUES ('x', 'y', -1, 1)"
            )
            await conn.commit()

        with patch.object(migrator_module, "get_settings", return_value=mock_settings):
            checks = await verify_schema_integrity(migrated_db)

        negative = next(c for c in checks if c["check"] == "non_negative_stock")
        assert negative["status"] == "WARN"
        assert negative["items"] == 1
