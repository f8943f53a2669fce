"""
Versioned SQL migrations for the stockroom database.

Migration files are named ``vNNN_name.sql`` and live beside this module.
Each file is applied in one transaction together with its row in
``schema_migrations``, so a failed script leaves no trace. An applied file
whose checksum no longer matches stops the run: the schema on disk and the
scripts have diverged and startup must not continue.
"""

import asyncio
import hashlib
import re
import shutil
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import aiosqlite

from stockroom.config import get_logger, get_settings
from stockroom.infrastructure.storage.sqlite.connection import open_connection

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent

FILENAME_PATTERN = re.compile(r"^v(\d+)_([a-z0-9_]+)\.sql$")

REQUIRED_TABLES = [
    "stock_items",
    "suppliers",
    "purchases",
    "purchase_items",
    "usages",
    "expenses",
    "schema_migrations",
]


@dataclass
class MigrationInfo:
    """A migration script on disk."""

    version: str
    name: str
    path: Path
    checksum: str

    @classmethod
    def from_file(cls, path: Path) -> "MigrationInfo":
        match = FILENAME_PATTERN.match(path.name)
        if not match:
            raise ValueError(f"Invalid migration filename: {path.name}")
        digest = hashlib.sha256(path.read_bytes()).hexdigest()[:16]
        return cls(version=match.group(1), name=match.group(2), path=path, checksum=digest)


@dataclass
class MigrationResult:
    """Outcome of applying one migration."""

    version: str
    name: str
    success: bool
    execution_time_ms: int
    error: str | None = None


async def get_applied_migrations(conn: aiosqlite.Connection) -> dict[str, str]:
    """Applied versions mapped to the checksum recorded when they ran."""
    try:
        cursor = await conn.execute("SELECT version, checksum FROM schema_migrations ORDER BY version")
    except aiosqlite.OperationalError:
        return {}
    return {version: checksum for version, checksum in await cursor.fetchall()}


async def get_current_version(conn: aiosqlite.Connection) -> str | None:
    applied = await get_applied_migrations(conn)
    return max(applied) if applied else None


def discover_migrations(migrations_dir: Path | None = None) -> list[MigrationInfo]:
    """Migration scripts in version order. Misnamed files are skipped."""
    found = []
    for path in (migrations_dir or MIGRATIONS_DIR).glob("v*.sql"):
        try:
            found.append(MigrationInfo.from_file(path))
        except ValueError as e:
            logger.warning("skipping_invalid_migration", path=str(path), error=str(e))
    return sorted(found, key=lambda m: int(m.version))


def create_backup(db_path: Path) -> Path:
    """Copy the database file aside before migrating."""
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = db_path.with_suffix(f".backup_{stamp}.db")
    shutil.copy2(db_path, backup_path)
    logger.info("database_backup_created", backup_path=str(backup_path))
    return backup_path


def restore_backup(db_path: Path, backup_path: Path) -> None:
    shutil.copy2(backup_path, db_path)
    logger.info("database_restored_from_backup", backup_path=str(backup_path))


class Migrator:
    """Applies pending migrations to a single database file."""

    def __init__(self, db_path: Path, migrations_dir: Path | None = None):
        self.db_path = db_path
        self.migrations_dir = migrations_dir

    async def _apply(self, conn: aiosqlite.Connection, migration: MigrationInfo) -> MigrationResult:
        logger.info("applying_migration", version=migration.version, name=migration.name)
        start = time.perf_counter()
        sql = migration.path.read_text(encoding="utf-8")
        # Version and name are constrained by FILENAME_PATTERN, checksum is hex
        script = (
            "BEGIN;\n"
            f"{sql}\n;\n"
            "INSERT OR REPLACE INTO schema_migrations (version, name, checksum) "
            f"VALUES ('{migration.version}', '{migration.name}', '{migration.checksum}');\n"
            "COMMIT;"
        )
        try:
            await conn.executescript(script)
        except aiosqlite.Error as e:
            if conn.in_transaction:
                await conn.rollback()
            elapsed = int((time.perf_counter() - start) * 1000)
            logger.error("migration_failed", version=migration.version, error=str(e))
            return MigrationResult(migration.version, migration.name, False, elapsed, str(e))

        elapsed = int((time.perf_counter() - start) * 1000)
        await conn.execute(
            "UPDATE schema_migrations SET execution_time_ms = ? WHERE version = ?",
            (elapsed, migration.version),
        )
        await conn.commit()
        logger.info("migration_applied", version=migration.version, execution_time_ms=elapsed)
        return MigrationResult(migration.version, migration.name, True, elapsed)

    async def run(self) -> list[MigrationResult]:
        """Apply every pending migration in order, stopping at the first failure."""
        conn = await open_connection(self.db_path)
        try:
            return await self._run(conn)
        finally:
            await conn.close()

    async def _run(self, conn: aiosqlite.Connection) -> list[MigrationResult]:
        results: list[MigrationResult] = []
        applied = await get_applied_migrations(conn)
        for migration in discover_migrations(self.migrations_dir):
            recorded = applied.get(migration.version)
            if recorded == migration.checksum:
                continue
            if recorded is not None:
                logger.error("migration_checksum_changed", version=migration.version)
                results.append(
                    MigrationResult(
                        migration.version,
                        migration.name,
                        False,
                        0,
                        f"Checksum changed: recorded {recorded}, file {migration.checksum}",
                    )
                )
                break

            result = await self._apply(conn, migration)
            results.append(result)
            if not result.success:
                break

            cursor = await conn.execute("PRAGMA foreign_key_check")
            if await cursor.fetchall():
                logger.error("foreign_key_violations_after_migration", version=migration.version)
                result.success = False
                result.error = "Foreign key violations after migration"
                break
        return results


async def initialize_database(
    db_path: Path | None = None,
    create_backup_before: bool | None = None,
    migrations_dir: Path | None = None,
) -> list[MigrationResult]:
    """
    Bring the database schema up to date.

    Args:
        db_path: Database file (default from settings)
        create_backup_before: Copy an existing file aside first
            (default from settings); the copy is restored if migrating raises
            and removed when every migration succeeded
        migrations_dir: Directory holding vNNN_*.sql files

    Returns:
        Results for the migrations attempted in this run
    """
    settings = get_settings()
    db_path = db_path or settings.storage.db_path
    if create_backup_before is None:
        create_backup_before = settings.storage.backup_before_migrate

    db_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("initializing_database", db_path=str(db_path))

    backup_path = create_backup(db_path) if create_backup_before and db_path.exists() else None
    try:
        results = await Migrator(db_path, migrations_dir).run()
    except Exception as e:
        logger.error("database_initialization_failed", error=str(e))
        if backup_path:
            restore_backup(db_path, backup_path)
        raise

    if backup_path and all(r.success for r in results):
        backup_path.unlink()
    logger.info("database_initialized", applied=sum(r.success for r in results))
    return results


run_migrations = initialize_database


async def get_migration_status(db_path: Path | None = None) -> dict:
    """Current version plus applied and pending versions."""
    db_path = db_path or get_settings().storage.db_path
    if not db_path.exists():
        return {
            "exists": False,
            "current_version": None,
            "applied_migrations": [],
            "pending_migrations": [],
        }

    discovered = discover_migrations()
    async with aiosqlite.connect(db_path) as conn:
        applied = await get_applied_migrations(conn)
    return {
        "exists": True,
        "current_version": max(applied) if applied else None,
        "applied_migrations": sorted(applied),
        "pending_migrations": [m.version for m in discovered if m.version not in applied],
        "total_migrations": len(discovered),
    }


async def verify_schema_integrity(db_path: Path | None = None) -> list[dict]:
    """Run SQLite and schema checks. Negative stock is reported as a warning."""
    db_path = db_path or get_settings().storage.db_path

    async with aiosqlite.connect(db_path) as conn:
        cursor = await conn.execute("PRAGMA foreign_key_check")
        fk_violations = len(await cursor.fetchall())

        cursor = await conn.execute("PRAGMA integrity_check")
        integrity = (await cursor.fetchone())[0]

        cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        tables = {row[0] for row in await cursor.fetchall()}
        missing = [t for t in REQUIRED_TABLES if t not in tables]

        negative = 0
        if "stock_items" in tables:
            cursor = await conn.execute("SELECT COUNT(*) FROM stock_items WHERE quantity < 0")
            negative = (await cursor.fetchone())[0]

    return [
        {"check": "foreign_keys", "status": "FAIL" if fk_violations else "PASS", "violations": fk_violations},
        {"check": "integrity", "status": "PASS" if integrity == "ok" else "FAIL", "result": integrity},
        {"check": "required_tables", "status": "FAIL" if missing else "PASS", "missing": missing},
        {"check": "non_negative_stock", "status": "WARN" if negative else "PASS", "items": negative},
    ]


def main() -> None:
    """``stockroom-migrate`` entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Stockroom database migrations")
    parser.add_argument("--db-path", type=Path, help="Database path (default from settings)")
    commands = parser.add_subparsers(dest="command")
    upgrade = commands.add_parser("upgrade", help="Apply pending migrations (default)")
    upgrade.add_argument("--no-backup", action="store_true", help="Skip the pre-migration copy")
    commands.add_parser("status", help="Show applied and pending versions")
    commands.add_parser("verify", help="Check schema integrity")
    args = parser.parse_args()

    async def run() -> int:
        if args.command == "status":
            status = await get_migration_status(args.db_path)
            for key, value in status.items():
                print(f"{key}: {value}")
            return 0

        if args.command == "verify":
            checks = await verify_schema_integrity(args.db_path)
            for check in checks:
                extra = {k: v for k, v in check.items() if k not in ("check", "status")}
                print(f"[{check['status']}] {check['check']} {extra}")
            return int(any(c["status"] == "FAIL" for c in checks))

        results = await initialize_database(
            args.db_path,
            create_backup_before=False if getattr(args, "no_backup", False) else None,
        )
        for result in results:
            outcome = "ok" if result.success else f"FAILED: {result.error}"
            print(f"v{result.version} {result.name} ({result.execution_time_ms}ms) {outcome}")
        if not results:
            print("Schema is up to date")
        return int(not all(r.success for r in results))

    raise SystemExit(asyncio.run(run()))


if __name__ == "__main__":
    main()
