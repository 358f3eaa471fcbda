"""Tests for the schema migrator."""

from pathlib import Path
from unittest.mock import patch

import aiosqlite
import pytest

from gearbook.infrastructure.storage.sqlite.migrations import (
    REQUIRED_TABLES,
    MigrationInfo,
    discover_migrations,
    get_migration_status,
    initialize_database,
    migrator,
    verify_schema_integrity,
)


def test_discover_migrations_in_order():
    """Bundled migrations are found in version order."""
    versions = [m.version for m in discover_migrations()]
    assert versions == sorted(versions)
    assert versions[:2] == ["001", "002"]


async def test_creates_required_tables(migrated_db: Path):
    """A fresh database gets every table."""
    async with aiosqlite.connect(migrated_db) as conn:
        cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        tables = {row[0] for row in await cursor.fetchall()}
    assert set(REQUIRED_TABLES) <= tables


async def test_rerun_is_noop(migrated_db: Path):
    """Applied migrations are skipped on the next start."""
    results = await initialize_database(migrated_db, create_backup_before=False)
    assert results == []


async def test_status_and_integrity(migrated_db: Path):
    status = await get_migration_status(migrated_db)
    assert status["exists"] is True
    assert status["pending_migrations"] == []

    checks = await verify_schema_integrity(migrated_db)
    assert all(c["status"] == "PASS" for c in checks)


async def test_status_of_missing_database(tmp_path: Path):
    status = await get_migration_status(tmp_path / "missing.db")
    assert status["exists"] is False
    assert "001" in status["pending_migrations"]


def _with_extra_migration(directory: Path, sql: str) -> list[MigrationInfo]:
    path = directory / "v099_extra.sql"
    path.write_text(sql, encoding="utf-8")
    return discover_migrations() + [MigrationInfo.from_file(path)]


async def test_backup_removed_after_success(migrated_db: Path):
    results = await initialize_database(migrated_db)

    assert results == []
    assert list(migrated_db.parent.glob("*.backup_*")) == []


async def test_failed_migration_keeps_backup(migrated_db: Path, tmp_path: Path):
    """A broken migration stops the run and leaves the backup for manual recovery."""
    migrations = _with_extra_migration(tmp_path, "CREATE TABLE broken (;")

    with patch.object(migrator, "discover_migrations", return_value=migrations):
        results = await initialize_database(migrated_db)

    assert [r.version for r in results] == ["099"]
    assert results[0].success is False
    assert results[0].error
    assert len(list(migrated_db.parent.glob("*.backup_*"))) == 1


async def test_unexpected_error_restores_backup(migrated_db: Path, tmp_path: Path):
    async with aiosqlite.connect(migrated_db) as conn:
        await conn.execute(
            "INSERT INTO inventory_items (name, category, quantity) VALUES ('CDJ-3000', 'DJ', 4)"
        )
        await conn.commit()

    migrations = _with_extra_migration(tmp_path, "SELECT 1;")

    with (
        patch.object(migrator, "discover_migrations", return_value=migrations),
        patch.object(migrator, "apply_migration", side_effect=RuntimeError("disk full")),
        patch.object(migrator, "restore_backup", wraps=migrator.restore_backup) as restore,
    ):
        with pytest.raises(RuntimeError, match="disk full"):
            await initialize_database(migrated_db)

    restore.assert_called_once()
    assert restore.call_args.args[0] == migrated_db
    async with aiosqlite.connect(migrated_db) as conn:
        cursor = await conn.execute("SELECT name FROM inventory_items")
        assert [row[0] for row in await cursor.fetchall()] == ["CDJ-3000"]
