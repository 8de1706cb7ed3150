"""Unit tests for database migrator."""

from pathlib import Path

import aiosqlite
import pytest

from stockledger.infrastructure.storage.sqlite.migrations.migrator import (
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
    """Tests for MigrationInfo dataclass."""

    def test_from_file_parses_filename(self, tmp_path: Path):
        migration_file = tmp_path / "v001_initial_schema.sql"
        migration_file.write_text("SELECT 1;")

        info = MigrationInfo.from_file(migration_file)

        assert info.version == "001"
        assert info.name == "initial_schema"
        assert len(info.checksum) == 16

    def test_different_content_different_checksum(self, tmp_path: Path):
        first = tmp_path / "v001_a.sql"
        second = tmp_path / "v002_b.sql"
        first.write_text("SELECT 1;")
        second.write_text("SELECT 2;")

        assert MigrationInfo.from_file(first).checksum != MigrationInfo.from_file(second).checksum

    def test_invalid_filename_raises(self, tmp_path: Path):
        bad = tmp_path / "initial.sql"
        bad.write_text("SELECT 1;")
        with pytest.raises(ValueError):
            MigrationInfo.from_file(bad)


class TestDiscoverMigrations:
    def test_sorted_and_invalid_skipped(self, tmp_path: Path):
        (tmp_path / "v002_second.sql").write_text("SELECT 2;")
        (tmp_path / "v001_first.sql").write_text("SELECT 1;")
        (tmp_path / "vx_broken.sql").write_text("SELECT 3;")

        migrations = discover_migrations(tmp_path)

        assert [m.version for m in migrations] == ["001", "002"]

    def test_packaged_migrations_present(self):
        assert discover_migrations()[0].version == "001"


class TestInitializeDatabase:
    async def test_creates_schema(self, tmp_path: Path):
        db_path = tmp_path / "nested" / "ledger.db"

        results = await initialize_database(db_path, create_backup_before=False)

        assert results and all(r.success for r in results)
        checks = await verify_schema_integrity(db_path)
        assert all(check["status"] == "PASS" for check in checks)

    async def test_second_run_is_noop(self, tmp_path: Path):
        db_path = tmp_path / "ledger.db"
        await initialize_database(db_path, create_backup_before=False)

        assert await initialize_database(db_path) == []
        assert list(tmp_path.glob("*.backup_*.db")) == []

    async def test_records_applied_versions(self, tmp_path: Path):
        db_path = tmp_path / "ledger.db"
        await initialize_database(db_path, create_backup_before=False)

        async with aiosqlite.connect(db_path) as conn:
            applied = await get_applied_migrations(conn)
            current = await get_current_version(conn)

        assert "001" in applied
        assert current == max(applied)

    async def test_applied_empty_without_table(self, tmp_path: Path):
        async with aiosqlite.connect(tmp_path / "empty.db") as conn:
            assert await get_applied_migrations(conn) == {}
            assert await get_current_version(conn) is None


class TestMigrationStatus:
    async def test_missing_database(self, tmp_path: Path):
        status = await get_migration_status(tmp_path / "missing.db")
        assert status["exists"] is False
        assert "001" in status["pending_migrations"]

    async def test_after_migration(self, tmp_path: Path):
        db_path = tmp_path / "ledger.db"
        await initialize_database(db_path, create_backup_before=False)

        status = await get_migration_status(db_path)

        assert status["exists"] is True
        assert status["pending_migrations"] == []

    async def test_missing_tables_reported(self, tmp_path: Path):
        db_path = tmp_path / "bare.db"
        async with aiosqlite.connect(db_path) as conn:
            await conn.execute("CREATE TABLE batches (id TEXT)")
            await conn.commit()

        checks = await verify_schema_integrity(db_path)

        tables = next(c for c in checks if c["check"] == "required_tables")
        assert tables["status"] == "FAIL"
        assert set(tables["missing"]) == set(REQUIRED_TABLES) - {"batches"}


class TestBackup:
    def test_backup_and_restore(self, tmp_path: Path):
        db_path = tmp_path / "ledger.db"
        db_path.write_bytes(b"original")

        backup_path = create_backup(db_path)
        db_path.write_bytes(b"changed")
        restore_backup(db_path, backup_path)

        assert backup_path.name.startswith("ledger.backup_")
        assert db_path.read_bytes() == b"original"
