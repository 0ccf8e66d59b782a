# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the results store: connection, migrations, and repository."""

from __future__ import annotations

import aiosqlite
import pytest

from windef.core.exceptions import StorageError
from windef.models.result import PluginResults, ScanResult
from windef.storage.database import close_db, init_db
from windef.storage.migrations import get_current_version, run_migrations
from windef.storage.repositories.results import PluginResultRepository


@pytest.fixture
async def db():
    """Create an in-memory store, run migrations, yield, then close."""
    import windef.storage.database as db_mod

    db_mod._db = None

    conn = await init_db(":memory:")
    yield conn
    await close_db()


@pytest.fixture
def repo(db: aiosqlite.Connection) -> PluginResultRepository:
    return PluginResultRepository(db)


def _doc(scan_id: str = "scan-001", **data) -> PluginResults:
    result = ScanResult(**({"engine": "1.1", "updated": "20260101"} | data))
    return PluginResults.from_result(scan_id, result)


async def _row_count(repo: PluginResultRepository, scan_id: str) -> int:
    cursor = await repo._db.execute(
        "SELECT COUNT(*) FROM plugin_results WHERE id = ?", (scan_id,)
    )
    (count,) = await cursor.fetchone()
    return count


class TestDatabase:
    async def test_empty_address(self) -> None:
        with pytest.raises(StorageError):
            await init_db("")

    async def test_sqlite_prefix_is_stripped(self, tmp_path) -> None:
        address = f"sqlite://{tmp_path / 'results.db'}"
        await init_db(address)
        await close_db()
        assert (tmp_path / "results.db").exists()

    async def test_unopenable_path(self, tmp_path) -> None:
        with pytest.raises(StorageError):
            await init_db(tmp_path / "missing" / "dir" / "results.db")


class TestMigrations:
    async def test_schema_version(self, db) -> None:
        assert await get_current_version(db) == 1

    async def test_rerun_is_noop(self, db) -> None:
        assert await run_migrations(db) == []


class TestPluginResultRepository:
    async def test_upsert_and_get(self, repo: PluginResultRepository) -> None:
        await repo.upsert(_doc(infected=True, result="Virus:DOS/EICAR_Test_File"))

        doc = await repo.get("scan-001", "windows-defender")
        assert doc is not None
        assert doc.category == "av"
        assert doc.data["infected"] is True
        assert doc.data["result"] == "Virus:DOS/EICAR_Test_File"

    async def test_upsert_replaces_existing(self, repo: PluginResultRepository) -> None:
        await repo.upsert(_doc(infected=True, result="Worm:Win32/Old"))
        await repo.upsert(_doc())

        doc = await repo.get("scan-001", "windows-defender")
        assert doc is not None
        assert doc.data["infected"] is False
        assert await _row_count(repo, "scan-001") == 1

    async def test_other_plugins_share_scan_id(self, repo: PluginResultRepository) -> None:
        await repo.upsert(_doc())
        await repo.upsert(PluginResults(id="scan-001", name="clamav", data={"infected": False}))

        assert await _row_count(repo, "scan-001") == 2
        other = await repo.get("scan-001", "clamav")
        assert other is not None
        assert other.data == {"infected": False}
        assert await repo.get("scan-001", "windows-defender") is not None

    async def test_get_missing(self, repo: PluginResultRepository) -> None:
        assert await repo.get("nope", "windows-defender") is None

    async def test_write_failure_raises_storage_error(self, db, repo) -> None:
        await db.execute("DROP TABLE plugin_results")
        with pytest.raises(StorageError):
            await repo.upsert(_doc())
