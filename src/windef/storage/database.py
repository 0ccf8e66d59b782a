# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Results store connection management (SQLite via aiosqlite)."""

from __future__ import annotations

from pathlib import Path

import aiosqlite

from windef.core.exceptions import StorageError
from windef.storage.migrations import run_migrations

_db: aiosqlite.Connection | None = None


async def init_db(
    db_path: Path | str,
    *,
    auto_migrate: bool = True,
) -> aiosqlite.Connection:
    """Open the results store at *db_path*, migrate it, and return the connection.

    A ``sqlite://`` prefix on the address is accepted and stripped.
    """
    global _db

    if _db is not None:
        return _db

    address = str(db_path).removeprefix("sqlite://")
    if not address:
        raise StorageError("No results store address configured")

    try:
        _db = await aiosqlite.connect(address)
        _db.row_factory = aiosqlite.Row
        await _db.execute("PRAGMA journal_mode=WAL")

        if auto_migrate:
            await run_migrations(_db)

        return _db
    except Exception as exc:
        if _db is not None:
            await _db.close()
        _db = None
        msg = f"Failed to initialize results store at {address}: {exc}"
        raise StorageError(msg) from exc


async def close_db() -> None:
    """Close the store connection."""
    global _db

    if _db is not None:
        await _db.close()
        _db = None
