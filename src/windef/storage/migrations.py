# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Versioned schema migrations for the results store.

Applied versions are tracked in a ``schema_migrations`` table; each migration
is idempotent and committed on its own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import Any

import aiosqlite

logger = logging.getLogger(__name__)

MigrationFunc = Callable[[aiosqlite.Connection], Coroutine[Any, Any, None]]


@dataclass(frozen=True, slots=True)
class Migration:
    """A single database migration."""

    version: int
    name: str
    func: MigrationFunc


_MIGRATIONS: list[Migration] = []


def _register(version: int, name: str) -> Callable[[MigrationFunc], MigrationFunc]:
    """Decorator that registers a migration function."""

    def decorator(fn: MigrationFunc) -> MigrationFunc:
        _MIGRATIONS.append(Migration(version=version, name=name, func=fn))
        return fn

    return decorator


_CREATE_SCHEMA_MIGRATIONS = """
CREATE TABLE IF NOT EXISTS schema_migrations (
    version INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (datetime('now'))
);
"""


async def get_current_version(db: aiosqlite.Connection) -> int:
    """Return the highest applied migration version, or 0 if none."""
    await db.execute(_CREATE_SCHEMA_MIGRATIONS)
    cursor = await db.execute(
        "SELECT COALESCE(MAX(version), 0) FROM schema_migrations"
    )
    row = await cursor.fetchone()
    return int(row[0]) if row else 0


async def run_migrations(db: aiosqlite.Connection) -> list[Migration]:
    """Run all pending migrations in order and return those applied."""
    current = await get_current_version(db)
    applied: list[Migration] = []

    for migration in _MIGRATIONS:
        if migration.version <= current:
            continue

        logger.info("Applying migration %03d: %s", migration.version, migration.name)
        await migration.func(db)
        await db.execute(
            "INSERT OR IGNORE INTO schema_migrations (version, name) VALUES (?, ?)",
            (migration.version, migration.name),
        )
        await db.commit()
        applied.append(migration)

    return applied


# =========================================================================
# Migration 001 -- plugin results documents
# =========================================================================

_CREATE_PLUGIN_RESULTS = """
CREATE TABLE IF NOT EXISTS plugin_results (
    id TEXT NOT NULL,
    name TEXT NOT NULL,
    category TEXT NOT NULL,
    data TEXT NOT NULL DEFAULT '{}',
    created_at TEXT NOT NULL DEFAULT (datetime('now')),
    updated_at TEXT NOT NULL DEFAULT (datetime('now')),
    PRIMARY KEY (id, name)
);
"""

_CREATE_PLUGIN_RESULTS_CATEGORY_INDEX = """
CREATE INDEX IF NOT EXISTS idx_plugin_results_category ON plugin_results(category);
"""


@_register(1, "plugin_results")
async def _migration_001(db: aiosqlite.Connection) -> None:
    await db.execute(_CREATE_PLUGIN_RESULTS)
    await db.execute(_CREATE_PLUGIN_RESULTS_CATEGORY_INDEX)
