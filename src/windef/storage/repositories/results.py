# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Repository for plugin result documents."""

from __future__ import annotations

import json

import aiosqlite

from windef.core.exceptions import StorageError
from windef.models.result import PluginResults


class PluginResultRepository:
    """Upsert and lookup operations for the plugin_results table."""

    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def upsert(self, doc: PluginResults) -> None:
        """Insert the document, or replace this plugin's data for an existing scan ID."""
        try:
            await self._db.execute(
                """
                INSERT INTO plugin_results (id, name, category, data)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(id, name) DO UPDATE SET
                    category = excluded.category,
                    data = excluded.data,
                    updated_at = datetime('now')
                """,
                (doc.id, doc.name, doc.category, json.dumps(doc.data)),
            )
            await self._db.commit()
        except aiosqlite.Error as exc:
            msg = f"Failed to write results for scan {doc.id}: {exc}"
            raise StorageError(msg) from exc

    async def get(self, scan_id: str, name: str) -> PluginResults | None:
        cursor = await self._db.execute(
            "SELECT id, name, category, data FROM plugin_results WHERE id = ? AND name = ?",
            (scan_id, name),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return PluginResults(
            id=row["id"],
            name=row["name"],
            category=row["category"],
            data=json.loads(row["data"] or "{}"),
        )

