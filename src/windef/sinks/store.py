# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Document-store sink: upsert a result document keyed by scan ID."""

from __future__ import annotations

import logging

from windef.core.logging import log_context
from windef.models.result import PluginResults, ScanResult
from windef.storage.database import close_db, init_db
from windef.storage.repositories.results import PluginResultRepository

logger = logging.getLogger("windef.sinks.store")


async def write_results(
    result: ScanResult,
    *,
    address: str,
    scan_id: str,
    path: str = "",
) -> PluginResults:
    """Open the store at *address*, write the result under *scan_id*, then close it.

    Raises:
        StorageError: the store could not be opened or written.
    """
    doc = PluginResults.from_result(scan_id, result)
    db = await init_db(address)
    try:
        await PluginResultRepository(db).upsert(doc)
    finally:
        await close_db()
    logger.debug("Stored results for scan %s in %s", scan_id, address, extra=log_context(path))
    return doc
