# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Publish one scan result to every enabled sink.

Sinks run in a fixed order (console, store, webhook). A failing sink is logged
and collected; the remaining sinks still run and the caller decides what the
collected failures mean for the exit status.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass

import aiofiles

from windef.core.config import Settings, get_settings
from windef.core.exceptions import SinkError
from windef.core.logging import log_context
from windef.models.result import ScanResult
from windef.sinks.console import print_json, print_markdown_table
from windef.sinks.store import write_results
from windef.sinks.webhook import notify_webhook

logger = logging.getLogger("windef.sinks.fanout")

_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True, slots=True)
class SinkOptions:
    """Per-invocation sink switches from the command line."""

    table: bool = False
    callback: bool = False
    proxy: bool = False


async def sha256_file(path: str) -> str:
    digest = hashlib.sha256()
    async with aiofiles.open(path, "rb") as fh:
        while chunk := await fh.read(_CHUNK_SIZE):
            digest.update(chunk)
    return digest.hexdigest()


async def resolve_scan_id(path: str, override: str = "") -> str:
    """Scan ID from MALICE_SCANID, else the SHA-256 of the file content."""
    if override:
        return override
    return await sha256_file(path)


async def publish(
    result: ScanResult,
    path: str,
    options: SinkOptions | None = None,
    settings: Settings | None = None,
) -> list[SinkError]:
    """Run all enabled sinks for *result* and return the failures."""
    options = options or SinkOptions()
    settings = settings or get_settings()
    ctx = log_context(path)
    errors: list[SinkError] = []

    if options.table:
        print_markdown_table(result)
    else:
        print_json(result)

    if not settings.db_path and not options.callback:
        return errors

    try:
        scan_id = await resolve_scan_id(path, settings.scanid)
    except OSError as exc:
        err = SinkError(f"Cannot compute scan ID for {path}: {exc}")
        logger.error("%s", err, extra=ctx)
        return [err]

    if settings.db_path:
        try:
            await write_results(result, address=settings.db_path, scan_id=scan_id, path=path)
        except SinkError as exc:
            logger.error("Results store write failed: %s", exc, extra=ctx)
            errors.append(exc)

    if options.callback:
        try:
            await notify_webhook(
                result,
                url=settings.endpoint,
                scan_id=scan_id,
                proxy=settings.proxy if options.proxy else "",
                timeout=settings.webhook_timeout,
                path=path,
            )
        except SinkError as exc:
            logger.error("Webhook callback failed: %s", exc, extra=ctx)
            errors.append(exc)

    return errors
