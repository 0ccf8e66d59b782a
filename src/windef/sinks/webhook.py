# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Best-effort webhook callback for scan results."""

from __future__ import annotations

import logging

import httpx

from windef.core.constants import SCAN_ID_HEADER
from windef.core.exceptions import SinkError
from windef.core.logging import log_context
from windef.models.result import ScanResult, WindowsDefender

logger = logging.getLogger("windef.sinks.webhook")

_TIMEOUT_SECONDS = 10.0


async def notify_webhook(
    result: ScanResult,
    *,
    url: str,
    scan_id: str,
    proxy: str = "",
    timeout: float = _TIMEOUT_SECONDS,
    path: str = "",
) -> int:
    """POST the result envelope to *url* once and return the response status.

    Non-2xx responses are logged, not raised, and never retried.

    Raises:
        SinkError: no URL was given, or the request could not be delivered.
    """
    if not url:
        raise SinkError("Webhook callback requested but MALICE_ENDPOINT is not set")

    body = WindowsDefender(results=result).to_json()
    headers = {"Content-Type": "application/json", SCAN_ID_HEADER: scan_id}
    ctx = log_context(path)

    try:
        async with httpx.AsyncClient(proxy=proxy or None, timeout=timeout) as client:
            response = await client.post(url, content=body, headers=headers)
    except httpx.HTTPError as exc:
        msg = f"Webhook POST to {url} failed: {exc}"
        raise SinkError(msg) from exc

    if response.is_success:
        logger.info("Webhook delivered to %s (status %s)", url, response.status_code, extra=ctx)
    else:
        logger.warning(
            "Webhook to %s answered %s %s",
            url,
            response.status_code,
            response.reason_phrase,
            extra=ctx,
        )
    return response.status_code
