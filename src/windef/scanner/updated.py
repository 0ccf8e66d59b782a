# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Definition update date lookup from the UPDATED marker file."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from windef.core.constants import UPDATED_DATE_LAYOUT, UPDATED_LAYOUT

logger = logging.getLogger("windef.scanner.updated")


def get_updated_date(marker: Path | str, build_time: str) -> str:
    """Return the raw marker content, or *build_time* when the marker is absent."""
    marker = Path(marker)
    if not marker.exists():
        return build_time
    return marker.read_text(encoding="utf-8").strip()


def parse_updated_date(raw: str) -> str:
    """Normalize a ``YYYYMMDDHHmm`` (or ``YYYYMMDD``) string to ``YYYYMMDD``.

    Malformed input yields an empty string.
    """
    raw = raw.strip()
    for layout in (UPDATED_LAYOUT, UPDATED_DATE_LAYOUT):
        try:
            return datetime.strptime(raw, layout).strftime(UPDATED_DATE_LAYOUT)
        except ValueError:
            continue
    logger.debug("Unparseable update date %r", raw)
    return ""


def resolve_updated_date(marker: Path | str, build_time: str) -> str:
    """Definition date for results: build time as-is, or the normalized marker date."""
    marker = Path(marker)
    if not marker.exists():
        return build_time
    try:
        raw = get_updated_date(marker, build_time)
    except (OSError, UnicodeDecodeError):
        logger.warning("Cannot read update marker %s", marker, exc_info=True)
        return ""
    return parse_updated_date(raw)
