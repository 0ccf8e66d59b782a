# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Upload-and-scan endpoint."""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path

import aiofiles
from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from windef.core.config import Settings, get_settings
from windef.core.exceptions import WindefError
from windef.core.logging import log_context
from windef.models.result import WindowsDefender
from windef.scanner.engine import WindowsDefenderScanner

logger = logging.getLogger("windef.api.scan")

router = APIRouter()

_CHUNK_SIZE = 1024 * 1024


def get_scanner() -> WindowsDefenderScanner:
    return WindowsDefenderScanner(settings=get_settings())


def _staging_dir(settings: Settings) -> str:
    if settings.malware_dir.is_dir():
        return str(settings.malware_dir)
    return tempfile.gettempdir()


async def _stage_upload(upload: UploadFile, directory: str) -> str:
    """Copy the upload into a uniquely named ``web_*`` file and return its path."""
    fd, staged = tempfile.mkstemp(prefix="web_", dir=directory)
    os.close(fd)
    try:
        async with aiofiles.open(staged, "wb") as fh:
            while chunk := await upload.read(_CHUNK_SIZE):
                await fh.write(chunk)
    except BaseException:
        Path(staged).unlink(missing_ok=True)
        raise
    return staged


@router.post("/scan")
async def scan_upload(
    malware: UploadFile | None = File(default=None),
    scanner: WindowsDefenderScanner = Depends(get_scanner),
) -> Response:
    """Scan an uploaded file and return the Windows Defender result."""
    if malware is None:
        logger.error("Upload without a 'malware' file part")
        return PlainTextResponse("Please supply a valid file to scan.\n", status_code=400)

    settings = get_settings()
    logger.debug("Uploaded fileName: %s", malware.filename)

    try:
        staged = await _stage_upload(malware, _staging_dir(settings))
    except OSError as exc:
        logger.exception("Cannot stage upload %s", malware.filename)
        return JSONResponse({"error": f"Cannot stage upload: {exc}"}, status_code=500)
    finally:
        await malware.close()

    try:
        result = await scanner.scan(staged, settings.web_timeout)
    except WindefError as exc:
        logger.error("Scan failed: %s", exc, extra=log_context(staged))
        return JSONResponse({"error": str(exc)}, status_code=500)
    finally:
        with contextlib.suppress(FileNotFoundError):
            os.remove(staged)

    return Response(
        content=WindowsDefender(results=result).to_json(),
        media_type="application/json",
    )
