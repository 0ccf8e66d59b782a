# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Scan orchestrator: runs mpclient against one file under a deadline."""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import time
from pathlib import Path

from windef.core.config import Settings, get_settings
from windef.core.exceptions import ScanError, ScanTimeoutError
from windef.models.result import ScanRequest, ScanResult
from windef.scanner.parser import parse_output
from windef.scanner.updated import resolve_updated_date

logger = logging.getLogger("windef.scanner.engine")


class WindowsDefenderScanner:
    """Invoke ``mpclient <file>`` from the loadlibrary install directory.

    The install directory is passed as the child's working directory, so the
    process-wide cwd is never touched and concurrent scans do not interfere.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    @property
    def workdir(self) -> Path:
        return self._settings.loadlibrary_dir

    async def scan(self, path: str | Path, timeout: int | None = None) -> ScanResult:
        """Scan *path* and return the parsed result.

        Raises:
            ScanTimeoutError: the scanner ran past *timeout* seconds.
            ScanError: the scanner could not be started, exited with an
                error, or produced unusable output.
        """
        request = ScanRequest.from_path(path, timeout or self._settings.timeout)
        output, error = await self._run(request)
        return parse_output(
            output,
            error,
            engine=self._settings.engine_version,
            updated=resolve_updated_date(
                self._settings.updated_file, self._settings.build_time
            ),
            path=request.path,
        )

    async def _run(self, request: ScanRequest) -> tuple[str, Exception | None]:
        ctx = request.log_context()
        logger.debug(
            "mpclient paths",
            extra={**ctx, "pwd": str(self.workdir)},
        )

        start = time.monotonic()
        try:
            proc = await asyncio.create_subprocess_exec(
                self._settings.mpclient,
                request.path,
                cwd=str(self.workdir),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
                start_new_session=True,
            )
        except OSError as exc:
            msg = f"Cannot start {self._settings.mpclient}: {exc}"
            raise ScanError(msg) from exc

        try:
            stdout, _ = await asyncio.wait_for(proc.communicate(), timeout=request.timeout)
        except TimeoutError:
            await _kill_process_group(proc)
            msg = f"Scan of {request.path} timed out after {request.timeout}s"
            raise ScanTimeoutError(msg) from None
        except asyncio.CancelledError:
            await _kill_process_group(proc)
            raise

        output = stdout.decode("utf-8", errors="replace")
        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.debug("mpclient exited %s in %dms", proc.returncode, elapsed_ms, extra=ctx)

        if proc.returncode != 0:
            return output, ScanError(
                f"mpclient exited with status {proc.returncode}: {output.strip()[-500:]}"
            )
        return output, None


async def _kill_process_group(proc: asyncio.subprocess.Process) -> None:
    """SIGKILL mpclient and anything it spawned, then reap it.

    Children left alive would keep the stdout pipe open and block ``wait()``.
    """
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass
    await proc.wait()
