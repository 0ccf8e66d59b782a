# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Parse mpclient console output into a ScanResult.

Sample transcript for an infected file::

    main(): The map file wasn't found, symbols wont be available
    main(): Scanning /malware/EICAR...
    EngineScanCallback(): Scanning input
    EngineScanCallback(): Threat Virus:DOS/EICAR_Test_File identified.
"""

from __future__ import annotations

import logging

from windef.core.constants import THREAT_PATTERN
from windef.core.exceptions import ScanError
from windef.core.logging import log_context
from windef.models.result import ScanResult

logger = logging.getLogger("windef.scanner.parser")


def parse_output(
    output: str,
    error: Exception | None = None,
    *,
    engine: str = "",
    updated: str = "",
    path: str = "",
) -> ScanResult:
    """Build a ScanResult from mpclient output.

    Raises:
        ScanError: when *error* is set; no result is produced.
    """
    if error is not None:
        if isinstance(error, ScanError):
            raise error
        raise ScanError(str(error)) from error

    logger.debug("Windows Defender output: %s", output, extra=log_context(path))

    match = THREAT_PATTERN.search(output)
    if match is None:
        return ScanResult(infected=False, result="", engine=engine, updated=updated)
    return ScanResult(
        infected=True,
        result=match.group("name"),
        engine=engine,
        updated=updated,
    )
