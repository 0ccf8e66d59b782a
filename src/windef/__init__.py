# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""windef - Malice Windows Defender AntiVirus plugin."""

__version__ = "0.1.0"

# Overwritten by the image build with the definition snapshot date (YYYYMMDD).
__build_time__ = "20261017"

from windef.models.result import ScanResult, WindowsDefender
from windef.scanner.engine import WindowsDefenderScanner

__all__ = [
    "ScanResult",
    "WindowsDefender",
    "WindowsDefenderScanner",
    "__build_time__",
    "__version__",
]
