# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for windef."""

from windef.models.result import PluginResults, ScanRequest, ScanResult, WindowsDefender

__all__ = [
    "PluginResults",
    "ScanRequest",
    "ScanResult",
    "WindowsDefender",
]
