# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Scan request, scan result and stored-document models."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from windef.core.constants import PLUGIN_CATEGORY, PLUGIN_NAME


class ScanRequest(BaseModel):
    """A single file to scan and the deadline for it.

    Also used as the logging context for everything done on behalf of the scan.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Absolute path of the file to scan")
    timeout: int = Field(default=60, gt=0, description="Scan deadline in seconds")

    @classmethod
    def from_path(cls, path: str | Path, timeout: int = 60) -> ScanRequest:
        return cls(path=str(Path(path).resolve()), timeout=timeout)

    def log_context(self) -> dict[str, Any]:
        from windef.core.logging import log_context

        return log_context(self.path)


class ScanResult(BaseModel):
    """Normalized outcome of one Windows Defender scan."""

    model_config = ConfigDict(frozen=True)

    infected: bool = False
    result: str = ""
    engine: str = ""
    updated: str = ""

    @model_validator(mode="after")
    def _clean_has_no_label(self) -> ScanResult:
        if not self.infected and self.result:
            raise ValueError("a clean result cannot carry a detection name")
        return self


class WindowsDefender(BaseModel):
    """JSON envelope shared by stdout, the webhook and the web service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    results: ScanResult = Field(alias=PLUGIN_NAME)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class PluginResults(BaseModel):
    """Document written to the results store, keyed by scan ID."""

    id: str
    name: str = PLUGIN_NAME
    category: str = PLUGIN_CATEGORY
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_result(cls, scan_id: str, result: ScanResult) -> PluginResults:
        return cls(id=scan_id, data=result.model_dump())
