# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures: mpclient stubs, sample files, and settings."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

import pytest

from windef.core.config import Settings

EICAR = r"X5O!P%@AP[4\PZX54(P^)7CC)7}$EICAR-STANDARD-ANTIVIRUS-TEST-FILE!$H+H*"
EICAR_THREAT = "Virus:DOS/EICAR_Test_File"
ENGINE_VERSION = "1.1.24030.4"
BUILD_TIME = "20260101"

# Mimics ./mpclient: progress lines, then a threat line for EICAR content.
MPCLIENT_STUB = f"""#!/bin/sh
echo "main(): The map file wasn't found, symbols wont be available"
echo "main(): Scanning $1..."
echo "EngineScanCallback(): Scanning input"
if grep -q 'EICAR-STANDARD-ANTIVIRUS-TEST-FILE' "$1"; then
    echo "EngineScanCallback(): Threat {EICAR_THREAT} identified."
fi
exit 0
"""

HANGING_STUB = """#!/bin/sh
exec sleep 30
"""

# sleep runs as a child of the shell and inherits its stdout.
FORKING_STUB = """#!/bin/sh
sleep 30
echo done
"""

FAILING_STUB = """#!/bin/sh
echo "main(): usage: ./mpclient [filenames...]"
exit 3
"""


def write_stub(directory: Path, body: str, name: str = "mpclient") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    stub = directory / name
    stub.write_text(body)
    stub.chmod(stub.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return stub


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep MALICE_* variables from the host out of Settings."""
    for key in list(os.environ):
        if key.startswith("MALICE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging (the CLI installs one per run)."""
    yield
    root = logging.getLogger("windef")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


@pytest.fixture
def loadlibrary_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "loadlibrary"
    write_stub(directory, MPCLIENT_STUB)
    return directory


@pytest.fixture
def malware_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "malware"
    directory.mkdir()
    return directory


@pytest.fixture
def clean_file(malware_dir: Path) -> Path:
    path = malware_dir / "clean.txt"
    path.write_text("just an ordinary text file\n")
    return path


@pytest.fixture
def eicar_file(malware_dir: Path) -> Path:
    path = malware_dir / "EICAR"
    path.write_text(EICAR)
    return path


@pytest.fixture
def settings(tmp_path: Path, loadlibrary_dir: Path, malware_dir: Path) -> Settings:
    return Settings(
        _env_file=None,
        loadlibrary_dir=loadlibrary_dir,
        mpclient="./mpclient",
        malware_dir=malware_dir,
        updated_file=tmp_path / "UPDATED",
        build_time=BUILD_TIME,
        engine_version=ENGINE_VERSION,
    )


@pytest.fixture
def scanner_env(monkeypatch, tmp_path: Path, loadlibrary_dir: Path, malware_dir: Path) -> None:
    """Point get_settings() at the stub scanner through MALICE_* variables."""
    monkeypatch.setenv("MALICE_LOADLIBRARY_DIR", str(loadlibrary_dir))
    monkeypatch.setenv("MALICE_MPCLIENT", "./mpclient")
    monkeypatch.setenv("MALICE_MALWARE_DIR", str(malware_dir))
    monkeypatch.setenv("MALICE_UPDATED_FILE", str(tmp_path / "UPDATED"))
    monkeypatch.setenv("MALICE_BUILD_TIME", BUILD_TIME)
    monkeypatch.setenv("MALICE_ENGINE_VERSION", ENGINE_VERSION)


@pytest.fixture
def hanging_mpclient(loadlibrary_dir: Path) -> Path:
    """Replace the stub with one that never finishes."""
    return write_stub(loadlibrary_dir, HANGING_STUB)


@pytest.fixture
def forking_mpclient(loadlibrary_dir: Path) -> Path:
    """Replace the stub with a shell that waits on a long-running child."""
    return write_stub(loadlibrary_dir, FORKING_STUB)


@pytest.fixture
def failing_mpclient(loadlibrary_dir: Path) -> Path:
    """Replace the stub with one that exits with status 3."""
    return write_stub(loadlibrary_dir, FAILING_STUB)
