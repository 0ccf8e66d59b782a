# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""FastAPI application factory for the scan web service."""

from __future__ import annotations

from fastapi import FastAPI

from windef import __version__
from windef.api.routes import health, scan


def create_app() -> FastAPI:
    app = FastAPI(
        title="windows-defender",
        description="Malice Windows Defender AntiVirus scan web service",
        version=__version__,
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(scan.router, tags=["scan"])

    return app
