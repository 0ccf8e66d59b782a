# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

from windef.core.config import Settings, get_settings
from windef.core.exceptions import ConfigurationError, WindefError
from windef.core.logging import log_context, setup_logging

logger = logging.getLogger("windef.cli")

app = typer.Typer(
    name="windef",
    help="Malice Windows Defender AntiVirus Plugin",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-V", help="Verbose output")
    ] = False,
) -> None:
    """Malice Windows Defender AntiVirus Plugin."""
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_format)


@app.command()
def scan(
    target: Annotated[str, typer.Argument(help="File to scan")],
    table: Annotated[
        bool, typer.Option("--table", "-t", help="Output as Markdown table")
    ] = False,
    callback: Annotated[
        bool,
        typer.Option("--callback", "-c", help="POST results to the Malice webhook; on when MALICE_ENDPOINT is set"),
    ] = False,
    proxy: Annotated[
        bool,
        typer.Option("--proxy", "-x", help="Route the webhook through MALICE_PROXY; on when it is set"),
    ] = False,
    db: Annotated[
        str | None,
        typer.Option("--db", help="Results store address (MALICE_DB_PATH)"),
    ] = None,
    timeout: Annotated[
        int | None,
        typer.Option("--timeout", help="Plugin timeout in seconds (MALICE_TIMEOUT)", min=1),
    ] = None,
) -> None:
    """Scan a file with Windows Defender and report the result."""
    settings = get_settings()
    overrides: dict[str, object] = {}
    if db is not None:
        overrides["db_path"] = db
    if timeout is not None:
        overrides["timeout"] = timeout
    if overrides:
        settings = settings.model_copy(update=overrides)

    # A configured endpoint or proxy turns its option on without the flag.
    callback = callback or bool(settings.endpoint)
    proxy = proxy or bool(settings.proxy)

    exit_code = asyncio.run(
        _async_scan(target, settings, table=table, callback=callback, proxy=proxy)
    )
    if exit_code:
        raise typer.Exit(exit_code)


async def _async_scan(
    target: str,
    settings: Settings,
    *,
    table: bool,
    callback: bool,
    proxy: bool,
) -> int:
    from windef.scanner.engine import WindowsDefenderScanner
    from windef.sinks.fanout import SinkOptions, publish

    path = str(Path(target).resolve())
    try:
        if not Path(path).exists():
            raise ConfigurationError(f"File not found: {path}")

        scanner = WindowsDefenderScanner(settings=settings)
        result = await scanner.scan(path, settings.timeout)
    except WindefError as exc:
        logger.error("%s", exc, extra=log_context(path))
        return 1

    errors = await publish(
        result,
        path,
        SinkOptions(table=table, callback=callback, proxy=proxy),
        settings=settings,
    )
    return 1 if errors else 0


@app.command()
def web() -> None:
    """Create a Windows Defender scan web service."""
    import uvicorn

    from windef.api.app import create_app

    settings = get_settings()
    logger.info("web service listening on %s:%d", settings.web_host, settings.web_port)
    try:
        uvicorn.run(create_app(), host=settings.web_host, port=settings.web_port)
    except OSError as exc:
        logger.error("web service failed: %s", exc, extra=log_context())
        raise typer.Exit(1) from exc


@app.command()
def version() -> None:
    """Show version information."""
    from windef import __build_time__, __version__

    typer.echo(f"windef v{__version__}, BuildTime: {__build_time__}")
