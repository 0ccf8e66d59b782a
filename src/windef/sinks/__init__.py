# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Output sinks for scan results: console, results store, webhook."""

from windef.sinks.console import format_json, print_json, print_markdown_table
from windef.sinks.fanout import SinkOptions, publish, resolve_scan_id
from windef.sinks.store import write_results
from windef.sinks.webhook import notify_webhook

__all__ = [
    "SinkOptions",
    "format_json",
    "notify_webhook",
    "print_json",
    "print_markdown_table",
    "publish",
    "resolve_scan_id",
    "write_results",
]
