# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Console output: compact JSON or a Markdown table."""

from __future__ import annotations

import sys
from typing import TextIO

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from windef.models.result import ScanResult, WindowsDefender

TABLE_COLUMNS = ("Infected", "Result", "Engine", "Updated")
MIN_TABLE_WIDTH = 80


def format_json(result: ScanResult) -> str:
    """Return the result envelope as compact JSON."""
    return WindowsDefender(results=result).to_json()


def print_json(result: ScanResult) -> None:
    sys.stdout.write(format_json(result) + "\n")


def _table_row(result: ScanResult) -> tuple[str, ...]:
    return (str(result.infected).lower(), result.result, result.engine, result.updated)


def build_markdown_table(result: ScanResult) -> Table:
    table = Table(box=box.MARKDOWN, show_edge=True, pad_edge=True)
    for column in TABLE_COLUMNS:
        table.add_column(column, no_wrap=True)
    # Text cells keep brackets in threat names from being read as markup.
    table.add_row(*(Text(value) for value in _table_row(result)))
    return table


def table_width(result: ScanResult) -> int:
    """Width that fits every cell on one line: padded columns plus the pipes."""
    cells = sum(
        max(cell_len(header), cell_len(value)) + 2
        for header, value in zip(TABLE_COLUMNS, _table_row(result), strict=True)
    )
    return cells + len(TABLE_COLUMNS) + 1


def print_markdown_table(result: ScanResult, *, file: TextIO | None = None) -> None:
    """Print a ``#### Windows Defender`` heading followed by a Markdown table.

    The console is sized to the row so long threat names never wrap, whatever
    the terminal width (or lack of one when piped).
    """
    out = Console(
        file=file or sys.stdout,
        width=max(table_width(result), MIN_TABLE_WIDTH),
        color_system=None,
        highlight=False,
    )
    out.print("#### Windows Defender", markup=False)
    out.print(build_markdown_table(result))
