# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Results store -- connection, migrations, and repositories."""

from windef.storage.database import close_db, init_db
from windef.storage.migrations import run_migrations
from windef.storage.repositories.results import PluginResultRepository

__all__ = [
    "PluginResultRepository",
    "close_db",
    "init_db",
    "run_migrations",
]
