# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Repository classes for the results store."""

from windef.storage.repositories.results import PluginResultRepository

__all__ = ["PluginResultRepository"]
