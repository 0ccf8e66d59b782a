# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for windef."""


class WindefError(Exception):
    """Base exception for all windef errors."""


class ConfigurationError(WindefError):
    """Missing argument, invalid path or bad configuration."""


class ScanError(WindefError):
    """The scanner could not be launched, failed, or its output was unusable."""


class ScanTimeoutError(ScanError):
    """The scanner did not finish before the deadline."""


class SinkError(WindefError):
    """An output sink failed to publish a result."""


class StorageError(SinkError):
    """Document store operation failed."""
