"""
Freewrite exception hierarchy.

All freewrite exceptions inherit from FreewriteError, making it easy for callers
to catch library-level errors while still distinguishing specific failure modes.
"""

from __future__ import annotations

from uuid import UUID


class FreewriteError(Exception):
    """Base exception class for all freewrite errors."""


class ConfigurationError(FreewriteError):
    """Raised for configuration errors (missing keys, invalid values)."""


class EntryNotFoundError(FreewriteError):
    """Raised when an id does not resolve to any file in the entries directory."""

    def __init__(self, entry_id: UUID | str):
        self.entry_id = entry_id
        super().__init__(f"Entry not found: {entry_id}")


class FileOperationError(FreewriteError):
    """Raised for any filesystem failure: create, read, write, delete, list."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"File operation failed: {detail}")


class InvalidEntryFormatError(FreewriteError):
    """Raised when a filename was expected to be an entry but does not follow the naming scheme."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Invalid entry format: {filename}")
