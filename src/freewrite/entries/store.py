"""EntryStore protocol — the contract for entry persistence backends.

The presentation layer and the export service depend on this protocol,
never on a concrete backend. The composition root constructs one store per
process and passes it to its consumers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable
from uuid import UUID

from .models import Entry


@runtime_checkable
class EntryStore(Protocol):
    """Protocol for creating, reading, writing and listing entries.

    The catalog is never cached: every call that needs it re-reads the
    backend, so results always reflect what is stored at call time.
    """

    @property
    def directory(self) -> Path:
        """Location holding the entry files."""
        ...

    async def create_new_entry(self, content: str | None = None) -> Entry:
        """Create an entry in a single atomic write and return its record.

        ``content`` defaults to the store's header.

        Raises:
            FileOperationError: The file could not be written. No partial
                file is left behind.
        """
        ...

    async def load_entry(self, entry_id: UUID) -> str:
        """Return the full text of an entry.

        Raises:
            EntryNotFoundError: No entry has this id.
            FileOperationError: The entry is listed but could not be read.
        """
        ...

    async def save_entry(self, entry_id: UUID, content: str) -> Entry:
        """Atomically replace an entry's content, keeping its filename.

        Raises:
            EntryNotFoundError: No entry has this id.
            FileOperationError: The write failed; prior content is intact.
        """
        ...

    async def delete_entry(self, entry_id: UUID) -> None:
        """Remove an entry.

        Raises:
            EntryNotFoundError: No entry has this id.
            FileOperationError: The file could not be removed.
        """
        ...

    async def load_all_entries(self) -> list[Entry]:
        """Return every readable entry, newest first.

        Raises:
            FileOperationError: The backing directory could not be listed.
        """
        ...

    async def get_entry(self, entry_id: UUID) -> Entry:
        """Return the catalog record for one entry.

        Raises:
            EntryNotFoundError: No entry has this id.
        """
        ...

    async def entry_exists(self, entry_id: UUID) -> bool:
        """True if an entry with this id is currently listed. Never raises."""
        ...
