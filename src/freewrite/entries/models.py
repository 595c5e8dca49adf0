"""Entry record handed to the presentation layer and export service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from .metadata import display_date, is_welcome, preview_text, word_count


@dataclass(frozen=True)
class Entry:
    """One writing session, rebuilt from its filename and content on every scan.

    Attributes:
        id: Unique id embedded in the filename.
        filename: On-disk name; fixed at creation.
        display_date: Short rendering of ``created_at`` (``"MMM d"``).
        preview_text: First 30 characters of content on one line.
        word_count: Whitespace-delimited token count.
        is_welcome_entry: Content carries the first-run welcome marker.
        created_at: Second-resolution creation time embedded in the filename.
        modified_at: Last write time of the file (``created_at`` if unknown).
    """

    id: UUID
    filename: str
    display_date: str
    preview_text: str
    word_count: int
    is_welcome_entry: bool
    created_at: datetime
    modified_at: datetime

    @classmethod
    def from_content(
        cls,
        entry_id: UUID,
        filename: str,
        created_at: datetime,
        content: str,
        modified_at: datetime | None = None,
    ) -> Entry:
        return cls(
            id=entry_id,
            filename=filename,
            display_date=display_date(created_at),
            preview_text=preview_text(content),
            word_count=word_count(content),
            is_welcome_entry=is_welcome(content),
            created_at=created_at,
            modified_at=modified_at or created_at,
        )

    @property
    def display_title(self) -> str:
        return self.preview_text or "New Entry"

    @property
    def is_empty(self) -> bool:
        return not self.preview_text

    def __repr__(self) -> str:
        return f"Entry(id='{self.id}', filename='{self.filename}', words={self.word_count})"
