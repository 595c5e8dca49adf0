"""Filename codec: an entry's id and creation time live in its filename.

Entries are stored as ``[<UUID>]-[<YYYY-MM-DD-HH-mm-ss>].<ext>``. Timestamps
have second resolution and no timezone; they are local wall-clock times.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import NamedTuple
from uuid import UUID

from freewrite.core.exceptions import InvalidEntryFormatError

TIMESTAMP_FORMAT = "%Y-%m-%d-%H-%M-%S"
DEFAULT_EXTENSION = "md"

_UUID_PATTERN = r"[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}"
_TIMESTAMP_PATTERN = r"\d{4}-\d{2}-\d{2}-\d{2}-\d{2}-\d{2}"


class EntryKey(NamedTuple):
    """Identity of an entry as recovered from its filename."""

    id: UUID
    created_at: datetime


def normalize_timestamp(created_at: datetime) -> datetime:
    """Drop sub-second precision and convert aware datetimes to naive local time."""
    if created_at.tzinfo is not None:
        created_at = created_at.astimezone().replace(tzinfo=None)
    return created_at.replace(microsecond=0)


class FilenameCodec:
    """Encode/decode ``(id, created_at)`` pairs to entry filenames."""

    def __init__(self, extension: str = DEFAULT_EXTENSION):
        self.extension = extension.lstrip(".")
        self._pattern = re.compile(
            rf"\[(?P<id>{_UUID_PATTERN})\]-\[(?P<ts>{_TIMESTAMP_PATTERN})\]\.{re.escape(self.extension)}",
            re.ASCII,  # \d must not match non-ASCII digits
        )

    def encode(self, entry_id: UUID, created_at: datetime) -> str:
        stamp = normalize_timestamp(created_at).strftime(TIMESTAMP_FORMAT)
        return f"[{str(entry_id).upper()}]-[{stamp}].{self.extension}"

    def parse(self, filename: str) -> EntryKey:
        """Decode ``filename`` or raise InvalidEntryFormatError."""
        match = self._pattern.fullmatch(filename)
        if match is None:
            raise InvalidEntryFormatError(filename)
        try:
            created_at = datetime.strptime(match["ts"], TIMESTAMP_FORMAT)
        except ValueError as e:
            # e.g. month 13 or day 32
            raise InvalidEntryFormatError(filename) from e
        return EntryKey(UUID(match["id"]), created_at)

    def decode(self, filename: str) -> EntryKey | None:
        """Decode ``filename``; None means the file is not an entry."""
        try:
            return self.parse(filename)
        except InvalidEntryFormatError:
            return None

    def is_entry(self, filename: str) -> bool:
        return self.decode(filename) is not None
