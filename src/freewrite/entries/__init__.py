"""Entry persistence: filename codec, content metadata, and the entry store.

Provides the EntryStore protocol, a local filesystem implementation, and
the pure helpers used to build the catalog shown to the user.
"""

from .catalog import find_entry, sort_catalog
from .codec import EntryKey, FilenameCodec
from .local import LocalEntryStore
from .metadata import WELCOME_MARKER, display_date, is_welcome, preview_text, word_count
from .models import Entry
from .store import EntryStore
from .welcome import WELCOME_CONTENT, ensure_welcome_entry

__all__ = [
    "WELCOME_CONTENT",
    "WELCOME_MARKER",
    "Entry",
    "EntryKey",
    "EntryStore",
    "FilenameCodec",
    "LocalEntryStore",
    "display_date",
    "ensure_welcome_entry",
    "find_entry",
    "is_welcome",
    "preview_text",
    "sort_catalog",
    "word_count",
]
