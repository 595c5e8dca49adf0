"""First-run welcome entry."""

from __future__ import annotations

from loguru import logger

from .local import DEFAULT_HEADER
from .metadata import WELCOME_MARKER
from .models import Entry
from .store import EntryStore

WELCOME_CONTENT = DEFAULT_HEADER + f"{WELCOME_MARKER}! Start typing to begin your writing session."


async def ensure_welcome_entry(store: EntryStore, content: str = WELCOME_CONTENT) -> Entry | None:
    """Create the welcome entry if the store holds no entries yet.

    Returns the new entry, or None when entries already exist.
    """
    if await store.load_all_entries():
        return None

    entry = await store.create_new_entry(content)
    logger.info(f"Created welcome entry: {entry.filename}")
    return entry
