"""Catalog projection: the ordered in-memory view of an entries directory."""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from .models import Entry


def sort_catalog(entries: Iterable[Entry]) -> list[Entry]:
    """Newest first; entries sharing a timestamp fall back to filename order."""
    by_name = sorted(entries, key=lambda e: e.filename)
    # stable sort keeps filename order within equal timestamps
    return sorted(by_name, key=lambda e: e.created_at, reverse=True)


def find_entry(entries: Iterable[Entry], entry_id: UUID) -> Entry | None:
    for entry in entries:
        if entry.id == entry_id:
            return entry
    return None
