"""Pure metadata derived from entry content. No I/O.

Results are reproducible byte-for-byte: word counting is a plain whitespace
split, not locale-aware tokenization.
"""

from __future__ import annotations

from datetime import datetime

from freewrite.core.utils.text import collapse_newlines, split_words, truncate_text

PREVIEW_LENGTH = 30
ELLIPSIS = "..."
WELCOME_MARKER = "Welcome to Freewrite"


def preview_text(content: str) -> str:
    """First 30 characters of the content on one line, with an ellipsis if cut."""
    return truncate_text(collapse_newlines(content), PREVIEW_LENGTH, ELLIPSIS)


def word_count(content: str) -> int:
    return len(split_words(content))


def is_welcome(content: str, marker: str = WELCOME_MARKER) -> bool:
    return marker in content


def display_date(created_at: datetime) -> str:
    """Short human date, e.g. ``Mar 5``."""
    return f"{created_at:%b} {created_at.day}"
