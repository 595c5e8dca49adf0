"""Entry exporter.

Reads entries through an EntryStore and renders them to other formats.
It never writes back to the store.
"""

from __future__ import annotations

import asyncio
import re
from enum import Enum
from pathlib import Path
from uuid import UUID

from loguru import logger

from freewrite.core.exceptions import FileOperationError
from freewrite.core.types import PathLike
from freewrite.core.utils.file_io import atomic_write, ensure_directory
from freewrite.entries.store import EntryStore

_TITLE_WORDS = 4
_NON_WORD_RE = re.compile(r"[^\w-]")


class ExportFormat(Enum):
    """Supported export formats. Value is the file extension."""

    TEXT = "txt"
    MARKDOWN = "md"

    @property
    def display_name(self) -> str:
        return {"txt": "Plain Text", "md": "Markdown"}[self.value]


def title_from_content(content: str, display_date: str) -> str:
    """Slug made of the first four words, lowercased.

    Only word characters and inner hyphens survive, so the result is always a
    single path component (no separators, no leading dots).
    """
    words = [_NON_WORD_RE.sub("", w).strip("-").lower() for w in content.split()]
    words = [w for w in words if w]
    if not words:
        return f"Entry-{display_date}"
    return "-".join(words[:_TITLE_WORDS])


class EntryExporter:
    """Export service built on top of an :class:`EntryStore`."""

    def __init__(self, store: EntryStore):
        self.store = store

    async def export_text(self, entry_id: UUID) -> str:
        content = await self.store.load_entry(entry_id)
        return content.strip()

    async def export_markdown(self, entry_id: UUID) -> str:
        # entries are already markdown
        return await self.export_text(entry_id)

    async def export(self, entry_id: UUID, fmt: ExportFormat) -> str:
        if fmt is ExportFormat.MARKDOWN:
            return await self.export_markdown(entry_id)
        return await self.export_text(entry_id)

    async def suggested_filename(self, entry_id: UUID, fmt: ExportFormat) -> str:
        entry = await self.store.get_entry(entry_id)
        content = await self.store.load_entry(entry_id)
        return f"{title_from_content(content, entry.display_date)}.{fmt.value}"

    async def write_export(self, entry_id: UUID, fmt: ExportFormat, dest_dir: PathLike) -> Path:
        """Render an entry and write it into ``dest_dir``. Returns the written path."""
        rendered = await self.export(entry_id, fmt)
        dest = Path(dest_dir).expanduser()
        if not ensure_directory(dest):
            raise FileOperationError(f"Cannot create export directory {dest}")

        path = dest / await self.suggested_filename(entry_id, fmt)
        if path.parent != dest:
            raise FileOperationError(f"Refusing to export outside {dest}: {path}")
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, atomic_write, path, rendered)
        except OSError as e:
            raise FileOperationError(f"Failed to export to {path}: {e}") from e

        logger.info(f"Exported entry {entry_id} to {path}")
        return path
