"""
Local filesystem entry store.

One flat directory of ``[<UUID>]-[<timestamp>].md`` files is the single
source of truth. Nothing is cached: each catalog request re-lists the
directory. Writes are atomic (temp file + rename) and serialized per store.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from uuid import UUID, uuid4

import aiofiles
import aiofiles.os
from loguru import logger

from freewrite.core.exceptions import EntryNotFoundError, FileOperationError, FreewriteError
from freewrite.core.types import PathLike
from freewrite.core.utils.file_io import atomic_write, ensure_directory

from .catalog import find_entry, sort_catalog
from .codec import DEFAULT_EXTENSION, EntryKey, FilenameCodec, normalize_timestamp
from .models import Entry

DEFAULT_HEADER = "\n\n"

Writer = Callable[[Path, str], None]


class LocalEntryStore:
    """Filesystem-backed implementation of :class:`~freewrite.entries.store.EntryStore`.

    The directory is created lazily on first use. If that fails the error is
    logged and each operation then fails on its own with FileOperationError.

    Args:
        directory: Folder holding the entry files.
        extension: Entry file extension, without the dot.
        header: Initial content of a new entry.
        clock: Source of creation and save timestamps.
        id_factory: Source of new entry ids.
        writer: Atomic text writer ``(path, content) -> None``.
    """

    def __init__(
        self,
        directory: PathLike,
        extension: str = DEFAULT_EXTENSION,
        header: str = DEFAULT_HEADER,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], UUID] = uuid4,
        writer: Writer = atomic_write,
    ):
        self._directory = Path(directory).expanduser()
        self.codec = FilenameCodec(extension)
        self.header = header
        self._clock = clock
        self._id_factory = id_factory
        self._writer = writer
        self._initialized = False
        self._lock = asyncio.Lock()

    @property
    def directory(self) -> Path:
        self._ensure_directory()
        return self._directory

    def _ensure_directory(self) -> None:
        """Create the entries directory once. Idempotent; never raises."""
        if self._initialized:
            return
        if ensure_directory(self._directory):
            self._initialized = True
            logger.debug(f"Entries directory ready at {self._directory}")

    # ── Public API ─────────────────────────────────────────────

    async def create_new_entry(self, content: str | None = None) -> Entry:
        """Create an entry in one atomic write; ``content`` defaults to the header."""
        if content is None:
            content = self.header
        self._ensure_directory()
        async with self._lock:
            entry_id = self._id_factory()
            created_at = normalize_timestamp(self._clock())
            filename = self.codec.encode(entry_id, created_at)
            path = self._directory / filename

            if await aiofiles.os.path.exists(path):
                raise FileOperationError(f"Failed to create entry: {filename} already exists")

            await self._write(path, content, action="create entry")
            logger.info(f"Created new entry: {filename}")

        return Entry.from_content(entry_id, filename, created_at, content)

    async def load_entry(self, entry_id: UUID) -> str:
        filename, _key = await self._resolve(entry_id)
        content = await self._read(self._directory / filename)
        logger.debug(f"Loaded entry: {filename}")
        return content

    async def save_entry(self, entry_id: UUID, content: str) -> Entry:
        async with self._lock:
            filename, key = await self._resolve(entry_id)
            await self._write(self._directory / filename, content, action="save entry")
            logger.debug(f"Saved entry: {filename}")

        modified_at = normalize_timestamp(self._clock())
        return Entry.from_content(key.id, filename, key.created_at, content, modified_at=modified_at)

    async def delete_entry(self, entry_id: UUID) -> None:
        async with self._lock:
            filename, _key = await self._resolve(entry_id)
            try:
                await aiofiles.os.remove(self._directory / filename)
            except FileNotFoundError as e:
                # removed by someone else since the listing
                raise EntryNotFoundError(entry_id) from e
            except OSError as e:
                raise FileOperationError(f"Failed to delete entry {filename}: {e}") from e
            logger.info(f"Deleted entry: {filename}")

    async def load_all_entries(self) -> list[Entry]:
        """Scan the directory and build the catalog, newest first.

        Files whose names do not decode are skipped silently. Entries that
        cannot be read are logged and skipped; only a failure to list the
        directory itself is raised.
        """
        entries = []
        for filename, key in await self._scan():
            try:
                entries.append(await self._build_entry(filename, key))
            except FileOperationError as e:
                logger.warning(f"Skipping unreadable entry {filename}: {e}")

        logger.debug(f"Found {len(entries)} entries in {self._directory}")
        return sort_catalog(entries)

    async def get_entry(self, entry_id: UUID) -> Entry:
        entry = find_entry(await self.load_all_entries(), entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        return entry

    async def entry_exists(self, entry_id: UUID) -> bool:
        try:
            await self.get_entry(entry_id)
        except FreewriteError:
            return False
        return True

    # ── Internals ──────────────────────────────────────────────

    async def _scan(self) -> list[tuple[str, EntryKey]]:
        """List the directory and decode every entry filename in it."""
        self._ensure_directory()
        try:
            names = await aiofiles.os.listdir(self._directory)
        except OSError as e:
            raise FileOperationError(f"Failed to list entries in {self._directory}: {e}") from e

        decoded = []
        for name in names:
            key = self.codec.decode(name)
            if key is None:
                logger.debug(f"Ignoring non-entry file: {name}")
                continue
            decoded.append((name, key))
        return decoded

    async def _resolve(self, entry_id: UUID) -> tuple[str, EntryKey]:
        """Map an id to its filename from a fresh directory listing."""
        for filename, key in await self._scan():
            if key.id == entry_id:
                return filename, key
        raise EntryNotFoundError(entry_id)

    async def _build_entry(self, filename: str, key: EntryKey) -> Entry:
        path = self._directory / filename
        content = await self._read(path)
        try:
            stat = await aiofiles.os.stat(path)
            modified_at = datetime.fromtimestamp(stat.st_mtime).replace(microsecond=0)
        except OSError as e:
            logger.debug(f"Could not stat {filename}, using creation time: {e}")
            modified_at = key.created_at
        return Entry.from_content(key.id, filename, key.created_at, content, modified_at=modified_at)

    async def _read(self, path: Path) -> str:
        try:
            async with aiofiles.open(path, encoding="utf-8", newline="") as f:
                return await f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileOperationError(f"Failed to read {path.name}: {e}") from e

    async def _write(self, path: Path, content: str, action: str) -> None:
        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(None, self._writer, path, content)
        try:
            await asyncio.shield(future)
        except asyncio.CancelledError:
            # the worker thread cannot be stopped; keep the lock until it lands
            await asyncio.wait([future])
            raise
        except (OSError, UnicodeEncodeError) as e:
            raise FileOperationError(f"Failed to {action} {path.name}: {e}") from e
