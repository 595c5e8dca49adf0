"""Composition root and shared helpers for CLI commands."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar
from uuid import UUID

import click

from freewrite.core.config import Config
from freewrite.core.exceptions import FreewriteError
from freewrite.core.utils.logging import setup_logging
from freewrite.entries import LocalEntryStore
from freewrite.entries.store import EntryStore
from freewrite.export import EntryExporter

FREEWRITE_DIR = Path.home() / ".freewrite"
CONFIG_PATH = FREEWRITE_DIR / "config.yaml"

T = TypeVar("T")


@dataclass
class App:
    """Process-wide services, built once per invocation."""

    config: Config
    store: EntryStore
    exporter: EntryExporter


def build_app(config_file: str | None = None, entries_dir: str | None = None, verbose: bool = False) -> App:
    """Wire config, logging, the single entry store and its consumers."""
    config = Config(config_file=config_file or str(CONFIG_PATH))
    if entries_dir:
        config.set("paths.entries_dir", entries_dir)

    setup_logging(config, verbose=verbose)

    store = LocalEntryStore(
        config.get_entries_dir(),
        extension=config.get_extension(),
        header=config.get("entries.header", "\n\n"),
    )
    return App(config=config, store=store, exporter=EntryExporter(store))


def run(coro: Awaitable[T]) -> T:
    """Run a store coroutine, turning library errors into clean CLI errors."""
    try:
        return asyncio.run(coro)
    except FreewriteError as e:
        raise click.ClickException(str(e)) from e


class EntryIdType(click.ParamType):
    name = "entry_id"

    def convert(self, value, param, ctx):  # type: ignore[no-untyped-def]
        if isinstance(value, UUID):
            return value
        try:
            return UUID(value.strip().strip("[]"))
        except ValueError:
            self.fail(f"{value!r} is not a valid entry id", param, ctx)


ENTRY_ID = EntryIdType()
