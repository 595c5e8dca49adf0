"""Entry commands: list, new, show, write, delete."""

from __future__ import annotations

import sys
from uuid import UUID

import click

from .common import ENTRY_ID, App, run


@click.command("list")
@click.option("-n", "--limit", type=int, default=None, help="Show at most N entries.")
@click.pass_obj
def list_entries(app: App, limit: int | None) -> None:
    """List entries, newest first."""
    entries = run(app.store.load_all_entries())
    if not entries:
        click.echo("No entries yet. Run 'freewrite new' to start writing.")
        return
    for entry in entries[:limit]:
        marker = "*" if entry.is_welcome_entry else " "
        click.echo(f"{marker} {entry.id}  {entry.display_date:>6}  {entry.word_count:>5}w  {entry.display_title}")


@click.command()
@click.pass_obj
def new(app: App) -> None:
    """Create an empty entry and print its id."""
    entry = run(app.store.create_new_entry())
    click.echo(str(entry.id))


@click.command()
@click.argument("entry_id", type=ENTRY_ID)
@click.pass_obj
def show(app: App, entry_id: UUID) -> None:
    """Print an entry's content."""
    click.echo(run(app.store.load_entry(entry_id)), nl=False)


@click.command()
@click.argument("entry_id", type=ENTRY_ID)
@click.option("--file", "source", type=click.File("r", encoding="utf-8"), default=None, help="Read content from a file instead of stdin.")
@click.pass_obj
def write(app: App, entry_id: UUID, source) -> None:  # type: ignore[no-untyped-def]
    """Replace an entry's content with text from stdin (or --file)."""
    content = source.read() if source is not None else sys.stdin.read()
    entry = run(app.store.save_entry(entry_id, content))
    click.echo(f"Saved {entry.filename} ({entry.word_count} words)")


@click.command()
@click.argument("entry_id", type=ENTRY_ID)
@click.option("-y", "--yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def delete(app: App, entry_id: UUID, yes: bool) -> None:
    """Delete an entry."""
    if not yes:
        click.confirm(f"Delete entry {entry_id}?", abort=True)
    run(app.store.delete_entry(entry_id))
    click.echo(f"Deleted {entry_id}")
