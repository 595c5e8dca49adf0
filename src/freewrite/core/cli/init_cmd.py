"""freewrite init — prepare the entries directory and the welcome entry."""

from __future__ import annotations

import click

from freewrite.entries import ensure_welcome_entry

from .common import App, run


@click.command()
@click.pass_obj
def init(app: App) -> None:
    """Set up the entries directory and write the welcome entry."""
    entry = run(ensure_welcome_entry(app.store))
    click.echo(f"Entries directory: {app.store.directory}")
    if entry is None:
        click.echo("Entries already exist; nothing to do.")
    else:
        click.echo(f"Created welcome entry {entry.id}")
