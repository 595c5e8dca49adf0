"""freewrite export — write an entry out as text or markdown."""

from __future__ import annotations

from uuid import UUID

import click

from freewrite.export import ExportFormat

from .common import ENTRY_ID, App, run


@click.command()
@click.argument("entry_id", type=ENTRY_ID)
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice([f.value for f in ExportFormat]),
    default=ExportFormat.MARKDOWN.value,
    show_default=True,
    help="Export format.",
)
@click.option("-o", "--output-dir", type=click.Path(file_okay=False), default=None, help="Write into this directory instead of stdout.")
@click.pass_obj
def export(app: App, entry_id: UUID, fmt: str, output_dir: str | None) -> None:
    """Export an entry to stdout or a file."""
    export_format = ExportFormat(fmt)
    if output_dir is None:
        click.echo(run(app.exporter.export(entry_id, export_format)))
        return
    path = run(app.exporter.write_export(entry_id, export_format, output_dir))
    click.echo(f"Exported to {path}")
