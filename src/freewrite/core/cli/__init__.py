"""Freewrite CLI — manage entries from the terminal."""

import click

from freewrite import __version__
from freewrite.core.exceptions import FreewriteError

from .common import build_app


@click.group()
@click.version_option(version=__version__, package_name="freewrite")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="Path to a YAML/JSON config file.")
@click.option("--dir", "entries_dir", type=click.Path(file_okay=False), default=None, help="Entries directory (overrides config).")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, entries_dir: str | None, verbose: bool) -> None:
    """Freewrite: just write."""
    try:
        ctx.obj = build_app(config_file=config_file, entries_dir=entries_dir, verbose=verbose)
    except FreewriteError as e:
        raise click.ClickException(str(e)) from e


from .entries_cmd import delete, list_entries, new, show, write
from .export_cmd import export
from .init_cmd import init

main.add_command(init)
main.add_command(list_entries)
main.add_command(new)
main.add_command(show)
main.add_command(write)
main.add_command(delete)
main.add_command(export)
