"""Daybook CLI — entry point for add, export, list, edit, and delete commands."""

import click

from daybook import __version__
from daybook.core.config import Config, default_config_file
from daybook.core.utils.logging import configure_logging

from .common import Session, handle_errors


@click.group()
@click.version_option(version=__version__, package_name="daybook")
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, resolve_path=True),
    help="Journal file to use instead of the default location.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML or JSON config file (default: user config dir).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
@handle_errors
def main(ctx: click.Context, db_path: str | None, config_file: str | None, verbose: bool) -> None:
    """Daybook — a journal of dated entries kept in one local file."""
    config = Config(config_file=config_file or default_config_file())
    if db_path:
        config.set("paths.db_file", db_path)
    configure_logging(config, verbose=verbose)
    ctx.obj = Session(config=config)


# Register subcommands
from .add_cmd import add
from .export_cmd import export
from .manage_cmd import delete, edit, list_entries

main.add_command(add)
main.add_command(export)
main.add_command(list_entries)
main.add_command(edit)
main.add_command(delete)
