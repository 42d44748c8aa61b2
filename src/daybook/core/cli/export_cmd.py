"""daybook export — print the journal as markdown."""

import click

from .common import handle_errors


@click.command()
@click.pass_obj
@handle_errors
def export(session) -> None:
    """Print every entry as a markdown list."""
    from daybook.journal import Db

    db = Db.read(session.location(), compress=session.journal_config().compress)
    if not db.is_empty():
        click.echo(db.markdown())
