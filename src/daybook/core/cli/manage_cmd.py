"""daybook list / edit / delete — browse and change existing entries by index."""

from __future__ import annotations

import click

from daybook.core.utils.text import single_line, truncate

from .common import capture_text, echo_overview, handle_errors

INDEX = click.IntRange(min=0)


@click.command("list")
@click.pass_obj
@handle_errors
def list_entries(session) -> None:
    """Show numbered entries. Use the numbers with edit and delete."""
    from daybook.journal import Db

    settings = session.journal_config()
    db = Db.read(session.location(), compress=settings.compress)
    echo_overview(db, settings.overview_width)


@click.command()
@click.argument("index", type=INDEX)
@click.option("-m", "--message", default=None, help="New text. Opens $EDITOR on the current text when omitted.")
@click.pass_obj
@handle_errors
def edit(session, index: int, message: str | None) -> None:
    """Rewrite the text of entry INDEX. Its date is kept."""
    from daybook.journal import Db

    location = session.location()
    settings = session.journal_config()
    db = Db.read(location, compress=settings.compress)
    current = db.get_entry_description(index)

    text = message if message is not None else capture_text(current)
    if text is None:
        click.echo("Edit cancelled.")
        return

    db.replace_entry_description(index, text.strip())
    db.write(location, compress=settings.compress)
    echo_overview(db, settings.overview_width)


@click.command()
@click.argument("index", type=INDEX)
@click.option("-y", "--yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
@handle_errors
def delete(session, index: int, yes: bool) -> None:
    """Delete entry INDEX. Later entries move up one number."""
    from daybook.journal import Db

    location = session.location()
    settings = session.journal_config()
    db = Db.read(location, compress=settings.compress)
    preview = truncate(single_line(db.get_entry_description(index)), settings.overview_width)

    if not yes:
        click.confirm(f"Delete [{index:04}] {preview}?", abort=True)

    db.delete_entry(index)
    db.write(location, compress=settings.compress)
    echo_overview(db, settings.overview_width)
