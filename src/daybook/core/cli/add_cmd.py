"""daybook add — write a new entry."""

from __future__ import annotations

import click

from .common import capture_text, handle_errors


@click.command()
@click.option("-m", "--message", default=None, help="Entry text. Opens $EDITOR when omitted.")
@click.pass_obj
@handle_errors
def add(session, message: str | None) -> None:
    """Add an entry, written in your editor or passed with -m.

    Put a date (2024-03-01) or date-time (2024-03-01T21:30) alone on the
    first line to file the entry under that timestamp instead of now.
    """
    from daybook.journal import Db, Entry

    text = message if message is not None else capture_text()
    if text is None or not text.strip():
        click.echo("Nothing to add.")
        return

    entry = Entry.parse(text)
    location = session.location()
    compress = session.journal_config().compress
    db = Db.read(location, compress=compress)
    db.push_entry(entry)
    db.write(location, compress=compress)

    click.echo(f"Added entry for {entry.date.isoformat()}.")
