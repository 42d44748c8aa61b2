"""Shared setup logic for CLI commands."""

from __future__ import annotations

import functools
import sys
from dataclasses import dataclass

import click

from daybook.core.config import Config
from daybook.core.exceptions import DaybookError


@dataclass
class Session:
    """Per-invocation state built by the ``main`` group and passed to commands."""

    config: Config

    def location(self):
        """Resolve the storage file for this invocation."""
        from daybook.journal import DbLocation

        return DbLocation.locate(self.config)

    def journal_config(self):
        from daybook.journal import JournalConfig

        return JournalConfig.from_config(self.config)


def handle_errors(func):
    """Report library errors as ``Error: ...`` on stderr and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DaybookError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    return wrapper


def capture_text(seed: str | None = None) -> str | None:
    """Open ``$VISUAL``/``$EDITOR`` on a temp file and return what was saved.

    Returns None when the editor is closed without saving. Blocks until the
    editor process exits.
    """
    return click.edit(text=seed or "", extension=".md", require_save=True)


def echo_overview(db, width: int) -> None:
    if db.is_empty():
        click.echo("No entries yet.")
    else:
        click.echo(db.entry_overview(width))
