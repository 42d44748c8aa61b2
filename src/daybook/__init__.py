"""daybook — a personal journal kept in a single local file."""

__version__ = "0.1.0"
