"""Small shared helpers: logging setup, text, and file I/O."""
