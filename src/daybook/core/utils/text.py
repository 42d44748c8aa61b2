"""Text utilities for display: grapheme-aware length and truncation."""

import regex

_GRAPHEME = regex.compile(r"\X")

ELLIPSIS_CHAR = "."
ELLIPSIS_WIDTH = 3


def graphemes(text: str) -> list[str]:
    """Split text into user-perceived characters (extended grapheme clusters)."""
    return _GRAPHEME.findall(text)


def display_length(text: str) -> int:
    """Length of text in user-perceived characters."""
    return len(graphemes(text))


def truncate(text: str, max_len: int) -> str:
    """Shorten text to a fixed-width preview of ``max_len`` characters.

    Text that already fits is returned unchanged. Longer text keeps its first
    ``max_len`` characters with the last three overwritten by ``.``, so
    ``truncate("a" * 50, 10) == "aaaaaaa..."``. Characters are grapheme
    clusters, so combining marks and emoji sequences are never split.
    """
    if max_len < 0:
        raise ValueError(f"max_len must be non-negative, got {max_len}")

    clusters = graphemes(text)
    if len(clusters) <= max_len:
        return text

    kept = clusters[:max_len]
    dots = min(ELLIPSIS_WIDTH, max_len)
    kept[max_len - dots :] = [ELLIPSIS_CHAR] * dots
    return "".join(kept)


def single_line(text: str) -> str:
    """Collapse line breaks and runs of whitespace into single spaces."""
    return " ".join(text.split())
