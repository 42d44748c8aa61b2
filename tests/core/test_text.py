"""Tests for daybook.core.utils.text."""

import pytest

from daybook.core.utils.text import display_length, graphemes, single_line, truncate

E_ACUTE = "e\u0301"  # "e" followed by a combining acute accent


def test_graphemes_combining_marks():
    assert graphemes(f"caf{E_ACUTE}") == ["c", "a", "f", E_ACUTE]


def test_display_length_counts_clusters():
    assert display_length("hello") == 5
    assert display_length(E_ACUTE * 3) == 3
    assert display_length("日本語") == 3
    assert display_length("") == 0


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("short", 40) == "short"

    def test_exactly_max_len_unchanged(self):
        text = "x" * 40
        assert truncate(text, 40) == text

    def test_one_over_is_cut_with_dots(self):
        result = truncate("x" * 41, 40)
        assert len(result) == 40
        assert result == "x" * 37 + "..."

    def test_long_text(self):
        assert truncate("a" * 200, 10) == "aaaaaaa..."

    def test_multibyte_text_is_not_split(self):
        text = "日本語のテキストはとても長いです"
        result = truncate(text, 10)
        assert result == "日本語のテキス..."
        assert display_length(result) == 10

    def test_combining_marks_count_once(self):
        # 40 user-perceived characters but 80 code points: still fits
        text = E_ACUTE * 40
        assert truncate(text, 40) == text

        result = truncate(E_ACUTE * 41, 40)
        assert display_length(result) == 40
        assert result.endswith("...")
        assert result.startswith(E_ACUTE * 37)

    @pytest.mark.parametrize(
        ("max_len", "expected"),
        [(0, ""), (1, "."), (2, ".."), (3, "..."), (4, "a...")],
    )
    def test_tiny_widths_do_not_underflow(self, max_len, expected):
        assert truncate("abcdefgh", max_len) == expected

    def test_empty_text(self):
        assert truncate("", 40) == ""
        assert truncate("", 0) == ""

    def test_negative_width_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            truncate("text", -1)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Went hiking.\nIt rained.", "Went hiking. It rained."),
        ("a\r\n\r\nb\tc  d", "a b c d"),
        ("  padded\n", "padded"),
        ("", ""),
    ],
)
def test_single_line(text, expected):
    assert single_line(text) == expected
