"""Tests for line, header and count formatting."""

import click
import pytest

from grepr import HighlightMode, MatchedLine, Pattern, format_line, match_text
from grepr.formatter import distinct_words, emphasize, format_count, format_source_name


def _line(text: str, raw: str, *, ignore_case: bool = False) -> MatchedLine:
    (line,) = match_text(text, Pattern.compile(raw, ignore_case=ignore_case))
    return line


class TestPlain:
    """Formatting with color disabled."""

    def test_number_right_justified(self) -> None:
        """Line number is right-justified to width 6."""
        assert format_line(_line("Lorem", "or")) == "     1:Lorem"

    def test_large_number(self) -> None:
        """Numbers wider than the field are not truncated."""
        line = MatchedLine(number=1234567, content="x")
        assert format_line(line) == "1234567:x"

    @pytest.mark.parametrize("mode", list(HighlightMode))
    def test_no_escape_codes(self, mode: HighlightMode) -> None:
        """Without color the content is untouched in every highlight mode."""
        text = format_line(_line("cat category cat", "cat"), highlight=mode)
        assert text == "     1:cat category cat"


class TestOffsetHighlight:
    """Offset-based emphasis (the default)."""

    def test_every_occurrence(self) -> None:
        """All recorded occurrences are emphasized."""
        text = format_line(_line("cat and cat", "cat"), color=True)
        assert text.count(emphasize("cat")) == 2
        assert click.unstyle(text) == "     1:cat and cat"

    def test_number_styled(self) -> None:
        """The line number is colored."""
        text = format_line(_line("Lorem", "or"), color=True)
        assert text.startswith(click.style("     1", fg="cyan") + ":")

    def test_only_recorded_offsets(self) -> None:
        """A matched word inside an unmatched longer word stays plain."""
        text = format_line(_line("cat category", r"cat\b"), color=True)
        assert text.count(emphasize("cat")) == 1
        assert text.endswith(" category")

    def test_case_insensitive_text(self) -> None:
        """The original letters of each occurrence are kept."""
        text = format_line(_line("Or and oR", "or", ignore_case=True), color=True)
        assert emphasize("Or") in text
        assert emphasize("oR") in text

    def test_zero_length_matches_skipped(self) -> None:
        """Empty matches emphasize nothing."""
        text = format_line(_line("abc", "x*"), color=True)
        assert click.unstyle(text) == "     1:abc"
        assert emphasize("") not in text


class TestWordHighlight:
    """Distinct-word emphasis (legacy mode)."""

    def test_distinct_words_collapse(self) -> None:
        """Three occurrences of one substring are one distinct word."""
        line = _line("cat, cat and cat", "cat")
        assert len(line.words) == 3
        assert distinct_words(line.words) == ["cat"]

    def test_all_occurrences_emphasized(self) -> None:
        """Every occurrence of the distinct word is emphasized."""
        text = format_line(_line("cat, cat and cat", "cat"), color=True, highlight=HighlightMode.WORDS)
        assert text.count(emphasize("cat")) == 3
        assert click.unstyle(text) == "     1:cat, cat and cat"

    def test_substring_quirk(self) -> None:
        """A matched word is also emphasized inside a longer word."""
        text = format_line(_line("cat category", r"cat\b"), color=True, highlight=HighlightMode.WORDS)
        assert text.count(emphasize("cat")) == 2

    def test_longest_word_first(self) -> None:
        """Overlapping distinct words do not nest escape codes."""
        text = format_line(_line("category cat", r"category|cat"), color=True, highlight=HighlightMode.WORDS)
        assert emphasize("category") in text
        assert click.unstyle(text) == "     1:category cat"

    def test_several_distinct_words(self) -> None:
        """Each distinct word is emphasized wherever it occurs."""
        text = format_line(_line("dog cat dog", "cat|dog"), color=True, highlight=HighlightMode.WORDS)
        assert text.count(emphasize("dog")) == 2
        assert text.count(emphasize("cat")) == 1

    def test_regex_characters_in_words(self) -> None:
        """Matched text containing regex metacharacters is replaced literally."""
        text = format_line(_line("a+b a+b", r"a\+b"), color=True, highlight=HighlightMode.WORDS)
        assert text.count(emphasize("a+b")) == 2


class TestSourceNames:
    """Tests for header and count rendering."""

    def test_plain_header(self) -> None:
        """Without color the name is unchanged."""
        assert format_source_name("a.txt") == "a.txt"

    def test_colored_header(self) -> None:
        """With color the name is green."""
        assert format_source_name("a.txt", color=True) == click.style("a.txt", fg="green")

    @pytest.mark.parametrize("count", [0, 1, 42])
    def test_count_line(self, count: int) -> None:
        """Count lines read ``<name>:<count>``, zero included."""
        assert format_count("a.txt", count) == f"a.txt:{count}"
