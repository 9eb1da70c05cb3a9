"""Rendering of matched lines, source headers and count lines."""

import re
from enum import StrEnum

import click

from .matcher import MatchedLine, MatchedWord

LINE_NUMBER_WIDTH = 6


class HighlightMode(StrEnum):
    """How matched text is emphasized inside a line."""

    OFFSETS = "offsets"
    WORDS = "words"


def emphasize(text: str) -> str:
    """Style a matched substring."""
    return click.style(text, fg="red", bold=True)


def distinct_words(words: tuple[MatchedWord, ...]) -> list[str]:
    """Return the distinct non-empty matched substrings, in discovery order."""
    return [w for w in dict.fromkeys(word.text for word in words) if w]


def _splice_offsets(content: str, words: tuple[MatchedWord, ...]) -> str:
    parts = []
    pos = 0
    for word in words:
        if not word.text or word.start < pos:
            continue
        parts.append(content[pos : word.start])
        parts.append(emphasize(word.text))
        pos = word.end
    parts.append(content[pos:])
    return "".join(parts)


def _replace_words(content: str, words: tuple[MatchedWord, ...]) -> str:
    distinct = distinct_words(words)
    if not distinct:
        return content
    # one pass over the content; longest first so "category" wins over "cat"
    alternation = "|".join(re.escape(w) for w in sorted(distinct, key=len, reverse=True))
    return re.sub(alternation, lambda m: emphasize(m.group()), content)


def format_line(line: MatchedLine, *, color: bool = False, highlight: HighlightMode = HighlightMode.OFFSETS) -> str:
    """Render ``line`` as ``<number>:<content>`` with matches emphasized.

    Without color the content is returned untouched. ``HighlightMode.WORDS``
    replaces every occurrence of each distinct matched word across the whole
    line, so a match also lights up inside longer words that contain it.
    """
    number = f"{line.number:>{LINE_NUMBER_WIDTH}}"
    content = line.content
    if color:
        number = click.style(number, fg="cyan")
        if highlight is HighlightMode.WORDS:
            content = _replace_words(content, line.words)
        else:
            content = _splice_offsets(content, line.words)
    return f"{number}:{content}"


def format_source_name(name: str, *, color: bool = False) -> str:
    """Render a source name as used in multi-source headers."""
    return click.style(name, fg="green") if color else name


def format_count(name: str, count: int, *, color: bool = False) -> str:
    """Render a ``<name>:<count>`` line."""
    return f"{format_source_name(name, color=color)}:{count}"
