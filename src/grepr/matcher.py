"""Line scanning and match extraction.

A source is decoded into a single text buffer, split into numbered lines, and
each line is kept when ``pattern.is_match(line) ^ invert``. Kept lines of a
non-inverted search carry every non-overlapping occurrence of the pattern so
the formatter can highlight them.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO

from .pattern import Pattern

# \r\n first so a Windows terminator is one boundary, not two
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class MatchedWord:
    """One occurrence of the pattern inside a line."""

    start: int
    text: str

    @property
    def end(self) -> int:
        """Offset just past the occurrence."""
        return self.start + len(self.text)


@dataclass(frozen=True)
class MatchedLine:
    """A line kept by the scanner, with its 1-based number."""

    number: int
    content: str
    words: tuple[MatchedWord, ...] = field(default=())


def split_lines(text: str) -> Iterator[str]:
    """Yield lines of ``text`` without their terminators.

    ``\\n``, ``\\r\\n`` and a lone ``\\r`` all end a line. A trailing terminator
    does not produce an extra empty line, and a last line without one is kept.
    """
    pos = 0
    for m in _LINE_BREAK.finditer(text):
        yield text[pos : m.start()]
        pos = m.end()
    if pos < len(text):
        yield text[pos:]


def extract_words(line: str, pattern: Pattern) -> list[MatchedWord]:
    """Return every non-overlapping occurrence of ``pattern`` in ``line``, left to right.

    After an empty match the search resumes one character further on, so a
    pattern that matches the empty string yields at most ``len(line) + 1`` words.
    """
    return [MatchedWord(start=m.start(), text=m.group()) for m in pattern.finditer(line)]


def match_text(text: str, pattern: Pattern, *, invert: bool = False) -> list[MatchedLine]:
    """Scan an in-memory buffer and return the kept lines in order."""
    matched = []
    for number, line in enumerate(split_lines(text), start=1):
        if pattern.is_match(line) ^ invert:
            # inverted lines did not match, so there is nothing to highlight
            words = () if invert else tuple(extract_words(line, pattern))
            matched.append(MatchedLine(number=number, content=line, words=words))
    return matched


def scan(stream: TextIO, pattern: Pattern, *, invert: bool = False) -> list[MatchedLine]:
    """Read ``stream`` to the end and return its kept lines.

    I/O and decoding errors propagate; the caller discards the whole source.
    """
    return match_text(stream.read(), pattern, invert=invert)
