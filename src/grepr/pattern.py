"""Search pattern compilation."""

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Self

from .errors import InvalidPatternError


@dataclass(frozen=True)
class Pattern:
    """Compiled search expression plus its case-sensitivity mode.

    Build with ``Pattern.compile``; once built it applies to any text without further checks.
    """

    source: str
    regex: re.Pattern[str] = field(repr=False, compare=False)
    ignore_case: bool = False

    @classmethod
    def compile(cls, pattern: str, *, ignore_case: bool = False) -> Self:
        """Compile ``pattern``, raising InvalidPatternError on malformed syntax."""
        flags = re.IGNORECASE if ignore_case else 0
        try:
            regex = re.compile(pattern, flags)
        except re.error as e:
            raise InvalidPatternError(pattern, str(e)) from e
        return cls(source=pattern, ignore_case=ignore_case, regex=regex)

    def is_match(self, text: str) -> bool:
        """Return True if the pattern occurs anywhere in ``text``."""
        return self.regex.search(text) is not None

    def finditer(self, text: str) -> Iterator[re.Match[str]]:
        """Iterate over non-overlapping, leftmost-first matches in ``text``.

        After an empty match the next search starts one character later, so an
        empty match is never followed by another match at the same offset.
        """
        pos = 0
        while pos <= len(text):
            m = self.regex.search(text, pos)
            if m is None:
                return
            yield m
            pos = m.end() + (1 if m.start() == m.end() else 0)
