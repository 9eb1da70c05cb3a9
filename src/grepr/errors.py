"""Error hierarchy shared by the search engine and the command line."""

from typing import Self


class GreprError(Exception):
    """Base class for all grepr errors."""


class InvalidPatternError(GreprError):
    """The search expression is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f'Invalid pattern "{pattern}": {reason}')
        self.pattern = pattern
        self.reason = reason


class ConfigError(GreprError):
    """A configuration file could not be read or validated."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class SourceError(GreprError):
    """A single input source failed; the rest of the run continues.

    ``str(error)`` is the diagnostic printed to stderr.
    """

    code = "source_error"

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message)
        self.source = source

    @classmethod
    def from_os_error(cls, source: str, exc: OSError | UnicodeDecodeError) -> Self:
        """Build ``"<source>: <cause>"`` from an underlying I/O failure."""
        cause = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        return cls(source, f"{source}: {cause}")


class SourceResolutionError(SourceError):
    """A specifier does not name an openable source (missing path, directory without -r)."""

    code = "source_resolution"


class SourceOpenError(SourceError):
    """A resolved source could not be opened."""

    code = "source_open"


class SourceReadError(SourceError):
    """Reading an opened source failed part way through."""

    code = "source_read"
