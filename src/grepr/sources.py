"""Resolving command-line specifiers into sources and opening them."""

import glob
import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import IO

import click

from .errors import SourceOpenError, SourceResolutionError

logger = logging.getLogger(__name__)

STDIN = "-"

_GLOB_CHARS = frozenset("*?[")


def _walk_files(root: Path) -> Iterator[str]:
    """Yield regular files below ``root`` in name order."""
    for dirpath, dirnames, filenames in root.walk():
        dirnames.sort()
        for name in sorted(filenames):
            path = dirpath / name
            if path.is_file():
                yield str(path)


def _resolve_path(spec: str, *, recursive: bool) -> list[str | SourceResolutionError]:
    path = Path(spec)
    if path.is_dir():
        if recursive:
            return list(_walk_files(path))
        return [SourceResolutionError(spec, f"{spec} is a directory")]
    return [spec]


def resolve_sources(specs: Sequence[str], *, recursive: bool = False) -> list[str | SourceResolutionError]:
    """Turn raw specifiers into an ordered list of sources and per-specifier errors.

    Args:
        specs: Paths, glob patterns or ``"-"``; empty means standard input.
        recursive: Descend into directories instead of rejecting them.

    """
    if not specs:
        return [STDIN]

    resolved: list[str | SourceResolutionError] = []
    for spec in specs:
        if spec == STDIN:
            resolved.append(spec)
        elif Path(spec).exists():
            resolved.extend(_resolve_path(spec, recursive=recursive))
        elif _GLOB_CHARS & set(spec) and (matches := sorted(glob.glob(spec))):
            logger.debug("glob %s matched %d path(s)", spec, len(matches))
            for match in matches:
                resolved.extend(_resolve_path(match, recursive=recursive))
        else:
            resolved.append(SourceResolutionError(spec, f"{spec}: No such file or directory"))
    return resolved


@contextmanager
def open_source(source: str, *, encoding: str = "utf-8") -> Iterator[IO[str]]:
    """Open a source for reading; the file is closed when the block exits.

    Standard input is yielded as-is and left open. Files keep their raw line
    terminators (``newline=""``), the scanner splits them itself.
    """
    if source == STDIN:
        yield click.open_file(STDIN, encoding=encoding)
        return

    try:
        f = Path(source).open(encoding=encoding, newline="")  # noqa: SIM115 -- closed by the with below
    except OSError as e:
        raise SourceOpenError.from_os_error(source, e) from e
    with f:
        yield f
