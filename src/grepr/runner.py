"""Run aggregation: search every source in order and hand results to the output layer."""

import logging
import sys
from collections.abc import Sequence
from dataclasses import asdict, dataclass

from .config import SearchOptions
from .errors import SourceError, SourceReadError
from .matcher import MatchedLine, scan
from .output import SearchOutput
from .pattern import Pattern
from .sources import open_source, resolve_sources

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Totals for one run."""

    sources_searched: int = 0
    sources_failed: int = 0
    lines_matched: int = 0


def search_source(source: str, pattern: Pattern, options: SearchOptions) -> list[MatchedLine]:
    """Open and scan one source.

    Raises SourceOpenError or SourceReadError; a source that fails part way
    through yields no lines at all.
    """
    with open_source(source, encoding=options.encoding) as stream:
        try:
            return scan(stream, pattern, invert=options.invert)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError.from_os_error(source, e) from e


def run(specs: Sequence[str], pattern: Pattern, options: SearchOptions) -> RunSummary:
    """Search ``specs`` with ``pattern`` and print the results.

    The single- or multi-source output mode is chosen from the number of
    resolved sources before anything is searched. Per-source failures are
    reported on stderr and never stop the run.
    """
    resolved = resolve_sources(specs, recursive=options.recursive)
    sources = [s for s in resolved if isinstance(s, str)]
    logger.debug("resolved %d source(s) from %d specifier(s)", len(sources), len(specs))

    output = SearchOutput(
        multi_source=len(sources) > 1,
        count=options.count,
        color=options.color.enabled(sys.stdout.isatty()),
        highlight=options.highlight,
        json_mode=options.json_mode,
    )
    summary = RunSummary()

    for item in resolved:
        if isinstance(item, SourceError):
            summary.sources_failed += 1
            output.source_error(item)
            continue
        try:
            lines = search_source(item, pattern, options)
        except SourceError as e:
            summary.sources_failed += 1
            output.source_error(e)
            continue
        summary.sources_searched += 1
        summary.lines_matched += len(lines)
        logger.debug("%s: %d matching line(s)", item, len(lines))
        output.source_result(item, lines)

    logger.debug(
        "searched=%d failed=%d matched=%d", summary.sources_searched, summary.sources_failed, summary.lines_matched
    )
    output.finish(asdict(summary))
    return summary
