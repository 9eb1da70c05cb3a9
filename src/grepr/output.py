"""Output layer: display text or a JSON envelope, diagnostics on stderr."""

import json
from typing import NoReturn

import click
import typer

from .errors import SourceError
from .formatter import HighlightMode, format_count, format_line, format_source_name
from .matcher import MatchedLine


def print_plain(*messages: object) -> None:
    """Print messages to stdout separated by spaces."""
    click.echo(" ".join(str(m) for m in messages))


class SearchOutput:
    """Renders a run in display or JSON mode.

    Display mode writes each source as soon as it has been searched. JSON mode
    collects every source and writes one ``{"ok": true, "data": ...}`` envelope
    from ``finish``. Diagnostics always go to stderr.
    """

    def __init__(
        self,
        *,
        multi_source: bool,
        count: bool = False,
        color: bool = False,
        highlight: HighlightMode = HighlightMode.OFFSETS,
        json_mode: bool = False,
    ) -> None:
        self.multi_source = multi_source
        self.count = count
        self.color = color
        self.highlight = highlight
        self.json_mode = json_mode
        self._sources: list[dict[str, object]] = []
        self._errors: list[dict[str, str]] = []

    def _echo(self, message: str) -> None:
        click.echo(message, color=self.color)

    def source_error(self, error: SourceError) -> None:
        """Report a failed source; the run goes on."""
        click.echo(str(error), err=True)
        self._errors.append({"source": error.source, "error": error.code, "message": str(error)})

    def source_result(self, source: str, lines: list[MatchedLine]) -> None:
        """Output one searched source according to the run's mode."""
        if self.json_mode:
            self._sources.append(self._source_json(source, lines))
        elif self.count:
            self._echo(format_count(source, len(lines), color=self.color) if self.multi_source else str(len(lines)))
        else:
            if self.multi_source and lines:
                self._echo(format_source_name(source, color=self.color))
            for line in lines:
                self._echo(format_line(line, color=self.color, highlight=self.highlight))

    def _source_json(self, source: str, lines: list[MatchedLine]) -> dict[str, object]:
        data: dict[str, object] = {"source": source, "count": len(lines)}
        if not self.count:
            data["lines"] = [
                {
                    "number": line.number,
                    "content": line.content,
                    "words": [{"start": w.start, "text": w.text} for w in line.words],
                }
                for line in lines
            ]
        return data

    def finish(self, summary: dict[str, int] | None = None) -> None:
        """Write the JSON envelope with the run totals; nothing to do in display mode."""
        if self.json_mode:
            data = {"sources": self._sources, "errors": self._errors, "summary": summary or {}}
            click.echo(json.dumps({"ok": True, "data": data}))


def print_error_and_exit(code: str, message: str, *, json_mode: bool = False) -> NoReturn:
    """Print a fatal error in JSON or display format and exit with code 1."""
    if json_mode:
        click.echo(json.dumps({"ok": False, "error": code, "message": message}))
    else:
        click.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)
