"""Command-line entry point."""

import importlib.metadata
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from .config import ColorMode, GreprConfig, SearchOptions
from .errors import InvalidPatternError
from .formatter import HighlightMode
from .log import setup_logging
from .output import print_error_and_exit, print_plain
from .pattern import Pattern
from .runner import run
from .utils import fatal

PACKAGE_NAME = "grepr"


def create_version_callback(package_name: str) -> Callable[[bool], None]:
    """Create a --version flag callback for a Typer CLI app.

    Args:
        package_name: The installed package name to look up the version for.

    """

    def version_callback(value: bool) -> None:
        """Print the version and exit when --version is passed."""
        if value:
            print_plain(f"{package_name}: {importlib.metadata.version(package_name)}")
            raise typer.Exit

    return version_callback


app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)


@app.command()
def main(
    pattern: Annotated[str, typer.Argument(help="Regular expression to search for.")],
    files: Annotated[
        list[str] | None, typer.Argument(help="Files, directories or glob patterns. Reads stdin when omitted or '-'.")
    ] = None,
    insensitive: Annotated[bool, typer.Option("--insensitive", "--ignore-case", "-i", help="Case-insensitive matching.")] = False,
    invert_match: Annotated[bool, typer.Option("--invert-match", "-v", help="Select non-matching lines.")] = False,
    count: Annotated[bool, typer.Option("--count", "-c", help="Print the number of selected lines per source.")] = False,
    recursive: Annotated[bool, typer.Option("--recursive", "-r", help="Search directories recursively.")] = False,
    color: Annotated[ColorMode | None, typer.Option(help="Colorize output. Defaults to the config file, then auto.")] = None,
    highlight: Annotated[
        HighlightMode | None, typer.Option(help="Emphasize matches by recorded offsets or by distinct word.")
    ] = None,
    encoding: Annotated[str | None, typer.Option(help="Text encoding of input sources.")] = None,
    json_mode: Annotated[bool, typer.Option("--json", help="Print results as a JSON envelope.")] = False,
    config: Annotated[Path | None, typer.Option("--config", help="Path to a TOML config file.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Log debug details to stderr.")] = False,
    _version: Annotated[
        bool | None,
        typer.Option(
            "--version", "-V", callback=create_version_callback(PACKAGE_NAME), is_eager=True, help="Show version and exit."
        ),
    ] = None,
) -> None:
    """Print lines matching PATTERN, or per-source counts with --count."""
    setup_logging(verbose=verbose)
    cfg = GreprConfig.discover(config)

    try:
        options = SearchOptions(
            ignore_case=insensitive,
            invert=invert_match,
            count=count,
            recursive=recursive,
            color=color or cfg.color,
            highlight=highlight or cfg.highlight,
            encoding=encoding or cfg.encoding,
            json_mode=json_mode,
        )
    except ValidationError as e:
        fatal("\n".join(["invalid options", *(f"  {err['loc'][0]}: {err['msg']}" for err in e.errors())]))

    try:
        compiled = Pattern.compile(pattern, ignore_case=options.ignore_case)
    except InvalidPatternError as e:
        print_error_and_exit("INVALID_PATTERN", str(e), json_mode=options.json_mode)

    run(files or [], compiled, options)


if __name__ == "__main__":
    app()
