"""Using grepr as a library: compile once, match in-memory text, render lines."""

from typing import Annotated

import typer

from grepr import HighlightMode, Pattern, format_line, match_text
from grepr.output import print_plain

app = typer.Typer()

SAMPLE = "The cat sat.\r\nA category of cats\nNo dogs here\n"


@app.command()
def main(
    pattern: Annotated[str, typer.Argument(help="Regex pattern to search for.")] = "cat",
    ignore_case: Annotated[bool, typer.Option("--ignore-case", "-i", help="Case-insensitive matching.")] = False,
    words: Annotated[bool, typer.Option("--words", help="Highlight by distinct word instead of offsets.")] = False,
) -> None:
    """Search a built-in sample text and print the matching lines in color."""
    compiled = Pattern.compile(pattern, ignore_case=ignore_case)
    highlight = HighlightMode.WORDS if words else HighlightMode.OFFSETS
    for line in match_text(SAMPLE, compiled):
        print_plain(format_line(line, color=True, highlight=highlight))
        print_plain("        words:", ", ".join(f"{w.text}@{w.start}" for w in line.words))


if __name__ == "__main__":
    app()
