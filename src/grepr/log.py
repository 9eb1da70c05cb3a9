"""Logging setup: stdlib logging rendered by Rich on stderr."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(*, verbose: bool = False) -> None:
    """Configure the ``grepr`` logger; stdout stays reserved for results."""
    logger = logging.getLogger("grepr")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    # repeated calls (tests, embedding) must not stack handlers
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
