"""Logging setup for the CLI.

Library modules only ever call ``logging.getLogger(__name__)``; handler
installation happens here, once, at process start.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    """Return a RichHandler on stderr, or a plain StreamHandler without Rich."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )


def configure_logging(verbose: bool = False) -> None:
    """Install a single handler on the ``rbdl`` logger.

    ``verbose`` selects DEBUG; otherwise only warnings and above are
    shown.  Calling this again replaces the previous handler.
    """
    logger = logging.getLogger("rbdl")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(_build_handler())
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
