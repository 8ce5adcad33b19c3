"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so that bootstrap
paths (``--help``, ``--version``) and plain-terminal runs keep working
when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from rbdl.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def escape(text: str) -> str:
    """Escape *text* for interpolation into Rich markup.

    Plain output does not interpret markup, so without Rich the text is
    returned unchanged.
    """
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, **kwargs: Any) -> None:
        """Render with Rich when available, else plain stderr print.

        Keyword arguments are Rich options (``soft_wrap``, ``highlight``)
        and are ignored by the plain fallback.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, **kwargs)


console = _ConsoleProxy()
