"""Console and logging helpers with optional Rich support.

Rich is imported lazily so that ``--help``, ``--version`` and plain id
generation keep working when it is not installed.  Results go to stdout
so they can be piped; messages and log records go to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console, or return ``None`` when Rich is missing."""
    try:
        from rich.console import Console
    except ModuleNotFoundError:
        return None
    return Console(stderr=stderr, highlight=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain-text fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain ``print``."""
        rich_console = get_rich_console(stderr=self._stderr)
        if rich_console is None:
            stream = sys.stderr if self._stderr else sys.stdout
            print(*objects, file=stream)
            return
        rich_console.print(*objects)


def escape_markup(text: str) -> str:
    """Escape Rich markup in *text* so user input renders literally."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


console = _ConsoleProxy(stderr=True)
"""Diagnostics, errors and hints."""

output = _ConsoleProxy(stderr=False)
"""Command results."""


def configure_logging(verbose: bool = False) -> None:
    """Route ``ksortable`` log records to stderr.

    Parameters
    ----------
    verbose:
        Emit DEBUG records when ``True``, otherwise WARNING and above.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    else:
        handler = RichHandler(
            console=get_rich_console(stderr=True),
            show_time=False,
            show_path=False,
        )

    package_logger = logging.getLogger("ksortable")
    for existing in list(package_logger.handlers):
        if not isinstance(existing, logging.NullHandler):
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
