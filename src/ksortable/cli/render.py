"""Rendering of KSUIDs for the ``ksortable`` command.

Produces single-line renderings for the ``--format`` option and a
Rich table for ``ksortable inspect``, falling back to aligned plain
text when Rich is not installed.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from ksortable.cli.console import output
from ksortable.core.models import Ksuid

FORMATS: tuple[str, ...] = ("string", "inspect", "time", "timestamp", "payload", "raw")


# ---------------------------------------------------------------------------
# Single-line renderings
# ---------------------------------------------------------------------------

_RENDERERS: dict[str, Callable[[Ksuid], str]] = {
    "string": lambda k: k.string,
    "time": lambda k: k.datetime.isoformat(),
    "timestamp": lambda k: str(k.timestamp),
    "payload": lambda k: k.payload.hex().upper(),
    "raw": lambda k: k.bytes.hex().upper(),
}


def render_line(ksuid: Ksuid, fmt: str) -> str:
    """Render *ksuid* as one line in the given *fmt*.

    ``inspect`` is not a single-line format; use
    :func:`print_inspection` for it.
    """
    try:
        renderer = _RENDERERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown format: {fmt}") from None
    return renderer(ksuid)


# ---------------------------------------------------------------------------
# Inspection table
# ---------------------------------------------------------------------------

def _inspection_rows(ksuid: Ksuid) -> list[tuple[str, str]]:
    """Return (label, value) pairs describing *ksuid*."""
    return [
        ("String", ksuid.string),
        ("Raw", ksuid.bytes.hex().upper()),
        ("Time", ksuid.datetime.isoformat()),
        ("Timestamp", str(ksuid.timestamp)),
        ("Payload", ksuid.payload.hex().upper()),
    ]


def _print_plain_inspection(ksuids: Sequence[Ksuid]) -> None:
    """Render the inspection without Rich."""
    for ksuid in ksuids:
        print(file=sys.stdout)
        for label, value in _inspection_rows(ksuid):
            print(f"{label + ':':>12} {value}", file=sys.stdout)
    print(file=sys.stdout)


def print_inspection(ksuids: Sequence[Ksuid]) -> None:
    """Render one table per KSUID on stdout."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_inspection(ksuids)
        return

    for ksuid in ksuids:
        table = Table(
            title=ksuid.string,
            show_header=False,
            border_style="dim",
        )
        table.add_column("Field", style="bold cyan", min_width=10)
        table.add_column("Value")
        for label, value in _inspection_rows(ksuid):
            table.add_row(label, value)
        output.print(table)
