"""CLI application entry point and command routing for ksortable.

This module is the **sole error boundary** for the command-line tool.
It catches :class:`~ksortable.exceptions.KsuidError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Commands
--------
* ``ksortable new``      — generate KSUIDs
* ``ksortable inspect``  — show the components of existing KSUIDs
* ``ksortable next``     — print the successor of a KSUID
* ``ksortable prev``     — print the predecessor of a KSUID
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ksortable.cli import exit_codes
from ksortable.cli.console import configure_logging, console, escape_markup
from ksortable.cli.render import FORMATS, print_inspection, render_line
from ksortable.core.models import Ksuid
from ksortable.exceptions import InvalidPayloadLengthError, KsuidError, safely_printed
from ksortable.utils.constants import PAYLOAD_LENGTH
from ksortable.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _add_format_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default="string",
        help="Output format (default: %(default)s).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="ksortable",
        description="Generate and inspect K-Sortable Unique IDentifiers.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    new = commands.add_parser("new", help="Generate new KSUIDs.")
    new.add_argument(
        "-n",
        "--count",
        type=_positive_int,
        default=1,
        help="Number of KSUIDs to generate (default: %(default)s).",
    )
    new.add_argument(
        "-t",
        "--timestamp",
        type=int,
        default=None,
        help="Unix timestamp in seconds (default: now).",
    )
    new.add_argument(
        "-p",
        "--payload",
        default=None,
        help=f"Payload as {PAYLOAD_LENGTH * 2} hex digits (default: random).",
    )
    _add_format_option(new)

    inspect = commands.add_parser("inspect", help="Show the components of KSUIDs.")
    inspect.add_argument("ksuids", nargs="+", metavar="KSUID")

    for name, help_text in (
        ("next", "Print the KSUID immediately after KSUID."),
        ("prev", "Print the KSUID immediately before KSUID."),
    ):
        step = commands.add_parser(name, help=help_text)
        step.add_argument("ksuid", metavar="KSUID")
        _add_format_option(step)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _parse_payload(text: str | None) -> bytes | None:
    """Convert a hex payload argument into bytes."""
    if text is None:
        return None
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise InvalidPayloadLengthError(
            f"Payload must be hexadecimal, got {safely_printed(text)}",
            hint=f"Pass exactly {PAYLOAD_LENGTH * 2} hex digits.",
        ) from exc


def _emit(ksuids: Sequence[Ksuid], fmt: str) -> None:
    """Write *ksuids* to stdout in the requested format."""
    if fmt == "inspect":
        print_inspection(ksuids)
        return
    for ksuid in ksuids:
        print(render_line(ksuid, fmt), file=sys.stdout)


def _handle_new(args: argparse.Namespace) -> int:
    payload = _parse_payload(args.payload)
    ksuids = [
        Ksuid.create(args.timestamp, payload)
        for _ in range(args.count)
    ]
    logger.debug("Generated %d KSUID(s)", len(ksuids))
    _emit(ksuids, args.format)
    return exit_codes.SUCCESS


def _handle_inspect(args: argparse.Namespace) -> int:
    ksuids = [Ksuid.parse(text) for text in args.ksuids]
    print_inspection(ksuids)
    return exit_codes.SUCCESS


def _handle_step(args: argparse.Namespace) -> int:
    current = Ksuid.parse(args.ksuid)
    neighbour = current.next() if args.command == "next" else current.previous()
    _emit([neighbour], args.format)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ksortable CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "new":
        return _handle_new(args)
    if args.command == "inspect":
        return _handle_inspect(args)
    return _handle_step(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except KsuidError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
