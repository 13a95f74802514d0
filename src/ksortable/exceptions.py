"""Custom exception hierarchy for ksortable.

Every error raised by the library inherits from :class:`KsuidError`.
Validation runs at the boundary of each public operation, before any
transformation, so a raised error never leaves a half-built value
behind.

Hierarchy
---------
KsuidError
├── InvalidTimestampError
├── InvalidPayloadLengthError
├── InvalidKsuidError
├── InvalidKsuidStringError
│   └── InvalidBase62DigitError
└── ProviderError
    ├── ClockError
    └── EntropySourceError
"""

from __future__ import annotations

_MAX_RENDERED_LENGTH = 64


class KsuidError(Exception):
    """Base exception for all ksortable errors.

    The CLI error boundary renders ``str(exc)`` followed by the optional
    :attr:`hint`, so messages should name the offending value and the
    expected contract.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Construction ----------------------------------------------------------

class InvalidTimestampError(KsuidError):
    """Raised when a timestamp is non-numeric or outside the KSUID range."""


class InvalidPayloadLengthError(KsuidError):
    """Raised when a payload is not exactly 16 bytes."""


# --- Parsing / validation --------------------------------------------------

class InvalidKsuidError(KsuidError):
    """Raised when a value is not a well-formed 20-byte KSUID."""


class InvalidKsuidStringError(KsuidError):
    """Raised when a value is not a well-formed 27-character KSUID string."""


class InvalidBase62DigitError(InvalidKsuidStringError):
    """Raised when a character outside ``0-9A-Za-z`` is decoded."""


# --- Injected providers ----------------------------------------------------

class ProviderError(KsuidError):
    """Raised when an injected clock or entropy source misbehaves."""


class ClockError(ProviderError):
    """Raised when the clock provider fails or returns a non-number."""


class EntropySourceError(ProviderError):
    """Raised when the entropy provider fails or returns a short read."""


def safely_printed(value: object) -> str:
    """Render *value* for an error message, whatever it is.

    Uses :func:`repr` so that unprintable bytes are escaped, and
    truncates long renderings so a huge input cannot flood the terminal.
    """
    if value is None:
        return "None"
    try:
        rendered = repr(value)
    except Exception:  # noqa: BLE001
        rendered = f"<unrepresentable {type(value).__name__}>"
    if len(rendered) > _MAX_RENDERED_LENGTH:
        rendered = rendered[: _MAX_RENDERED_LENGTH - 3] + "..."
    return rendered
