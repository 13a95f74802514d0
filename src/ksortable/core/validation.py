"""Well-formedness checks for binary and string KSUIDs.

The ``is_*`` predicates never raise.  The ``require_*`` helpers are the
guard clauses every public operation runs before doing any work.
"""

from __future__ import annotations

import re

from ksortable.exceptions import (
    InvalidKsuidError,
    InvalidKsuidStringError,
    safely_printed,
)
from ksortable.utils.constants import (
    BYTE_LENGTH,
    MAX,
    MAX_STRING,
    MIN,
    MIN_STRING,
    STRING_LENGTH,
)

_CHARSET = re.compile(r"[0-9A-Za-z]*")


def is_valid_binary(value: object) -> bool:
    """Return ``True`` when *value* is a 20-byte buffer within ``[MIN, MAX]``."""
    if not isinstance(value, (bytes, bytearray)):
        return False
    return len(value) == BYTE_LENGTH and MIN <= value <= MAX


def is_valid_string(value: object) -> bool:
    """Return ``True`` when *value* is a well-formed KSUID string.

    The range check rejects 27-digit strings whose value would overflow
    160 bits, which the charset check alone would let through.
    """
    if not isinstance(value, str):
        return False
    return (
        len(value) == STRING_LENGTH
        and MIN_STRING <= value <= MAX_STRING
        and _CHARSET.fullmatch(value) is not None
    )


def require_binary(value: object) -> bytes:
    """Return *value* as ``bytes`` or raise :class:`InvalidKsuidError`."""
    if not is_valid_binary(value):
        raise InvalidKsuidError(
            f"Expected a valid KSUID, got instead {safely_printed(value)}",
            hint=f"A binary KSUID is exactly {BYTE_LENGTH} bytes.",
        )
    return bytes(value)  # type: ignore[arg-type]


def require_string(value: object) -> str:
    """Return *value* or raise :class:`InvalidKsuidStringError`."""
    if not is_valid_string(value):
        raise InvalidKsuidStringError(
            f"Expected a string KSUID, got instead {safely_printed(value)}",
            hint=(
                f"A KSUID string is {STRING_LENGTH} characters from 0-9A-Za-z "
                f"between {MIN_STRING} and {MAX_STRING}."
            ),
        )
    return value  # type: ignore[return-value]
