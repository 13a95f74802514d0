"""Layout and boundary constants for the KSUID format.

All values are computed once at import time and are immutable
(``int``, ``str`` and ``bytes``).
"""

from __future__ import annotations

EPOCH: int = 1_400_000_000
"""Custom epoch in Unix seconds (2014-05-13T16:53:20Z)."""

TIMESTAMP_LENGTH: int = 4
PAYLOAD_LENGTH: int = 16
BYTE_LENGTH: int = TIMESTAMP_LENGTH + PAYLOAD_LENGTH
STRING_LENGTH: int = 27

MAX_TIME: int = EPOCH + 2**32 - 1
"""Latest absolute timestamp a KSUID can carry."""

BASE62_ALPHABET: str = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
)
"""Digits in ascending value order, which is also ascending ASCII order."""

MIN: bytes = b"\x00" * BYTE_LENGTH
MAX: bytes = b"\xff" * BYTE_LENGTH

MIN_PAYLOAD: bytes = b"\x00" * PAYLOAD_LENGTH
MAX_PAYLOAD: bytes = b"\xff" * PAYLOAD_LENGTH

MIN_STRING: str = BASE62_ALPHABET[0] * STRING_LENGTH
MAX_STRING: str = "aWgEPTl1tmebfsQzFP4bxwgy80V"
"""Base-62 rendering of :data:`MAX`; checked against the codec in tests."""
