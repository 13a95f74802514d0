"""Binary layout of a KSUID.

A KSUID is 20 bytes, big-endian::

    offset 0..4   : timestamp - EPOCH (uint32)
    offset 4..20  : payload (16 opaque bytes)

Every function here is pure.  Filling in a missing timestamp or payload
is the job of :class:`~ksortable.core.generator.KsuidGenerator`.
"""

from __future__ import annotations

import math
import struct
from numbers import Real

from ksortable.exceptions import (
    InvalidPayloadLengthError,
    InvalidTimestampError,
    safely_printed,
)
from ksortable.utils.constants import (
    EPOCH,
    MAX_TIME,
    PAYLOAD_LENGTH,
    TIMESTAMP_LENGTH,
)

_OFFSET = struct.Struct(">I")


# ---------------------------------------------------------------------------
# Argument checks
# ---------------------------------------------------------------------------

def check_timestamp(value: object) -> int:
    """Return *value* as whole Unix seconds, or raise.

    Accepts any finite real number except ``bool``; fractional seconds
    are truncated toward zero.

    Raises
    ------
    InvalidTimestampError
        If *value* is not numeric or falls outside
        ``[EPOCH, MAX_TIME]``.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidTimestampError(
            f"Timestamp must be numeric, got {safely_printed(value)} instead",
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidTimestampError(
            f"Timestamp must be finite, got {safely_printed(value)} instead",
        )
    seconds = int(value)
    if not EPOCH <= seconds <= MAX_TIME:
        raise InvalidTimestampError(
            f"Timestamp must be between {EPOCH} and {MAX_TIME}, "
            f"got {seconds} instead",
        )
    return seconds


def check_payload(value: object) -> bytes:
    """Return *value* as an immutable 16-byte payload, or raise.

    Raises
    ------
    InvalidPayloadLengthError
        If *value* is not bytes-like or is not exactly 16 bytes long.
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidPayloadLengthError(
            f"KSUID payloads must be {PAYLOAD_LENGTH} bytes, "
            f"got {safely_printed(value)} instead",
        )
    payload = bytes(value)
    if len(payload) != PAYLOAD_LENGTH:
        raise InvalidPayloadLengthError(
            f"KSUID payloads must be {PAYLOAD_LENGTH} bytes, "
            f"got {len(payload)} instead",
        )
    return payload


# ---------------------------------------------------------------------------
# Pack / unpack
# ---------------------------------------------------------------------------

def construct(timestamp: object, payload: object) -> bytes:
    """Pack an absolute *timestamp* and a 16-byte *payload* into 20 bytes."""
    seconds = check_timestamp(timestamp)
    data = check_payload(payload)
    return _OFFSET.pack(seconds - EPOCH) + data


def timestamp_of(raw: bytes) -> int:
    """Return the absolute Unix timestamp stored in *raw*."""
    (offset,) = _OFFSET.unpack_from(raw, 0)
    return EPOCH + offset


def payload_of(raw: bytes) -> bytes:
    """Return the 16 payload bytes stored in *raw*."""
    return bytes(raw[TIMESTAMP_LENGTH:])
