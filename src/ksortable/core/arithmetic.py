"""Successor and predecessor of a KSUID.

The payload behaves like the low 128 bits of a 160-bit counter: when it
is saturated (or empty) the step carries into (or borrows from) the
timestamp.  Steps past ``MIN`` or ``MAX`` are not wrapped; the
timestamp check in :func:`~ksortable.core.binary.construct` raises
:class:`~ksortable.exceptions.InvalidTimestampError` instead.
"""

from __future__ import annotations

import logging

from ksortable.core.binary import construct, payload_of, timestamp_of
from ksortable.core.validation import require_binary
from ksortable.utils.constants import MAX_PAYLOAD, MIN_PAYLOAD, PAYLOAD_LENGTH

logger = logging.getLogger(__name__)


def successor(raw: bytes) -> bytes:
    """Return the KSUID immediately after *raw*.

    Raises
    ------
    InvalidKsuidError
        If *raw* is not a valid binary KSUID.
    InvalidTimestampError
        If *raw* is :data:`~ksortable.utils.constants.MAX`.
    """
    raw = require_binary(raw)
    timestamp = timestamp_of(raw)
    payload = payload_of(raw)

    if payload == MAX_PAYLOAD:
        logger.debug("Payload overflow, carrying into timestamp %d", timestamp)
        return construct(timestamp + 1, MIN_PAYLOAD)

    value = int.from_bytes(payload, byteorder="big") + 1
    return construct(timestamp, value.to_bytes(PAYLOAD_LENGTH, byteorder="big"))


def predecessor(raw: bytes) -> bytes:
    """Return the KSUID immediately before *raw*.

    Raises
    ------
    InvalidKsuidError
        If *raw* is not a valid binary KSUID.
    InvalidTimestampError
        If *raw* is :data:`~ksortable.utils.constants.MIN`.
    """
    raw = require_binary(raw)
    timestamp = timestamp_of(raw)
    payload = payload_of(raw)

    if payload == MIN_PAYLOAD:
        logger.debug("Payload underflow, borrowing from timestamp %d", timestamp)
        return construct(timestamp - 1, MAX_PAYLOAD)

    value = int.from_bytes(payload, byteorder="big") - 1
    return construct(timestamp, value.to_bytes(PAYLOAD_LENGTH, byteorder="big"))
