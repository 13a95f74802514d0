"""Functional interface over binary KSUIDs.

These functions work on plain 20-byte ``bytes`` values and are the
distrustful entry points: each one validates its argument before doing
any work.  :class:`~ksortable.core.models.Ksuid` offers the same
operations as methods on an immutable value.
"""

from __future__ import annotations

from functools import lru_cache

from ksortable.core import arithmetic, base62
from ksortable.core.binary import payload_of, timestamp_of
from ksortable.core.generator import KsuidGenerator
from ksortable.core.validation import (
    is_valid_binary,
    is_valid_string,
    require_binary,
    require_string,
)
from ksortable.infra.system import SecureEntropySource, SystemClock


@lru_cache(maxsize=1)
def default_generator() -> KsuidGenerator:
    """Return the process-wide generator backed by the system providers."""
    return KsuidGenerator(SystemClock(), SecureEntropySource())


def create_ksuid(timestamp: object = None, payload: object = None) -> bytes:
    """Build a binary KSUID, defaulting to now and random bytes."""
    return default_generator().construct(timestamp, payload)


def ksuid_to_string(raw: object) -> str:
    return base62.encode(require_binary(raw))


def string_to_ksuid(text: object) -> bytes:
    return base62.decode(require_string(text))


def is_ksuid(value: object) -> bool:
    return is_valid_binary(value)


def is_ksuid_string(value: object) -> bool:
    return is_valid_string(value)


def time_of_ksuid(raw: object) -> int:
    return timestamp_of(require_binary(raw))


def payload_of_ksuid(raw: object) -> bytes:
    return payload_of(require_binary(raw))


def next_ksuid(raw: object) -> bytes:
    return arithmetic.successor(require_binary(raw))


def previous_ksuid(raw: object) -> bytes:
    return arithmetic.predecessor(require_binary(raw))
