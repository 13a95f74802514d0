"""Protocols (interfaces) consumed by the core layer.

The only side effects in KSUID generation are reading the clock and
reading random bytes.  Core code depends ONLY on these protocols; the
system-backed implementations live in :mod:`ksortable.infra.system`.
"""

from __future__ import annotations

from typing import Protocol


class Clock(Protocol):
    """Source of the current wall-clock time."""

    def now(self) -> float:
        """Return the current time in Unix seconds.

        Implementations may raise any exception; the generator maps it
        to :class:`~ksortable.exceptions.ClockError`.
        """
        ...  # pragma: no cover


class EntropySource(Protocol):
    """Source of cryptographically secure random bytes.

    Any object that implements :meth:`read` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def read(self, size: int) -> bytes:
        """Return exactly *size* random bytes.

        May block while the operating system gathers entropy.  A short
        read, or any exception, is reported by the generator as
        :class:`~ksortable.exceptions.EntropySourceError`.
        """
        ...  # pragma: no cover
