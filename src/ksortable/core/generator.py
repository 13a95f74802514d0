"""KSUID generator — fills in missing timestamps and payloads.

The generator depends on a :class:`~ksortable.core.protocols.Clock` and
an :class:`~ksortable.core.protocols.EntropySource` injected at
construction time, keeping the rest of the core free of any
system calls.

Guarantees
----------
* Stateless: one instance may be shared freely across threads.
* Only :class:`~ksortable.exceptions.KsuidError` subclasses escape.
* ``None`` means "not provided".  Explicit values, including an
  all-zero payload, are always used as given.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ksortable.core.binary import check_payload, check_timestamp, construct
from ksortable.core.protocols import Clock, EntropySource
from ksortable.exceptions import (
    ClockError,
    EntropySourceError,
    KsuidError,
    safely_printed,
)
from ksortable.utils.constants import PAYLOAD_LENGTH

if TYPE_CHECKING:
    from ksortable.core.models import Ksuid

logger = logging.getLogger(__name__)


class KsuidGenerator:
    """Build KSUIDs from a clock and an entropy source.

    Parameters
    ----------
    clock:
        Any object satisfying the :class:`Clock` protocol.
    entropy:
        Any object satisfying the :class:`EntropySource` protocol.
    """

    def __init__(self, clock: Clock, entropy: EntropySource) -> None:
        self._clock: Clock = clock
        self._entropy: EntropySource = entropy

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def construct(
        self,
        timestamp: object = None,
        payload: object = None,
    ) -> bytes:
        """Return a 20-byte KSUID.

        Arguments are validated before the clock or entropy source is
        consulted, so an invalid explicit argument never costs a read
        from the random source.

        Raises
        ------
        InvalidTimestampError
            If *timestamp* (or the clock reading) is out of range.
        InvalidPayloadLengthError
            If *payload* is not exactly 16 bytes.
        ClockError
            If the clock fails.
        EntropySourceError
            If the entropy source fails or returns a short read.
        """
        seconds = check_timestamp(timestamp) if timestamp is not None else None
        data = check_payload(payload) if payload is not None else None

        if seconds is None:
            seconds = self._now()
        if data is None:
            data = self._random_payload()

        return construct(seconds, data)

    def create(
        self,
        timestamp: object = None,
        payload: object = None,
    ) -> Ksuid:
        """Return a :class:`~ksortable.core.models.Ksuid` value."""
        from ksortable.core.models import Ksuid

        return Ksuid(self.construct(timestamp, payload))

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _now(self) -> int:
        """Read the clock and ensure only our exceptions escape."""
        try:
            reading = self._clock.now()
        except KsuidError:
            raise
        except Exception as exc:
            raise ClockError(f"Clock provider failed: {exc}") from exc
        try:
            return check_timestamp(reading)
        except KsuidError as exc:
            raise ClockError(
                f"Clock returned an unusable time {safely_printed(reading)}",
                hint=str(exc),
            ) from exc

    def _random_payload(self) -> bytes:
        """Read a fresh payload and ensure only our exceptions escape."""
        try:
            data = self._entropy.read(PAYLOAD_LENGTH)
        except KsuidError:
            raise
        except Exception as exc:
            raise EntropySourceError(f"Entropy source failed: {exc}") from exc

        if not isinstance(data, (bytes, bytearray)) or len(data) != PAYLOAD_LENGTH:
            raise EntropySourceError(
                f"Entropy source must return {PAYLOAD_LENGTH} bytes, "
                f"got {safely_printed(data)}",
            )
        logger.debug("Drew %d random payload bytes", PAYLOAD_LENGTH)
        return bytes(data)
