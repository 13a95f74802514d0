"""The :class:`Ksuid` value object.

A frozen, slotted dataclass that exclusively owns a validated 20-byte
buffer.  Every accessor is a pure projection of that buffer, and
:meth:`Ksuid.next` / :meth:`Ksuid.previous` return new values instead
of mutating in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, TypeVar

from ksortable.core import arithmetic, base62
from ksortable.core.binary import payload_of, timestamp_of
from ksortable.core.validation import require_binary, require_string

if TYPE_CHECKING:
    from ksortable.core.generator import KsuidGenerator

_K = TypeVar("_K", bound="Ksuid")


@dataclass(frozen=True, slots=True, order=True)
class Ksuid:
    """A K-sortable unique identifier.

    Equality, hashing and ordering compare :attr:`raw`; because the
    string encoding is order-preserving, this matches comparing
    :attr:`string` values.

    Raises
    ------
    InvalidKsuidError
        If *raw* is not a 20-byte buffer.
    """

    raw: bytes
    """The 20-byte binary form."""

    _string: str | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", require_binary(self.raw))

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls: type[_K],
        timestamp: object = None,
        payload: object = None,
        *,
        generator: KsuidGenerator | None = None,
    ) -> _K:
        """Generate a KSUID, defaulting to the current time and random bytes."""
        if generator is None:
            from ksortable.api import default_generator

            generator = default_generator()
        return cls(generator.construct(timestamp, payload))

    @classmethod
    def parse(cls: type[_K], text: object) -> _K:
        """Parse a 27-character KSUID string.

        Raises
        ------
        InvalidKsuidStringError
            If *text* is not a well-formed KSUID string.
        """
        return cls(base62.decode(require_string(text)))

    @classmethod
    def from_bytes(cls: type[_K], raw: object) -> _K:
        """Wrap an existing 20-byte buffer."""
        return cls(raw)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    @property
    def bytes(self) -> bytes:
        return self.raw

    @property
    def payload(self) -> bytes:
        return payload_of(self.raw)

    @property
    def timestamp(self) -> int:
        """Absolute Unix timestamp in seconds."""
        return timestamp_of(self.raw)

    @property
    def datetime(self) -> datetime:
        """Creation time as an aware UTC :class:`~datetime.datetime`."""
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    @property
    def string(self) -> str:
        """27-character base-62 form, computed on first access."""
        if self._string is None:
            object.__setattr__(self, "_string", base62.encode(self.raw))
        return self._string  # type: ignore[return-value]

    # ------------------------------------------------------------------
    # Neighbours
    # ------------------------------------------------------------------

    def next(self: _K) -> _K:
        """Return the KSUID immediately after this one."""
        return type(self)(arithmetic.successor(self.raw))

    def previous(self: _K) -> _K:
        """Return the KSUID immediately before this one."""
        return type(self)(arithmetic.predecessor(self.raw))

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.string

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.string!r})"

    def __bytes__(self) -> bytes:
        return self.raw
