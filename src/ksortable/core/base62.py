"""Fixed-width base-62 codec for 160-bit values.

The alphabet is ``0-9A-Za-z``: digit value and ASCII code point both
increase together, and every string is left-padded to 27 characters,
so comparing two encoded strings gives the same answer as comparing the
underlying integers.
"""

from __future__ import annotations

from ksortable.exceptions import (
    InvalidBase62DigitError,
    InvalidKsuidStringError,
    safely_printed,
)
from ksortable.utils.constants import BASE62_ALPHABET, BYTE_LENGTH, STRING_LENGTH

_BASE = len(BASE62_ALPHABET)
_DIGIT_VALUES: dict[str, int] = {char: i for i, char in enumerate(BASE62_ALPHABET)}
_MAX_VALUE = (1 << (8 * BYTE_LENGTH)) - 1


def encode(raw: bytes) -> str:
    """Encode 20 big-endian bytes as a 27-character base-62 string."""
    num = int.from_bytes(raw, byteorder="big")
    chars: list[str] = []
    while num:
        num, remainder = divmod(num, _BASE)
        chars.append(BASE62_ALPHABET[remainder])
    return "".join(reversed(chars)).rjust(STRING_LENGTH, BASE62_ALPHABET[0])


def decode(text: str) -> bytes:
    """Decode a base-62 string into exactly 20 big-endian bytes.

    Raises
    ------
    InvalidBase62DigitError
        If *text* contains a character outside ``0-9A-Za-z``.
    InvalidKsuidStringError
        If the decoded value does not fit in 160 bits.
    """
    num = 0
    for position, char in enumerate(text):
        try:
            num = num * _BASE + _DIGIT_VALUES[char]
        except KeyError as exc:
            raise InvalidBase62DigitError(
                f"Invalid base-62 digit {safely_printed(char)} "
                f"at position {position}",
                hint="KSUID strings only contain the characters 0-9, A-Z and a-z.",
            ) from exc
    if num > _MAX_VALUE:
        raise InvalidKsuidStringError(
            f"Value of {safely_printed(text)} exceeds the 160-bit KSUID range",
        )
    return num.to_bytes(BYTE_LENGTH, byteorder="big")
