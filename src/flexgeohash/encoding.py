"""Symbol widths and base-N text encoding of the combined 64-bit hash."""

from __future__ import annotations

from enum import Enum

from flexgeohash.exceptions import (
    InvalidCharacter,
    InvalidEncoding,
    InvalidPrecision,
    PrecisionOverflow,
)

ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"
_SYMBOL_INDEX = {symbol: i for i, symbol in enumerate(ALPHABET)}

HASH_BITS = 64


class Encoding(Enum):
    """Bits per character. The alphabet is the first 2**bits symbols."""

    BASE2 = 1
    BASE4 = 2
    BASE8 = 3
    BASE16 = 4
    BASE32 = 5

    @property
    def bits(self) -> int:
        return self.value

    @property
    def radix(self) -> int:
        return 1 << self.value

    @property
    def alphabet(self) -> str:
        return ALPHABET[: self.radix]

    @property
    def max_precision(self) -> int:
        return HASH_BITS // self.value

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: Encoding | str | int) -> Encoding:
        """
        Resolve *value* to an Encoding.

        Accepts a member, a name such as ``"base32"`` (any case) or a
        radix such as ``32`` / ``"32"``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key.isdigit():
                key = f"BASE{key}"
            try:
                return cls[key]
            except KeyError:
                raise InvalidEncoding(value) from None
        if isinstance(value, int) and not isinstance(value, bool):
            for member in cls:
                if member.radix == value:
                    return member
        raise InvalidEncoding(value)


# Process-wide defaults, overridable per call.
DEFAULT_PRECISION = 12
DEFAULT_ENCODING = Encoding.BASE32


def check_precision(precision: int, encoding: Encoding) -> None:
    """
    Raise if *precision* characters do not fit the 64-bit hash.

    Raises InvalidPrecision for precision < 1 and PrecisionOverflow when
    precision x bits exceeds 64.
    """
    if precision < 1:
        raise InvalidPrecision(precision, encoding)
    if precision * encoding.bits > HASH_BITS:
        raise PrecisionOverflow(precision, encoding, encoding.bits)


def encode_bits(value: int, encoding: Encoding, precision: int) -> str:
    """Render the top ``precision * bits`` bits of *value* as text."""
    check_precision(precision, encoding)
    width = encoding.bits
    mask = encoding.radix - 1
    return "".join(
        ALPHABET[(value >> (HASH_BITS - width * (i + 1))) & mask]
        for i in range(precision)
    )


def decode_bits(text: str, encoding: Encoding) -> int:
    """
    Parse *text* back into a 64-bit value, left-aligned.

    Bits below ``len(text) * bits`` are zero. ASCII upper-case symbols are
    folded to lower case; anything else outside the alphabet raises
    InvalidCharacter.
    """
    check_precision(len(text), encoding)
    width = encoding.bits
    value = 0
    for position, char in enumerate(text):
        index = _SYMBOL_INDEX.get(char.lower() if char.isascii() else char)
        if index is None or index >= encoding.radix:
            raise InvalidCharacter(char, position, encoding)
        value = (value << width) | index
    return value << (HASH_BITS - width * len(text))
