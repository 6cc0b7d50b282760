"""The Geohash value type: a lattice pair rendered at a precision and encoding."""

from __future__ import annotations

import logging
from typing import Optional

from flexgeohash import bits
from flexgeohash.encoding import (
    DEFAULT_ENCODING,
    DEFAULT_PRECISION,
    Encoding,
    check_precision,
    decode_bits,
    encode_bits,
)
from flexgeohash.exceptions import CoordinateOutOfRange
from flexgeohash.models import LatLng, LatLngLike, Region
from flexgeohash.neighbors import Direction, adjacent, surrounding

logger = logging.getLogger(__name__)


def _check_range(axis: str, value: float, limit: float) -> None:
    # NaN fails both comparisons
    if not -limit <= value <= limit:
        raise CoordinateOutOfRange(axis, value, limit)


class Geohash:
    """
    A cell of the geohash grid.

    The lattice pair is fixed at construction. Precision and encoding can
    be reassigned; each assignment is validated, the per-axis bit split is
    recomputed and the memoized text is dropped. Instances carry no lock,
    so callers sharing one across threads must not reassign those two
    properties concurrently. For the same reason instances are not
    hashable.
    """

    def __init__(
        self,
        lat_int: int,
        lng_int: int,
        precision: int = DEFAULT_PRECISION,
        encoding: Encoding | str | int = DEFAULT_ENCODING,
    ):
        encoding = Encoding.parse(encoding)
        check_precision(precision, encoding)
        self._lat_int = lat_int & bits.MASK32
        self._lng_int = lng_int & bits.MASK32
        self._precision = precision
        self._encoding = encoding
        self._hash: Optional[str] = None
        self._resplit()

    # ── Constructors ──────────────────────────────────────────────

    @classmethod
    def from_coordinate(
        cls,
        coordinate: LatLngLike,
        precision: int = DEFAULT_PRECISION,
        encoding: Encoding | str | int = DEFAULT_ENCODING,
    ) -> Geohash:
        """
        Quantize *coordinate* onto the lattice.

        Raises CoordinateOutOfRange if latitude is outside [-90, 90] or
        longitude outside [-180, 180]. Nothing is clamped or wrapped.
        """
        lat = float(coordinate.latitude)
        lng = float(coordinate.longitude)
        _check_range("latitude", lat, bits.LATITUDE_RANGE)
        _check_range("longitude", lng, bits.LONGITUDE_RANGE)
        return cls(
            bits.quantize(lat, bits.LATITUDE_RANGE),
            bits.quantize(lng, bits.LONGITUDE_RANGE),
            precision,
            encoding,
        )

    @classmethod
    def from_hash(
        cls, text: str, encoding: Encoding | str | int = DEFAULT_ENCODING
    ) -> Geohash:
        """
        Parse a geohash string; its length becomes the precision.

        Raises InvalidCharacter, InvalidPrecision or PrecisionOverflow.
        """
        encoding = Encoding.parse(encoding)
        try:
            value = decode_bits(text, encoding)
        except ValueError:
            logger.debug("Rejected geohash %r (%s)", text, encoding)
            raise
        lat_int, lng_int = bits.deinterleave(value)
        geohash = cls(lat_int, lng_int, len(text), encoding)
        geohash._hash = text.lower()
        return geohash

    # ── Configuration ─────────────────────────────────────────────

    @property
    def precision(self) -> int:
        return self._precision

    @precision.setter
    def precision(self, precision: int) -> None:
        check_precision(precision, self._encoding)
        logger.debug("Precision %d -> %d", self._precision, precision)
        self._precision = precision
        self._resplit()

    @property
    def encoding(self) -> Encoding:
        return self._encoding

    @encoding.setter
    def encoding(self, encoding: Encoding | str | int) -> None:
        encoding = Encoding.parse(encoding)
        check_precision(self._precision, encoding)
        logger.debug("Encoding %s -> %s", self._encoding, encoding)
        self._encoding = encoding
        self._resplit()

    def _resplit(self) -> None:
        self._bit_count = self._precision * self._encoding.bits
        self._lat_bits, self._lng_bits = bits.split_bits(self._bit_count)
        self._hash = None

    # ── Derived values ────────────────────────────────────────────

    @property
    def lat_int(self) -> int:
        return self._lat_int

    @property
    def lng_int(self) -> int:
        return self._lng_int

    @property
    def bit_count(self) -> int:
        return self._bit_count

    @property
    def lat_bits(self) -> int:
        return self._lat_bits

    @property
    def lng_bits(self) -> int:
        return self._lng_bits

    @property
    def value(self) -> int:
        """The combined 64-bit hash with the unused low bits cleared."""
        return bits.interleave(
            self._lat_int & bits.top_bits_mask(self._lat_bits),
            self._lng_int & bits.top_bits_mask(self._lng_bits),
        )

    @property
    def hash(self) -> str:
        if self._hash is None:
            self._hash = encode_bits(
                self.value, self._encoding, self._precision
            )
        return self._hash

    @property
    def region(self) -> Region:
        lat_span = 2 * bits.LATITUDE_RANGE / (1 << self._lat_bits)
        lng_span = 2 * bits.LONGITUDE_RANGE / (1 << self._lng_bits)
        south = bits.dequantize(
            self._lat_int, self._lat_bits, bits.LATITUDE_RANGE
        )
        west = bits.dequantize(
            self._lng_int, self._lng_bits, bits.LONGITUDE_RANGE
        )
        return Region(
            center=LatLng(south + lat_span / 2, west + lng_span / 2),
            span=LatLng(lat_span, lng_span),
        )

    # ── Neighbors ─────────────────────────────────────────────────

    def neighbor(self, direction: Direction | str) -> Geohash:
        """Return the adjacent cell at the same precision and encoding."""
        lat_int, lng_int = adjacent(
            self._lat_int,
            self._lng_int,
            self._lat_bits,
            self._lng_bits,
            Direction.parse(direction),
        )
        return Geohash(lat_int, lng_int, self._precision, self._encoding)

    def neighbors(self, diagonals: bool = True) -> list[Geohash]:
        return surrounding(self, diagonals)

    # ── Dunder methods ────────────────────────────────────────────

    def _key(self) -> tuple[Encoding, int, int]:
        return self._encoding, self._precision, self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Geohash):
            return NotImplemented
        return self._key() == other._key()

    # precision and encoding take part in __eq__ and are reassignable
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.hash

    def __repr__(self) -> str:
        return f"Geohash({self.hash!r}, encoding={self._encoding})"
