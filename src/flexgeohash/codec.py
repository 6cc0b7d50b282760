"""Functional API over Geohash, the main entry point for the library."""

from __future__ import annotations

import logging

from flexgeohash.encoding import DEFAULT_ENCODING, DEFAULT_PRECISION, Encoding
from flexgeohash.geohash import Geohash
from flexgeohash.models import LatLngLike, Region
from flexgeohash.neighbors import Direction

logger = logging.getLogger(__name__)


def _as_geohash(
    value: Geohash | str, encoding: Encoding | str | int = DEFAULT_ENCODING
) -> Geohash:
    if isinstance(value, Geohash):
        return value
    return Geohash.from_hash(value, Encoding.parse(encoding))


def geohash(
    coordinate: LatLngLike,
    precision: int = DEFAULT_PRECISION,
    encoding: Encoding | str | int = DEFAULT_ENCODING,
) -> Geohash:
    """Build the Geohash cell containing *coordinate*."""
    return Geohash.from_coordinate(
        coordinate, precision, Encoding.parse(encoding)
    )


def parse(
    text: str, encoding: Encoding | str | int = DEFAULT_ENCODING
) -> Geohash:
    """Parse *text* into a Geohash whose precision is ``len(text)``."""
    return Geohash.from_hash(text, Encoding.parse(encoding))


def encode(
    coordinate: LatLngLike,
    precision: int = DEFAULT_PRECISION,
    encoding: Encoding | str | int = DEFAULT_ENCODING,
) -> str:
    """
    Encode *coordinate* as a geohash string of *precision* characters.

    Raises CoordinateOutOfRange, InvalidPrecision or PrecisionOverflow.
    """
    text = geohash(coordinate, precision, encoding).hash
    logger.debug(
        "Encoded (%s, %s) -> %s",
        coordinate.latitude,
        coordinate.longitude,
        text,
    )
    return text


def decode(
    text: str, encoding: Encoding | str | int = DEFAULT_ENCODING
) -> Region:
    """
    Decode a geohash string into the region it denotes.

    Raises InvalidCharacter for symbols outside the encoding's alphabet.
    """
    return parse(text, encoding).region


def neighbor(
    value: Geohash | str,
    direction: Direction | str,
    encoding: Encoding | str | int = DEFAULT_ENCODING,
) -> Geohash:
    """
    Return the cell adjacent to *value* in *direction*.

    *value* may be a Geohash or a string in *encoding*; *direction* a
    Direction or a name such as ``"north"`` or ``"sw"``.
    """
    return _as_geohash(value, encoding).neighbor(direction)


def neighbors(
    value: Geohash | str,
    diagonals: bool = True,
    encoding: Encoding | str | int = DEFAULT_ENCODING,
) -> list[Geohash]:
    """Return the 8 surrounding cells, or 4 without *diagonals*."""
    return _as_geohash(value, encoding).neighbors(diagonals)


def region(
    value: Geohash | str, encoding: Encoding | str | int = DEFAULT_ENCODING
) -> Region:
    return _as_geohash(value, encoding).region


def text(
    value: Geohash | str, encoding: Encoding | str | int = DEFAULT_ENCODING
) -> str:
    """Return the canonical (lower-case) text form of *value*."""
    return _as_geohash(value, encoding).hash
