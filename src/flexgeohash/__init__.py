"""flexgeohash — Geohash encoding with selectable symbol width."""

from flexgeohash.codec import (
    DEFAULT_ENCODING,
    DEFAULT_PRECISION,
    decode,
    encode,
    neighbor,
    neighbors,
    parse,
    region,
    text,
)
from flexgeohash.encoding import ALPHABET, Encoding
from flexgeohash.exceptions import (
    CoordinateOutOfRange,
    GeohashError,
    InvalidCharacter,
    InvalidDirection,
    InvalidEncoding,
    InvalidPrecision,
    PrecisionOverflow,
)
from flexgeohash.geohash import Geohash
from flexgeohash.models import LatLng, LatLngLike, Region
from flexgeohash.neighbors import Direction

__all__ = [
    "Geohash",
    "Encoding",
    "Direction",
    "LatLng",
    "LatLngLike",
    "Region",
    "ALPHABET",
    "DEFAULT_PRECISION",
    "DEFAULT_ENCODING",
    "encode",
    "decode",
    "parse",
    "neighbor",
    "neighbors",
    "region",
    "text",
    "GeohashError",
    "InvalidCharacter",
    "InvalidPrecision",
    "PrecisionOverflow",
    "CoordinateOutOfRange",
    "InvalidDirection",
    "InvalidEncoding",
]
