"""
Fixed-point quantization and bit interleaving.

A coordinate axis ``[-r, r]`` is split into 2**32 equal buckets, giving an
unsigned 32-bit lattice integer per axis. The two lattice integers are then
interleaved into one 64-bit value: latitude bits in the even positions,
longitude bits in the odd positions.
"""

from fractions import Fraction

LATITUDE_RANGE = 90.0
LONGITUDE_RANGE = 180.0

LATTICE_SIZE = 1 << 32
MASK32 = LATTICE_SIZE - 1
MASK64 = (1 << 64) - 1

# (shift, mask) pairs for spreading 32 bits across 64; squash runs them
# backwards.
_SPREAD_STEPS = (
    (16, 0x0000FFFF0000FFFF),
    (8, 0x00FF00FF00FF00FF),
    (4, 0x0F0F0F0F0F0F0F0F),
    (2, 0x3333333333333333),
    (1, 0x5555555555555555),
)
_SQUASH_STEPS = (
    (1, 0x3333333333333333),
    (2, 0x0F0F0F0F0F0F0F0F),
    (4, 0x00FF00FF00FF00FF),
    (8, 0x0000FFFF0000FFFF),
    (16, 0x00000000FFFFFFFF),
)


def quantize(value: float, r: float) -> int:
    """
    Map *value* in ``[-r, r]`` to its bucket in ``[0, 2**32)``.

    The arithmetic is exact, so a value just below a cell edge stays in
    the cell below it. ``value == r`` would land one past the last bucket
    and is clamped into it. Range checking is the caller's job.
    """
    p = (Fraction(value) + Fraction(r)) / (2 * Fraction(r))
    return min(int(p * LATTICE_SIZE), MASK32)


def top_bits_mask(bits: int) -> int:
    """32-bit mask keeping the *bits* most significant bits."""
    return (MASK32 << (32 - bits)) & MASK32


def dequantize(lattice: int, bits: int, r: float) -> float:
    """
    Return the lower edge of the cell *lattice* falls in at *bits* bits.

    Bits below the retained ones carry no information and are zeroed
    before the conversion.
    """
    truncated = lattice & top_bits_mask(bits)
    return 2 * r * (truncated / LATTICE_SIZE) - r


def spread(x: int) -> int:
    """Insert a zero bit above every bit of the 32-bit integer *x*."""
    r = x & MASK32
    for shift, mask in _SPREAD_STEPS:
        r = (r | (r << shift)) & mask
    return r


def squash(x: int) -> int:
    """Collect the even bits of the 64-bit integer *x* into 32 bits."""
    r = x & 0x5555555555555555
    for shift, mask in _SQUASH_STEPS:
        r = (r | (r >> shift)) & mask
    return r


def interleave(lat_int: int, lng_int: int) -> int:
    return spread(lat_int) | (spread(lng_int) << 1)


def deinterleave(value: int) -> tuple[int, int]:
    """Split a combined 64-bit hash into ``(lat_int, lng_int)``."""
    value &= MASK64
    return squash(value), squash(value >> 1)


def split_bits(bit_count: int) -> tuple[int, int]:
    """
    Share *bit_count* interleaved bits between the two axes.

    The top bit of the combined hash belongs to longitude, so longitude
    takes the extra bit when the count is odd.
    """
    lat_bits = bit_count // 2
    return lat_bits, bit_count - lat_bits
