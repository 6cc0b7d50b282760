"""Tests for flexgeohash.bits module."""

import math

import pytest

from flexgeohash.bits import (
    MASK32,
    deinterleave,
    dequantize,
    interleave,
    quantize,
    split_bits,
    spread,
    squash,
    top_bits_mask,
)

BOUNDARY_VALUES = [0, 1, 1 << 31, MASK32]

# (value, r, bucket) for values one ulp or so below a cell edge
BELOW_EDGE = [
    (math.nextafter(0.0, -1.0), 90.0, (1 << 31) - 1),
    (-1e-15, 90.0, (1 << 31) - 1),
    (math.nextafter(45.0, 0.0), 90.0, (3 << 30) - 1),
    (math.nextafter(-45.0, -90.0), 90.0, (1 << 30) - 1),
    (math.nextafter(90.0, 0.0), 90.0, MASK32),
    (math.nextafter(0.0, -1.0), 180.0, (1 << 31) - 1),
    (-1e-14, 180.0, (1 << 31) - 1),
    (math.nextafter(90.0, 0.0), 180.0, (3 << 30) - 1),
    (math.nextafter(-90.0, -180.0), 180.0, (1 << 30) - 1),
    (math.nextafter(180.0, 0.0), 180.0, MASK32),
]


class TestQuantize:
    @pytest.mark.parametrize(
        ("value", "r", "expected"),
        [
            (-90.0, 90.0, 0),
            (0.0, 90.0, 1 << 31),
            (45.0, 90.0, 3 << 30),
            (-180.0, 180.0, 0),
            (0.0, 180.0, 1 << 31),
            (90.0, 180.0, 3 << 30),
        ],
    )
    def test_uniform_buckets(self, value: float, r: float, expected: int):
        assert quantize(value, r) == expected

    @pytest.mark.parametrize("r", [90.0, 180.0])
    def test_upper_edge_clamped_into_last_bucket(self, r: float):
        assert quantize(r, r) == MASK32

    def test_monotonic(self):
        values = [-90.0, -45.5, -0.001, 0.0, 0.001, 12.3, 89.999, 90.0]
        lattice = [quantize(v, 90.0) for v in values]
        assert lattice == sorted(lattice)

    @pytest.mark.parametrize(("value", "r", "expected"), BELOW_EDGE)
    def test_just_below_edge_stays_in_lower_bucket(
        self, value: float, r: float, expected: int
    ):
        assert quantize(value, r) == expected

    @pytest.mark.parametrize(("value", "r", "expected"), BELOW_EDGE)
    def test_lower_edge_never_above_value(
        self, value: float, r: float, expected: int
    ):
        assert dequantize(quantize(value, r), 32, r) <= value


class TestDequantize:
    def test_lower_edge(self):
        assert dequantize(1 << 31, 1, 90.0) == 0.0
        assert dequantize(3 << 30, 2, 180.0) == 90.0

    def test_low_bits_ignored(self):
        assert dequantize((1 << 31) | 0x7FFF, 16, 90.0) == 0.0

    def test_zero_bits_is_range_start(self):
        assert dequantize(MASK32, 0, 90.0) == -90.0
        assert dequantize(MASK32, 0, 180.0) == -180.0

    def test_inverse_of_quantize_at_full_precision(self):
        lattice = quantize(35.681, 90.0)
        value = dequantize(lattice, 32, 90.0)
        assert value == pytest.approx(35.681, abs=180.0 / 2**32)


class TestTopBitsMask:
    @pytest.mark.parametrize(
        ("bits", "expected"),
        [
            (0, 0),
            (1, 0x80000000),
            (2, 0xC0000000),
            (30, 0xFFFFFFFC),
            (32, MASK32),
        ],
    )
    def test_masks(self, bits: int, expected: int):
        assert top_bits_mask(bits) == expected


class TestSpread:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, 0),
            (1, 1),
            (0b11, 0b101),
            (1 << 31, 1 << 62),
            (MASK32, 0x5555555555555555),
        ],
    )
    def test_known_values(self, value: int, expected: int):
        assert spread(value) == expected

    @pytest.mark.parametrize("value", BOUNDARY_VALUES + [0x12345678, 0xDEADBEEF])
    def test_every_bit_moves_to_twice_its_position(self, value: int):
        expected = 0
        for i in range(32):
            if value >> i & 1:
                expected |= 1 << (2 * i)
        assert spread(value) == expected

    def test_ignores_bits_above_32(self):
        assert spread((1 << 40) | 1) == 1


class TestSquash:
    @pytest.mark.parametrize("value", BOUNDARY_VALUES + [0x12345678, 0xDEADBEEF])
    def test_inverse_of_spread(self, value: int):
        assert squash(spread(value)) == value

    def test_odd_bits_dropped(self):
        assert squash(0xAAAAAAAAAAAAAAAA) == 0
        assert squash(0xFFFFFFFFFFFFFFFF) == MASK32


class TestInterleave:
    def test_latitude_in_even_bits(self):
        assert interleave(MASK32, 0) == 0x5555555555555555

    def test_longitude_in_odd_bits(self):
        assert interleave(0, MASK32) == 0xAAAAAAAAAAAAAAAA

    def test_top_bit_is_longitude(self):
        assert interleave(0, 1 << 31) == 1 << 63
        assert interleave(1 << 31, 0) == 1 << 62

    @pytest.mark.parametrize("lat", BOUNDARY_VALUES)
    @pytest.mark.parametrize("lng", BOUNDARY_VALUES)
    def test_deinterleave_recovers_pair(self, lat: int, lng: int):
        assert deinterleave(interleave(lat, lng)) == (lat, lng)


class TestSplitBits:
    @pytest.mark.parametrize(
        ("count", "expected"),
        [
            (0, (0, 0)),
            (1, (0, 1)),
            (5, (2, 3)),
            (35, (17, 18)),
            (60, (30, 30)),
            (64, (32, 32)),
        ],
    )
    def test_longitude_takes_odd_bit(self, count: int, expected: tuple):
        assert split_bits(count) == expected
