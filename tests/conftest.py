"""Shared test fixtures — sample coordinates and geohashes."""

import random

import pytest

from flexgeohash.models import LatLng


def _sample_coordinates(count: int, seed: int) -> list[LatLng]:
    rng = random.Random(seed)
    return [
        LatLng(rng.uniform(-90.0, 90.0), rng.uniform(-180.0, 180.0))
        for _ in range(count)
    ]


# Fixed landmarks plus a seeded spread over the whole globe
COORDINATES = [
    LatLng(35.681, 139.767),     # Tokyo Station
    LatLng(42.605, -5.603),      # León, Spain
    LatLng(57.64911, 10.40744),  # Skagen, Denmark
    LatLng(51.5034, -0.1276),    # Westminster
    LatLng(-33.8568, 151.2153),  # Sydney Opera House
    LatLng(-54.8019, -68.3030),  # Ushuaia
    LatLng(0.0001, -0.0001),
] + _sample_coordinates(40, seed=4651)


@pytest.fixture()
def tokyo() -> LatLng:
    return LatLng(35.681, 139.767)


@pytest.fixture(
    params=COORDINATES,
    ids=lambda c: f"{c.latitude:.3f},{c.longitude:.3f}",
)
def coordinate(request) -> LatLng:
    """Each sample coordinate in turn."""
    return request.param
