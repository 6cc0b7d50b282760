"""
Neighbor derivation on the lattice pair.

Moving one cell along an axis adds or subtracts the cell size of that axis,
``1 << (32 - axis_bits)``, modulo 2**32. Past a pole or the antimeridian the
lattice integer wraps around to the opposite edge. The axes never interact,
so a diagonal move is just both orthogonal moves, in either order.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from flexgeohash.bits import MASK32
from flexgeohash.exceptions import InvalidDirection

if TYPE_CHECKING:
    from flexgeohash.geohash import Geohash


class Direction(Enum):
    NORTH = "north"
    NORTHEAST = "northeast"
    EAST = "east"
    SOUTHEAST = "southeast"
    SOUTH = "south"
    SOUTHWEST = "southwest"
    WEST = "west"
    NORTHWEST = "northwest"

    @property
    def steps(self) -> tuple[int, int]:
        """(latitude, longitude) cell offsets for one move."""
        return _STEPS[self]

    @property
    def is_diagonal(self) -> bool:
        return all(self.steps)

    @property
    def opposite(self) -> Direction:
        lat_step, lng_step = self.steps
        return _BY_STEPS[(-lat_step, -lng_step)]

    @classmethod
    def parse(cls, value: Direction | str) -> Direction:
        """Resolve a member or a name such as ``"north"`` / ``"NE"``."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        key = _ABBREVIATIONS.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidDirection(str(value)) from None


_STEPS = {
    Direction.NORTH: (1, 0),
    Direction.NORTHEAST: (1, 1),
    Direction.EAST: (0, 1),
    Direction.SOUTHEAST: (-1, 1),
    Direction.SOUTH: (-1, 0),
    Direction.SOUTHWEST: (-1, -1),
    Direction.WEST: (0, -1),
    Direction.NORTHWEST: (1, -1),
}
_BY_STEPS = {steps: direction for direction, steps in _STEPS.items()}
_ABBREVIATIONS = {
    "n": "north",
    "ne": "northeast",
    "e": "east",
    "se": "southeast",
    "s": "south",
    "sw": "southwest",
    "w": "west",
    "nw": "northwest",
}

# Clockwise from north.
ALL_DIRECTIONS = tuple(Direction)
ORTHOGONAL_DIRECTIONS = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)


def move(lattice: int, bits: int, step: int) -> int:
    """Shift *lattice* by *step* cells of a *bits*-bit axis, wrapping."""
    return (lattice + step * (1 << (32 - bits))) & MASK32


def adjacent(
    lat_int: int,
    lng_int: int,
    lat_bits: int,
    lng_bits: int,
    direction: Direction,
) -> tuple[int, int]:
    """Return the lattice pair of the cell next to ``(lat_int, lng_int)``."""
    lat_step, lng_step = direction.steps
    return move(lat_int, lat_bits, lat_step), move(lng_int, lng_bits, lng_step)


def surrounding(geohash: Geohash, diagonals: bool = True) -> list[Geohash]:
    """
    Return the cells around *geohash* at its own precision and encoding.

    With *diagonals* the eight neighbors come clockwise from north;
    without, only north, east, south and west.
    """
    directions = ALL_DIRECTIONS if diagonals else ORTHOGONAL_DIRECTIONS
    return [geohash.neighbor(direction) for direction in directions]
