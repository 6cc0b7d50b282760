"""Typed coordinate and region models for flexgeohash."""

from dataclasses import dataclass
from typing import Protocol


class LatLngLike(Protocol):
    """Anything exposing ``latitude`` and ``longitude`` in degrees."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...


@dataclass(frozen=True)
class LatLng:
    """A WGS84 point, or a latitude/longitude delta when used as a span."""

    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class Region:
    """
    The rectangular cell a geohash denotes.

    *span* is the full width of the cell on each axis, so the cell runs
    from ``center - span / 2`` to ``center + span / 2``.
    """

    center: LatLng
    span: LatLng

    @property
    def south(self) -> float:
        return self.center.latitude - self.span.latitude / 2

    @property
    def north(self) -> float:
        return self.center.latitude + self.span.latitude / 2

    @property
    def west(self) -> float:
        return self.center.longitude - self.span.longitude / 2

    @property
    def east(self) -> float:
        return self.center.longitude + self.span.longitude / 2

    def contains(self, coordinate: LatLngLike) -> bool:
        """Return True if *coordinate* lies inside the cell, edges included."""
        return (
            self.south <= coordinate.latitude <= self.north
            and self.west <= coordinate.longitude <= self.east
        )

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "center": self.center.to_dict(),
            "span": self.span.to_dict(),
            "south": self.south,
            "north": self.north,
            "west": self.west,
            "east": self.east,
        }
