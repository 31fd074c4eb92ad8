"""Domain models for delivery stops and planned routes."""

from dataclasses import dataclass, field
from typing import Optional

# Two coordinates closer than this on both axes (degrees, roughly 0.1 m) are the same place.
COORDINATE_TOLERANCE = 1e-6
# Decimal places kept when coordinates enter the system.
COORDINATE_PRECISION = 7


def snap_coordinate(value: float) -> float:
    """Round a latitude or longitude to the ingestion grid."""
    return round(float(value), COORDINATE_PRECISION)


def same_location(lat1: float, lng1: float, lat2: float, lng2: float) -> bool:
    return abs(lat1 - lat2) < COORDINATE_TOLERANCE and abs(lng1 - lng2) < COORDINATE_TOLERANCE


@dataclass(slots=True, frozen=True)
class Point:
    """A bare location, used for route origins and provider requests."""

    lat: float
    lng: float
    address: str = ""

    def same_place(self, other: "Point | Stop") -> bool:
        return same_location(self.lat, self.lng, other.lat, other.lng)


@dataclass(slots=True)
class Stop:
    """A delivery stop supplied by the caller.

    ``id`` is opaque and must survive reordering; ``label`` is assigned
    when a route is planned.
    """

    id: str
    address: str
    lat: float
    lng: float
    label: Optional[str] = None

    def same_place(self, other: "Point | Stop") -> bool:
        return same_location(self.lat, self.lng, other.lat, other.lng)

    def to_point(self) -> Point:
        return Point(lat=self.lat, lng=self.lng, address=self.address)


@dataclass(slots=True, frozen=True)
class RouteOptions:
    origin: Optional[Point] = None
    round_trip: bool = False


@dataclass(slots=True)
class RoutePlan:
    """Visiting order plus aggregate metrics for one planned route."""

    sequence: list[Stop] = field(default_factory=list)
    distance_km: float = 0.0
    duration_min: float = 0.0
    status: str = "empty"
