"""Split a stop list into origin, destination and optimizable waypoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ...models.domain import Point, RouteOptions, Stop
from ..geospatial import get_distance_function


@dataclass(slots=True)
class Partition:
    origin: Point
    destination: Point
    waypoints: list[Stop] = field(default_factory=list)
    round_trip: bool = False
    has_origin: bool = False
    # Only the origin-only and lone-stop cases; co-located stops still get routed.
    is_single_point: bool = False


def partition(
    stops: Sequence[Stop],
    options: RouteOptions,
    *,
    metric: str = "planar",
) -> Partition | None:
    """Decide origin, destination and waypoints before the directions request.

    Returns ``None`` when there is nothing to route. With an explicit origin,
    stops at the origin's coordinates are dropped; a one-way route then ends
    at the stop farthest from the origin (first one on ties). Without an
    origin the caller's first and last stops are kept in place.
    """
    if not stops:
        return None

    round_trip = options.round_trip
    if options.origin is not None:
        origin = options.origin
        rest = [stop for stop in stops if not origin.same_place(stop)]
        if not rest:
            return Partition(
                origin=origin,
                destination=origin,
                round_trip=round_trip,
                has_origin=True,
                is_single_point=True,
            )
        if round_trip:
            return Partition(
                origin=origin,
                destination=origin,
                waypoints=rest,
                round_trip=True,
                has_origin=True,
            )

        distance = get_distance_function(metric)
        farthest_index = max(
            range(len(rest)),
            key=lambda idx: distance(origin.lat, origin.lng, rest[idx].lat, rest[idx].lng),
        )
        return Partition(
            origin=origin,
            destination=rest[farthest_index].to_point(),
            waypoints=[stop for idx, stop in enumerate(rest) if idx != farthest_index],
            round_trip=False,
            has_origin=True,
        )

    first = stops[0].to_point()
    if len(stops) == 1:
        return Partition(origin=first, destination=first, round_trip=round_trip, is_single_point=True)
    if round_trip:
        return Partition(origin=first, destination=first, waypoints=list(stops[1:]), round_trip=True)
    return Partition(
        origin=first,
        destination=stops[-1].to_point(),
        waypoints=list(stops[1:-1]),
        round_trip=False,
    )
