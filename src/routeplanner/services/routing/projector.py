"""Project a provider waypoint order back onto the caller's stops."""

from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Sequence

from ...models.domain import Point, RouteOptions, RoutePlan, Stop
from .gateway import Leg
from .reconciler import Partition


def _valid_order(order: Sequence[int], count: int) -> list[int]:
    if sorted(order) == list(range(count)):
        return list(order)
    return list(range(count))


def recover_stops(points: Sequence[Point | Stop], stops: Sequence[Stop]) -> list[Stop]:
    """Map route points back to the caller's stops.

    A stop object is matched by identity first; otherwise the first unused
    input stop at the same coordinates wins. Points without a match become
    new stops with a generated id.
    """
    used: set[int] = set()
    recovered: list[Stop] = []
    for point in points:
        match = None
        if isinstance(point, Stop):
            match = next((idx for idx, stop in enumerate(stops) if idx not in used and stop is point), None)
        if match is None:
            match = next(
                (idx for idx, stop in enumerate(stops) if idx not in used and stop.same_place(point)),
                None,
            )
        if match is None:
            recovered.append(Stop(id=uuid.uuid4().hex, address=point.address, lat=point.lat, lng=point.lng))
            continue
        used.add(match)
        recovered.append(replace(stops[match]))
    return recovered


def assign_labels(sequence: Sequence[Stop], origin: Point | None) -> list[Stop]:
    """Label the origin ``"0"`` and number every other stop from ``"1"`` in order.

    The closing entry of a round trip is the origin again and is left
    unlabelled, so ``"0"`` appears once and no number repeats.
    """
    counter = 1
    origin_seen = False
    labelled: list[Stop] = []
    for stop in sequence:
        if origin is not None and origin.same_place(stop):
            label = None if origin_seen else "0"
            origin_seen = True
        else:
            label = str(counter)
            counter += 1
        labelled.append(replace(stop, label=label))
    return labelled


def summarize_legs(legs: Sequence[Leg]) -> tuple[float, float]:
    """Return ``(distance_km, duration_min)`` rounded to 2 and 1 decimals."""
    distance_m = sum(leg.distance_m or 0.0 for leg in legs)
    duration_s = sum(leg.duration_s or 0.0 for leg in legs)
    return round(distance_m / 1000, 2), round(duration_s / 60, 1)


def project(
    partition: Partition,
    stops: Sequence[Stop],
    waypoint_order: Sequence[int] = (),
    legs: Sequence[Leg] = (),
    *,
    status: str = "optimized",
) -> RoutePlan:
    if partition.is_single_point:
        points = [partition.origin]
    else:
        order = _valid_order(waypoint_order, len(partition.waypoints))
        closing = partition.origin if partition.round_trip else partition.destination
        points = [
            partition.origin,
            *(partition.waypoints[idx] for idx in order),
            closing,
        ]

    origin = partition.origin if partition.has_origin else None
    sequence = assign_labels(recover_stops(points, stops), origin)
    distance_km, duration_min = summarize_legs(legs)
    return RoutePlan(sequence=sequence, distance_km=distance_km, duration_min=duration_min, status=status)


def fallback_plan(stops: Sequence[Stop], options: RouteOptions) -> RoutePlan:
    """Caller order, zero metrics. Used when the provider could not order the stops.

    An explicit origin still leads the sequence (and closes it on a round
    trip); stops at the origin's coordinates are folded into that entry.
    """
    origin = options.origin
    if origin is None:
        sequence = assign_labels([replace(stop) for stop in stops], None)
    else:
        rest = [stop for stop in stops if not origin.same_place(stop)]
        points = [origin, *rest, origin] if options.round_trip else [origin, *rest]
        sequence = assign_labels(recover_stops(points, stops), origin)
    return RoutePlan(sequence=sequence, distance_km=0.0, duration_min=0.0, status="fallback")
