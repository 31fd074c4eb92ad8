"""Directions provider seam and the single-retry policy around it."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence

from ...models.domain import Point
from ..maps.errors import TransientProviderError
from ..maps.google_client import GoogleMapsClient, get_maps_client

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Leg:
    distance_m: float = 0.0
    duration_s: float = 0.0


@dataclass(slots=True)
class DirectionsResult:
    """Zero-based visiting order of the requested waypoints plus per-hop legs."""

    waypoint_order: list[int] = field(default_factory=list)
    legs: list[Leg] = field(default_factory=list)


class DirectionsGateway(Protocol):
    async def route(
        self,
        origin: Point,
        destination: Point,
        waypoints: Sequence[Point],
    ) -> DirectionsResult:
        ...


def _leg_value(leg: dict[str, Any], key: str) -> float:
    entry = leg.get(key)
    value = entry.get("value") if isinstance(entry, dict) else None
    return float(value) if isinstance(value, (int, float)) else 0.0


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_route(route: dict[str, Any]) -> DirectionsResult:
    """Convert a Google ``routes[0]`` entry; missing leg values count as zero."""
    order = route.get("waypoint_order")
    legs = [
        Leg(distance_m=_leg_value(leg, "distance"), duration_s=_leg_value(leg, "duration"))
        for leg in route.get("legs") or []
        if isinstance(leg, dict)
    ]
    return DirectionsResult(
        waypoint_order=[index for index in order if _is_index(index)] if isinstance(order, list) else [],
        legs=legs,
    )


class GoogleDirectionsGateway:
    """``DirectionsGateway`` backed by the Google Directions web service."""

    def __init__(self, client: GoogleMapsClient | None = None) -> None:
        self.client = client or get_maps_client()

    async def route(
        self,
        origin: Point,
        destination: Point,
        waypoints: Sequence[Point],
    ) -> DirectionsResult:
        route = await self.client.directions(origin, destination, waypoints)
        return parse_route(route)


async def route_with_retry(
    gateway: DirectionsGateway,
    origin: Point,
    destination: Point,
    waypoints: Sequence[Point],
    *,
    backoff_seconds: float = 0.0,
) -> DirectionsResult:
    """Call the gateway, retrying exactly once on a transient failure."""
    try:
        return await gateway.route(origin, destination, waypoints)
    except TransientProviderError as exc:
        logger.warning(f"Directions request failed ({exc.status or exc}), retrying once")
        if backoff_seconds:
            await asyncio.sleep(backoff_seconds)
    return await gateway.route(origin, destination, waypoints)
