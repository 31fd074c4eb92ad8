"""Route planning orchestration."""

from __future__ import annotations

import logging
import uuid
from typing import Sequence

from ...config import settings
from ...models.domain import Point, RouteOptions, RoutePlan, Stop
from ...schemas.routing import CalculateRouteRequest, CalculateRouteResponse, RouteStopModel
from ..maps.errors import RouteNotFoundError, TransientProviderError
from .gateway import DirectionsGateway, GoogleDirectionsGateway, route_with_retry
from .projector import fallback_plan, project
from .reconciler import partition

logger = logging.getLogger(__name__)


async def plan_route(
    stops: Sequence[Stop],
    options: RouteOptions,
    gateway: DirectionsGateway | None = None,
    *,
    metric: str = "planar",
    backoff_seconds: float = 0.0,
) -> RoutePlan:
    """Order ``stops`` for driving and compute distance/duration.

    Transient provider failures (after one retry) and "no route" answers
    degrade to the caller's order with zero metrics. Permanent provider and
    configuration errors propagate.
    """
    parts = partition(stops, options, metric=metric)
    if parts is None:
        return RoutePlan(sequence=[], distance_km=0.0, duration_min=0.0, status="empty")
    if parts.is_single_point:
        return project(parts, stops, status="trivial")
    if gateway is None:
        gateway = GoogleDirectionsGateway()

    try:
        result = await route_with_retry(
            gateway,
            parts.origin,
            parts.destination,
            [stop.to_point() for stop in parts.waypoints],
            backoff_seconds=backoff_seconds,
        )
    except TransientProviderError as exc:
        logger.warning(f"Directions unavailable after retry ({exc}); keeping caller order for {len(stops)} stops")
        return fallback_plan(stops, options)
    except RouteNotFoundError as exc:
        logger.warning(f"No drivable route found ({exc}); keeping caller order for {len(stops)} stops")
        return fallback_plan(stops, options)

    return project(parts, stops, result.waypoint_order, result.legs)


def _stops_from_request(payload: CalculateRouteRequest) -> list[Stop]:
    return [
        Stop(
            id=point.id or uuid.uuid4().hex,
            address=point.address,
            lat=point.lat,
            lng=point.lng,
            label=point.label,
        )
        for point in payload.points
    ]


def _options_from_request(payload: CalculateRouteRequest) -> RouteOptions:
    origin = payload.options.origin
    return RouteOptions(
        origin=Point(lat=origin.lat, lng=origin.lng, address=origin.address) if origin else None,
        round_trip=payload.options.round_trip,
    )


async def calculate_route(
    payload: CalculateRouteRequest,
    *,
    gateway: DirectionsGateway | None = None,
) -> CalculateRouteResponse:
    stops = _stops_from_request(payload)
    options = _options_from_request(payload)
    plan = await plan_route(
        stops,
        options,
        gateway,
        metric=settings.destination_metric,
        backoff_seconds=settings.directions_retry_backoff_seconds,
    )
    logger.info(
        f"Planned route with {len(plan.sequence)} stops ({plan.status}): "
        f"{plan.distance_km} km, {plan.duration_min} min"
    )
    return CalculateRouteResponse(
        stops=[
            RouteStopModel(id=stop.id, lat=stop.lat, lng=stop.lng, address=stop.address, label=stop.label)
            for stop in plan.sequence
        ],
        distance_km=plan.distance_km,
        duration_min=plan.duration_min,
        status=plan.status,
    )
