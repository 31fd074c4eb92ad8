"""Async HTTP client for the Google Maps web services."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Sequence

import httpx

from ...config import settings
from ...models.domain import Point
from .errors import (
    MapsConfigurationError,
    PermanentProviderError,
    RouteNotFoundError,
    TransientProviderError,
)

GOOGLE_MAPS_BASE_URL = "https://maps.googleapis.com/maps/api"
DIRECTIONS_PATH = "/directions/json"
GEOCODE_PATH = "/geocode/json"
AUTOCOMPLETE_PATH = "/place/autocomplete/json"
DETAILS_PATH = "/place/details/json"
DETAILS_FIELDS = "place_id,formatted_address,geometry,name,address_component"

TRANSIENT_STATUSES = frozenset({"UNKNOWN_ERROR", "OVER_QUERY_LIMIT"})
NOT_FOUND_STATUSES = frozenset({"ZERO_RESULTS", "NOT_FOUND"})
# Anything else that is not "OK" (INVALID_REQUEST, REQUEST_DENIED, MAX_WAYPOINTS_EXCEEDED, ...) is permanent.

logger = logging.getLogger(__name__)


def format_location(point: Point) -> str:
    return f"{point.lat},{point.lng}"


def format_waypoints(waypoints: Sequence[Point]) -> str:
    return "optimize:true|" + "|".join(format_location(point) for point in waypoints)


class GoogleMapsClient:
    def __init__(
        self,
        api_key: str | None = None,
        *,
        language: str | None = None,
        region: str | None = None,
        timeout: float | None = None,
        base_url: str = GOOGLE_MAPS_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or settings.google_maps_api_key
        if not self.api_key:
            raise MapsConfigurationError("Google Maps API key is not configured.")
        self.language = language or settings.google_maps_language
        self.region = region or settings.google_maps_region
        self.timeout = timeout if timeout is not None else settings.google_maps_timeout_seconds
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        """Short-lived client; one per provider call."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )

    def _base_params(self) -> dict[str, str]:
        return {"key": self.api_key, "language": self.language, "region": self.region}

    async def _request(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        """GET a provider endpoint and classify failures.

        Returns the decoded body for ``OK`` and not-found statuses; raises
        ``TransientProviderError`` or ``PermanentProviderError`` otherwise.
        """
        query = {**self._base_params(), **params}
        try:
            async with self._get_client() as client:
                response = await client.get(path, params=query)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            code = exc.response.status_code
            if code == 429 or code >= 500:
                raise TransientProviderError(f"Google Maps returned HTTP {code}", status=str(code)) from exc
            raise PermanentProviderError(f"Google Maps returned HTTP {code}", status=str(code)) from exc
        except httpx.TimeoutException as exc:
            raise TransientProviderError(f"Google Maps request timed out: {exc}", status="TIMEOUT") from exc
        except httpx.TransportError as exc:
            raise TransientProviderError(f"Failed to reach Google Maps: {exc}", status="NETWORK_ERROR") from exc
        except ValueError as exc:
            raise PermanentProviderError("Google Maps returned an undecodable response") from exc

        if not isinstance(data, dict):
            raise PermanentProviderError("Google Maps returned an unexpected payload")
        status = str(data.get("status") or "OK")
        if status == "OK" or status in NOT_FOUND_STATUSES:
            return data
        message = data.get("error_message") or status
        if status in TRANSIENT_STATUSES:
            raise TransientProviderError(f"Google Maps {path} failed: {message}", status=status)
        raise PermanentProviderError(f"Google Maps {path} failed: {message}", status=status)

    async def directions(
        self,
        origin: Point,
        destination: Point,
        waypoints: Sequence[Point] = (),
    ) -> dict[str, Any]:
        """Request a driving route with waypoint optimization and return ``routes[0]``."""
        params = {
            "origin": format_location(origin),
            "destination": format_location(destination),
            "mode": "driving",
        }
        if waypoints:
            params["waypoints"] = format_waypoints(waypoints)
        data = await self._request(DIRECTIONS_PATH, params)
        routes = data.get("routes") or []
        if data.get("status") in NOT_FOUND_STATUSES or not routes:
            raise RouteNotFoundError("Google Maps found no route for the requested stops", status=data.get("status"))
        return routes[0]

    async def geocode(self, address: str) -> dict[str, Any] | None:
        """Return the best geocoding match for ``address`` or ``None``."""
        data = await self._request(GEOCODE_PATH, {"address": address})
        results = data.get("results") or []
        return results[0] if results else None

    async def autocomplete(self, query: str, session_token: str | None = None) -> list[dict[str, Any]]:
        params = {"input": query}
        if session_token:
            params["sessiontoken"] = session_token
        data = await self._request(AUTOCOMPLETE_PATH, params)
        predictions = data.get("predictions")
        return predictions if isinstance(predictions, list) else []

    async def place_details(self, place_id: str, session_token: str | None = None) -> dict[str, Any] | None:
        params = {"place_id": place_id, "fields": DETAILS_FIELDS}
        if session_token:
            params["sessiontoken"] = session_token
        data = await self._request(DETAILS_PATH, params)
        result = data.get("result")
        return result if isinstance(result, dict) else None


@lru_cache()
def get_maps_client() -> GoogleMapsClient:
    """Cached client built from settings.

    Raises ``MapsConfigurationError`` (not cached) while the key is missing.
    """
    try:
        return GoogleMapsClient()
    except MapsConfigurationError:
        logger.warning("Google Maps API key not configured (set ROUTEPLANNER_GOOGLE_MAPS_API_KEY)")
        raise


def is_configured() -> bool:
    return bool(settings.google_maps_api_key)
