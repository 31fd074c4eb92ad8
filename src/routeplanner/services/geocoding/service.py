"""Address geocoding and place lookups on top of the Google Maps client."""

from __future__ import annotations

import logging
from typing import Sequence

from ...config import settings
from ...schemas.geocoding import (
    GeocodeRequestItem,
    GeocodeResultModel,
    PlaceDetailsModel,
    PlacePredictionModel,
)
from ..maps.errors import MapsConfigurationError, MapsProviderError
from ..maps.google_client import GoogleMapsClient

logger = logging.getLogger(__name__)


def _location(result: dict) -> tuple[float, float] | None:
    location = (result.get("geometry") or {}).get("location") or {}
    lat, lng = location.get("lat"), location.get("lng")
    if lat is None or lng is None:
        return None
    return float(lat), float(lng)


async def geocode_addresses(
    items: Sequence[GeocodeRequestItem],
    client: GoogleMapsClient,
) -> list[GeocodeResultModel]:
    """Geocode each address in order.

    A miss or a provider failure for one address yields null coordinates for
    that item only; the rest of the batch is still resolved.
    """
    results: list[GeocodeResultModel] = []
    for item in items:
        address = item.address
        miss = GeocodeResultModel(address=address, lat=None, lng=None, normalized=None)
        if not address.strip():
            results.append(miss)
            continue
        try:
            match = await client.geocode(address)
        except MapsConfigurationError:
            raise
        except MapsProviderError as exc:
            logger.warning(f"Geocoding failed for '{address}': {exc}")
            results.append(miss)
            continue
        location = _location(match) if match else None
        if location is None:
            logger.info(f"No geocoding match for '{address}'")
            results.append(miss)
            continue
        results.append(
            GeocodeResultModel(
                address=address,
                lat=location[0],
                lng=location[1],
                normalized=match.get("formatted_address") or address,
            )
        )
    return results


async def autocomplete_places(
    query: str,
    client: GoogleMapsClient,
    session_token: str | None = None,
) -> list[PlacePredictionModel]:
    text = (query or "").strip()
    if len(text) < settings.places_min_query_length:
        return []
    try:
        predictions = await client.autocomplete(text, session_token=session_token)
    except MapsConfigurationError:
        raise
    except MapsProviderError as exc:
        # Keep the address box usable while the provider misbehaves
        logger.error(f"places/autocomplete error: {exc}")
        return []
    return [
        PlacePredictionModel(description=prediction["description"], place_id=prediction["place_id"])
        for prediction in predictions
        if prediction.get("description") and prediction.get("place_id")
    ]


async def place_details(
    place_id: str,
    client: GoogleMapsClient,
    session_token: str | None = None,
) -> PlaceDetailsModel | None:
    """Resolve a place id to coordinates; ``None`` when the place has no geometry."""
    result = await client.place_details(place_id, session_token=session_token)
    if not result:
        return None
    location = _location(result)
    if location is None:
        return None
    return PlaceDetailsModel(lat=location[0], lng=location[1], normalized=result.get("formatted_address") or "")
