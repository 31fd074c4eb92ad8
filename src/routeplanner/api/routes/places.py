"""Places autocomplete and details endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from ...schemas.geocoding import PlaceDetailsModel, PlacePredictionModel
from ...services.geocoding.service import autocomplete_places, place_details
from ...services.maps.errors import MapsConfigurationError, MapsProviderError
from ...services.maps.google_client import get_maps_client

router = APIRouter(prefix="/places", tags=["places"])


@router.get("/autocomplete", response_model=List[PlacePredictionModel], status_code=status.HTTP_200_OK)
async def autocomplete(
    q: str = Query(default="", description="Partial address typed by the user"),
    session: str | None = Query(default=None, description="Session token shared with the follow-up details call"),
) -> List[PlacePredictionModel]:
    try:
        client = get_maps_client()
    except MapsConfigurationError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return await autocomplete_places(q, client, session_token=session)


@router.get("/details", response_model=PlaceDetailsModel, status_code=status.HTTP_200_OK)
async def details(
    place_id: str = Query(..., min_length=1),
    session: str | None = Query(default=None),
) -> PlaceDetailsModel:
    try:
        client = get_maps_client()
        result = await place_details(place_id, client, session_token=session)
    except MapsConfigurationError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except MapsProviderError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Place details lookup failed: {exc}",
        ) from exc
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Place '{place_id}' not found")
    return result
