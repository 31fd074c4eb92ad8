"""Geocoding endpoint."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from ...schemas.geocoding import GeocodeRequestItem, GeocodeResultModel
from ...services.geocoding.service import geocode_addresses
from ...services.maps.errors import MapsConfigurationError
from ...services.maps.google_client import get_maps_client

router = APIRouter(tags=["geocoding"])


@router.post("/geocode", response_model=List[GeocodeResultModel], status_code=status.HTTP_200_OK)
async def geocode(payload: List[GeocodeRequestItem]) -> List[GeocodeResultModel]:
    """Geocode a batch of free-text addresses; unresolved items come back with null coordinates."""
    if not payload:
        return []
    try:
        client = get_maps_client()
        return await geocode_addresses(payload, client)
    except MapsConfigurationError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
