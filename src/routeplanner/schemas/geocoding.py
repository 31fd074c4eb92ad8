"""Geocoding and places schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class GeocodeRequestItem(BaseModel):
    address: str = ""


class GeocodeResultModel(BaseModel):
    address: str
    lat: Optional[float] = None
    lng: Optional[float] = None
    normalized: Optional[str] = None


class PlacePredictionModel(BaseModel):
    description: str
    place_id: str


class PlaceDetailsModel(BaseModel):
    lat: float
    lng: float
    normalized: str = ""
