"""Route calculation request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.domain import snap_coordinate


class PointModel(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    address: str = ""

    @field_validator("lat", "lng", mode="after")
    @classmethod
    def _snap(cls, value: float) -> float:
        return snap_coordinate(value)


class RoutePointModel(PointModel):
    id: Optional[str] = Field(default=None, description="Caller identifier, echoed back in the ordered stops.")
    label: Optional[str] = None


class RouteOptionsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    origin: Optional[PointModel] = None
    round_trip: bool = Field(default=False, alias="roundTrip")


class CalculateRouteRequest(BaseModel):
    points: List[RoutePointModel] = Field(default_factory=list)
    options: RouteOptionsModel = Field(default_factory=RouteOptionsModel)


class RouteStopModel(BaseModel):
    id: str
    lat: float
    lng: float
    address: str
    label: Optional[str] = None


class CalculateRouteResponse(BaseModel):
    stops: List[RouteStopModel]
    distance_km: float
    duration_min: float
    status: str
