"""Geospatial helper functions."""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def planar_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Euclidean distance in raw degree space (not geodesic)."""

    return math.hypot(lat2 - lat1, lon2 - lon1)


DISTANCE_FUNCTIONS = {
    "planar": planar_distance,
    "haversine": haversine_km,
}


def get_distance_function(metric: str):
    try:
        return DISTANCE_FUNCTIONS[metric]
    except KeyError as exc:
        raise ValueError(f"Unknown distance metric '{metric}'.") from exc
