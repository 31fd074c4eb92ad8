"""Route group exports."""

from . import geocode, health, places, routes

__all__ = ["routes", "geocode", "places", "health"]
