"""Application configuration and settings management."""

from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTEPLANNER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Delivery Route Planner API"
    api_prefix: str = ""
    log_level: str = Field(default="INFO", description="Root logging level.")

    # Google Maps configuration
    google_maps_api_key: Optional[str] = Field(
        default=None,
        description="Server-side key for the Geocoding, Places and Directions web services.",
    )
    google_maps_language: str = Field(default="es", description="Language for provider responses.")
    google_maps_region: str = Field(default="UY", description="Region bias (ccTLD) for provider lookups.")
    google_maps_timeout_seconds: float = Field(default=10.0, gt=0.0)

    directions_retry_backoff_seconds: float = Field(
        default=0.5,
        ge=0.0,
        description="Pause before the single retry of a transient directions failure.",
    )
    destination_metric: Literal["planar", "haversine"] = Field(
        default="planar",
        description="Distance used to pick the farthest stop as destination on one-way routes.",
    )
    places_min_query_length: int = Field(default=3, ge=1)

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            # Try comma-separated
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        return str(value or "INFO").strip().upper()


settings = Settings()
