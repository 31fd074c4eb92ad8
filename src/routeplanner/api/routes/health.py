"""Health endpoints."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/healthz", status_code=status.HTTP_200_OK)
def healthz() -> dict:
    return {"ok": True, "time": datetime.now(timezone.utc).isoformat()}


@router.get("/health/google", status_code=status.HTTP_200_OK)
def health_google() -> dict:
    """Report whether the Google Maps key is configured. Does not call the provider."""
    from ...services.maps.google_client import is_configured

    return {"service": "google_maps", "configured": is_configured()}
