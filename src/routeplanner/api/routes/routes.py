"""Route calculation endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Header, HTTPException, status

from ...schemas.routing import CalculateRouteRequest, CalculateRouteResponse
from ...services.maps.errors import MapsConfigurationError, PermanentProviderError
from ...services.routing.service import calculate_route

router = APIRouter(tags=["routes"])

logger = logging.getLogger(__name__)


@router.post("/calculate-route", response_model=CalculateRouteResponse, status_code=status.HTTP_200_OK)
async def calculate(
    payload: CalculateRouteRequest,
    x_tenant_id: str | None = Header(default=None),
) -> CalculateRouteResponse:
    logger.info(f"calculate-route: {len(payload.points)} points (tenant={x_tenant_id or '-'})")
    try:
        return await calculate_route(payload)
    except MapsConfigurationError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except PermanentProviderError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Directions provider rejected the request: {exc}",
        ) from exc
    except Exception as exc:
        logging.exception(f"Error calculating route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to calculate route: {str(exc)}"
        ) from exc
