"""
Marine conditions API router.

Serves the normalized current-hour reading for a coordinate and the cache
reset used by the frontend's refresh button and the test suite.
"""

import logging

from fastapi import APIRouter, Depends, Query

from api.schemas.common import ErrorResponse
from api.schemas.marine import MarineResponse
from api.state import ApplicationState, get_app_state

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Marine"])


@router.get(
    "/marine",
    response_model=MarineResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_marine(
    lat: float = Query(..., description="Latitude in degrees (-90..90)"),
    lon: float = Query(..., description="Longitude in degrees (-180..180)"),
    state: ApplicationState = Depends(get_app_state),
):
    """
    Current wind and weather at a coordinate.

    Wind speed and gust are in knots. ``cached`` is true when the reading
    came from the in-memory cache rather than a fresh Open-Meteo request.
    """
    cached, reading = state.marine.get_reading(lat, lon)
    return {"cached": cached, "data": reading}


@router.post("/marine/clear-cache")
async def clear_cache(state: ApplicationState = Depends(get_app_state)):
    """Drop every cached marine and tide result."""
    cleared = state.cache.clear()
    return {"message": "Cache cleared", "cleared": cleared}
