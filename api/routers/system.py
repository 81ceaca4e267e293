"""
System API router.

Handles the root descriptor, the liveness check and cache statistics.
"""

import logging

from fastapi import APIRouter, Depends

from api.middleware import get_request_id
from api.state import ApplicationState, get_app_state

router = APIRouter(tags=["System"])

logger = logging.getLogger(__name__)

SERVICE_NAME = "sailfrisco-server"
API_VERSION = "1.0.0"


@router.get("/")
async def root():
    """
    API root endpoint.

    Returns basic API information and available endpoint categories.
    """
    return {
        "name": "SailFrisco API",
        "version": API_VERSION,
        "status": "operational",
        "docs": "/api/docs",
        "endpoints": {
            "health": "/health",
            "marine": "/api/marine",
            "tides": "/api/tides",
            "beaufort": "/api/beaufort",
            "harbors": "/api/harbors",
            "routes": "/api/routes/summary",
            "cache": "/api/cache/stats",
        }
    }


@router.get("/health")
async def health(state: ApplicationState = Depends(get_app_state)):
    """Liveness check; never calls upstream providers."""
    return {
        "ok": True,
        "service": SERVICE_NAME,
        "version": API_VERSION,
        **state.health_check(),
    }


@router.get("/api/cache/stats")
async def cache_stats(state: ApplicationState = Depends(get_app_state)):
    """Hit/miss/eviction counters of the response cache."""
    return {**state.cache.get_stats(), "request_id": get_request_id()}
