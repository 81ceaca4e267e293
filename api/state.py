"""
Application state for the SailFrisco API.

One ``ApplicationState`` is built per FastAPI application and stored on
``app.state``. It owns the response cache, the upstream clients and the two
normalizing services, so tests and multiple apps in one process each get an
isolated cache instead of sharing a module-level singleton.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import Request

from api.cache import BoundedLRUCache
from api.config import Settings
from api.marine_service import MarineService
from api.tide_service import TideService
from src.data.noaa_tides import NOAATidesClient
from src.data.open_meteo import OpenMeteoClient

logger = logging.getLogger(__name__)

STATE_ATTR = "sailfrisco"


class ApplicationState:
    """
    Shared services for one application instance.

    The cache is the only mutable piece and does its own locking; the
    services and clients hold no per-request state.
    """

    def __init__(
        self,
        settings: Settings,
        weather_client: Optional[OpenMeteoClient] = None,
        tide_client: Optional[NOAATidesClient] = None,
        cache: Optional[BoundedLRUCache] = None,
    ):
        self.settings = settings
        self.cache = cache or BoundedLRUCache(
            max_size=settings.cache_max_items,
            default_ttl_ms=settings.cache_ttl_ms,
            name="marine",
        )
        self.weather_client = weather_client or OpenMeteoClient(
            base_url=settings.open_meteo_url,
            timeout=settings.upstream_timeout_seconds,
        )
        self.tide_client = tide_client or NOAATidesClient(
            base_url=settings.noaa_tides_url,
            application=settings.noaa_application,
            timeout=settings.upstream_timeout_seconds,
        )
        self.marine = MarineService(self.cache, self.weather_client)
        self.tides = TideService(
            self.cache,
            self.tide_client,
            station_timezone=settings.station_timezone,
            grace_minutes=settings.tide_grace_minutes,
        )
        self._startup_time = datetime.now(timezone.utc)

        logger.info(
            f"Application state initialized "
            f"(cache max={settings.cache_max_items}, ttl={settings.cache_ttl_ms}ms)"
        )

    @property
    def uptime_seconds(self) -> float:
        """Get application uptime in seconds."""
        return (datetime.now(timezone.utc) - self._startup_time).total_seconds()

    def health_check(self) -> Dict[str, Any]:
        return {
            'cache_entries': len(self.cache),
            'uptime_seconds': round(self.uptime_seconds, 1),
        }

    def close(self) -> None:
        """Release upstream HTTP sessions."""
        self.weather_client.close()
        self.tide_client.close()


def get_app_state(request: Request) -> ApplicationState:
    """FastAPI dependency returning the state of the app serving ``request``."""
    return getattr(request.app.state, STATE_ATTR)
