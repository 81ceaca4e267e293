"""
Marine reading service for the SailFrisco API.

Validates a coordinate, serves the normalized reading from the cache when
possible, and otherwise fetches hourly data from Open-Meteo, converts wind
to knots and stores the result. Upstream failures propagate as
``UpstreamError`` and leave the cache untouched.
"""

import logging
import math
from typing import Any, Dict, Optional, Tuple

from api.cache import BoundedLRUCache, build_key
from src.data.open_meteo import MARINE_HOURLY_VARS, OpenMeteoClient
from src.routes.planner import validate_coordinate

logger = logging.getLogger(__name__)

KMH_TO_KTS = 0.539957

# Sample index of the current hour in the hourly series
CURRENT_SAMPLE = 0


def _sample(series: Dict[str, Any], name: str, index: int = CURRENT_SAMPLE) -> Optional[Any]:
    """Value at ``index`` of an hourly array, or None if absent or short."""
    values = series.get(name)
    if not isinstance(values, list) or len(values) <= index:
        return None
    return values[index]


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value):
        return None
    return float(value)


def kmh_to_kts(value: Optional[float]) -> Optional[float]:
    return value * KMH_TO_KTS if value is not None else None


def normalize_reading(lat: float, lon: float, payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shape an Open-Meteo hourly document into a marine reading.

    Missing arrays or samples become None for that field only. Wave height
    is always None here; it is a display lookup from the Beaufort band.
    """
    hourly = payload.get("hourly") or {}
    hourly_units = payload.get("hourly_units") or {}

    wind_speed_kmh = _number(_sample(hourly, "wind_speed_10m"))
    wind_gust_kmh = _number(_sample(hourly, "wind_gusts_10m"))
    temperature_c = _number(_sample(hourly, "temperature_2m"))
    humidity = _number(_sample(hourly, "relative_humidity_2m"))
    pressure_hpa = _number(_sample(hourly, "pressure_msl"))
    visibility = _number(_sample(hourly, "visibility"))

    return {
        "lat": lat,
        "lon": lon,
        "updated_at": _sample(hourly, "time"),
        "wind_speed_kts": kmh_to_kts(wind_speed_kmh),
        "wind_gust_kts": kmh_to_kts(wind_gust_kmh),
        "wind_direction_deg": _number(_sample(hourly, "wind_direction_10m")),
        "temperature_c": temperature_c,
        "humidity": humidity,
        "pressure_hpa": pressure_hpa,
        "visibility_km": visibility,
        "wave_height": None,
        "units": {
            "wind_speed": "kts",
            "wind_gust": "kts",
            "wind_direction": hourly_units.get("wind_direction_10m"),
            "temperature": hourly_units.get("temperature_2m"),
            "humidity": hourly_units.get("relative_humidity_2m"),
            "pressure": hourly_units.get("pressure_msl"),
            "visibility": hourly_units.get("visibility"),
            "wave_height": None,
        },
        "raw": {
            "wind_speed_kmh": wind_speed_kmh,
            "wind_gust_kmh": wind_gust_kmh,
            "units": {name: hourly_units.get(name) for name in MARINE_HOURLY_VARS},
        },
    }


class MarineService:
    """Cache-backed marine reading lookups."""

    cache_prefix = "marine"

    def __init__(self, cache: BoundedLRUCache, client: OpenMeteoClient):
        self.cache = cache
        self.client = client

    def cache_key(self, lat: float, lon: float) -> str:
        return build_key(self.cache_prefix, {"lat": lat, "lon": lon})

    def get_reading(self, lat: float, lon: float) -> Tuple[bool, Dict[str, Any]]:
        """
        Current marine reading for a coordinate.

        Returns:
            (cached, reading) where cached is True on a cache hit

        Raises:
            InvalidQueryError: coordinate out of range (no upstream call made)
            UpstreamError: Open-Meteo unreachable or answered with an error
        """
        validate_coordinate(lat, lon)

        key = self.cache_key(lat, lon)
        cached = self.cache.get(key)
        if cached is not None:
            return True, cached

        logger.debug(f"Marine cache miss: {key}")
        payload = self.client.fetch_hourly(lat, lon)
        reading = normalize_reading(lat, lon, payload)

        self.cache.set(key, reading)
        return False, reading
