"""
Open-Meteo forecast API client.

Fetches hourly, time-aligned arrays for a single coordinate. The client does
no unit conversion and no caching; it only turns transport problems and
non-success answers into ``UpstreamError``.

API docs: https://open-meteo.com/en/docs
"""

import logging
from typing import Any, Dict, Optional, Sequence

import requests

from src.errors import UpstreamError

logger = logging.getLogger(__name__)

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

# Hourly variables requested for a marine reading
MARINE_HOURLY_VARS = (
    "wind_speed_10m",
    "wind_gusts_10m",
    "wind_direction_10m",
    "temperature_2m",
    "relative_humidity_2m",
    "pressure_msl",
    "visibility",
)


class OpenMeteoClient:
    """Thin wrapper around the Open-Meteo forecast endpoint."""

    source = "open-meteo"

    def __init__(
        self,
        base_url: str = OPEN_METEO_API,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_hourly(
        self,
        lat: float,
        lon: float,
        variables: Sequence[str] = MARINE_HOURLY_VARS,
    ) -> Dict[str, Any]:
        """
        Fetch hourly series for a coordinate.

        Args:
            lat: Latitude in degrees
            lon: Longitude in degrees
            variables: Open-Meteo hourly variable names

        Returns:
            Decoded JSON document with ``hourly`` and ``hourly_units`` maps

        Raises:
            UpstreamError: on transport failure, non-2xx status or bad JSON
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "hourly": ",".join(variables),
            "timezone": "auto",
        }

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.warning(f"Open-Meteo request failed for ({lat}, {lon}): {e}")
            status = getattr(getattr(e, "response", None), "status_code", None)
            raise UpstreamError(
                f"Failed to fetch weather data: {e}",
                source=self.source,
                status_code=status,
            ) from e
        except ValueError as e:
            logger.warning(f"Open-Meteo returned invalid JSON for ({lat}, {lon}): {e}")
            raise UpstreamError(
                "Weather provider returned an unreadable response",
                source=self.source,
            ) from e

        if not isinstance(data, dict):
            raise UpstreamError("Weather provider returned an unexpected payload", source=self.source)

        if data.get("error"):
            reason = data.get("reason", "Unknown error")
            logger.warning(f"Open-Meteo error for ({lat}, {lon}): {reason}")
            raise UpstreamError(f"Open-Meteo error: {reason}", source=self.source)

        return data

    def close(self) -> None:
        self.session.close()
