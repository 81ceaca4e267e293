"""
NOAA CO-OPS API client for tide predictions.

Returns the raw ``{t, v, type}`` triples for a station over an explicit date
range. Bay stations: 9414290 (San Francisco), 9414750 (Alameda),
9414806 (Sausalito), 9414816 (Berkeley), 9414849 (Richmond).
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests

from src.errors import UpstreamError

logger = logging.getLogger(__name__)

COOPS_BASE_URL = "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"

# CO-OPS accepts "yyyyMMdd HH:mm" for begin_date/end_date
COOPS_DATE_FORMAT = "%Y%m%d %H:%M"


class NOAATidesClient:
    """Client for fetching tide predictions from NOAA CO-OPS."""

    source = "noaa-coops"

    def __init__(
        self,
        base_url: str = COOPS_BASE_URL,
        application: str = "sailfrisco",
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.application = application
        self.timeout = timeout
        self.session = session or requests.Session()

    def _fetch_data(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Fetch and decode one CO-OPS response."""
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.warning(f"CO-OPS request failed for station {params.get('station')}: {e}")
            status = getattr(getattr(e, "response", None), "status_code", None)
            raise UpstreamError(
                f"Failed to fetch tide data: {e}",
                source=self.source,
                status_code=status,
            ) from e
        except ValueError as e:
            raise UpstreamError("Tide provider returned an unreadable response", source=self.source) from e

        if not isinstance(data, dict):
            raise UpstreamError("Tide provider returned an unexpected payload", source=self.source)

        # CO-OPS reports query errors with HTTP 200 and an "error" object
        if "error" in data:
            error = data["error"]
            message = error.get("message", "Unknown error") if isinstance(error, dict) else error
            logger.warning(f"CO-OPS error for station {params.get('station')}: {message}")
            raise UpstreamError(f"CO-OPS API error: {message}", source=self.source)

        return data

    def get_predictions(
        self,
        station: str,
        begin: datetime,
        end: datetime,
        product: str = "predictions",
        time_zone: str = "lst_ldt",
        units: str = "english",
        datum: str = "MLLW",
        interval: str = "hilo",
    ) -> List[Dict[str, Any]]:
        """
        Get tide predictions for a station.

        Args:
            station: NOAA station ID (e.g., "9414290" for San Francisco)
            begin: Window start, already expressed in the ``time_zone`` clock
            end: Window end, same clock as ``begin``
            product, time_zone, units, datum, interval: passed to CO-OPS as-is

        Returns:
            List of raw prediction dicts with keys t, v and (for hilo) type
        """
        params = {
            "format": "json",
            "application": self.application,
            "station": station,
            "begin_date": begin.strftime(COOPS_DATE_FORMAT),
            "end_date": end.strftime(COOPS_DATE_FORMAT),
            "product": product,
            "time_zone": time_zone,
            "units": units,
            "datum": datum,
            "interval": interval,
        }

        data = self._fetch_data(params)
        predictions = data.get("predictions", data.get("data", []))
        return predictions if isinstance(predictions, list) else []

    def close(self) -> None:
        self.session.close()
