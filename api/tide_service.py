"""
Tide prediction service for the SailFrisco API.

Requests a lookahead window of predictions for a NOAA station, labels
high/low events, drops events that are already past (with a small grace
window for request latency and clock skew) and caches the result under a key
built from every query parameter.

CO-OPS reports ``t`` as a naive local timestamp in the clock selected by
``time_zone``. ``gmt`` is UTC; the local options are interpreted in the
configured station timezone (all Bay stations share America/Los_Angeles).
"""

import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple
from zoneinfo import ZoneInfo

from api.cache import BoundedLRUCache, build_key
from src.data.noaa_tides import NOAATidesClient
from src.errors import InvalidQueryError

logger = logging.getLogger(__name__)

DEFAULT_STATION = "9414290"  # San Francisco
DEFAULT_RANGE_HOURS = 24
DEFAULT_GRACE_MINUTES = 5.0

TIDE_TYPES = {"H": "High", "L": "Low"}


@dataclass(frozen=True)
class TideQuery:
    """Tide request parameters; all of them take part in the cache key."""
    station: str = DEFAULT_STATION
    product: str = "predictions"
    time_zone: str = "lst_ldt"
    units: str = "english"
    datum: str = "MLLW"
    interval: str = "hilo"
    range: str = str(DEFAULT_RANGE_HOURS)

    def params(self) -> Dict[str, str]:
        return asdict(self)

    def range_hours(self) -> int:
        try:
            hours = int(self.range)
        except (TypeError, ValueError):
            hours = 0
        if hours <= 0:
            raise InvalidQueryError(
                "Invalid query",
                details={"range": "must be a positive whole number of hours"},
            )
        return hours

    def validate(self) -> None:
        if not self.station or not self.station.strip():
            raise InvalidQueryError("Invalid query", details={"station": "must not be empty"})
        self.range_hours()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_value(raw: Any) -> Optional[float]:
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None


def label_prediction(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Map a CO-OPS ``{t, v, type}`` triple to ``{time, value_ft, type}``."""
    return {
        "time": raw.get("t"),
        "value_ft": _parse_value(raw.get("v")),
        "type": TIDE_TYPES.get(raw.get("type")),
    }


class TideService:
    """Cache-backed tide prediction lookups."""

    cache_prefix = "tides"

    def __init__(
        self,
        cache: BoundedLRUCache,
        client: NOAATidesClient,
        station_timezone: str = "America/Los_Angeles",
        grace_minutes: float = DEFAULT_GRACE_MINUTES,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.cache = cache
        self.client = client
        self.station_tz = ZoneInfo(station_timezone)
        self.grace = timedelta(minutes=grace_minutes)
        self._clock = clock

    def cache_key(self, query: TideQuery) -> str:
        return build_key(self.cache_prefix, query.params())

    def _zone_for(self, time_zone: str):
        return timezone.utc if time_zone.lower() == "gmt" else self.station_tz

    def _wall_time(self, instant: datetime, time_zone: str) -> datetime:
        """An aware instant as a naive timestamp in the requested CO-OPS clock."""
        return instant.astimezone(self._zone_for(time_zone)).replace(tzinfo=None)

    def _parse_time(self, value: Any, time_zone: str) -> Optional[datetime]:
        if not isinstance(value, str):
            return None
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return None
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(self._zone_for(time_zone)).replace(tzinfo=None)
        return parsed

    def upcoming(
        self,
        predictions: List[Dict[str, Any]],
        now: datetime,
        time_zone: str,
    ) -> List[Dict[str, Any]]:
        """Labelled events no older than the grace window, in upstream order."""
        cutoff = now - self.grace
        events = []
        for raw in predictions:
            event = label_prediction(raw)
            event_time = self._parse_time(event["time"], time_zone)
            if event_time is None:
                logger.debug(f"Skipping tide event with unreadable time: {raw!r}")
                continue
            if event_time >= cutoff:
                events.append(event)
        return events

    def get_predictions(self, query: Optional[TideQuery] = None) -> Tuple[bool, Dict[str, Any]]:
        """
        Upcoming tide events for a station.

        Returns:
            (cached, {"station", "upcoming", "raw_count"})

        Raises:
            InvalidQueryError: empty station or non-positive range
            UpstreamError: CO-OPS unreachable or answered with an error
        """
        query = query or TideQuery()
        query.validate()

        key = self.cache_key(query)
        cached = self.cache.get(key)
        if cached is not None:
            return True, cached

        logger.debug(f"Tide cache miss: {key}")
        # Window length is elapsed time; on DST days the wall-clock span is 23 or 25 h
        start = self._clock()
        begin = self._wall_time(start, query.time_zone)
        end = self._wall_time(start + timedelta(hours=query.range_hours()), query.time_zone)

        predictions = self.client.get_predictions(
            station=query.station,
            begin=begin,
            end=end,
            product=query.product,
            time_zone=query.time_zone,
            units=query.units,
            datum=query.datum,
            interval=query.interval,
        )

        # Re-read the clock: the fetch may have taken a while
        now = self._wall_time(self._clock(), query.time_zone)
        result = {
            "station": query.station,
            "upcoming": self.upcoming(predictions, now, query.time_zone),
            "raw_count": len(predictions),
        }

        self.cache.set(key, result)
        return False, result
