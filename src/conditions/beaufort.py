"""
Beaufort wind-force classification and gauge projections.

Classification scans the bands in ascending force order and returns the
first one whose upper bound is at or above the speed. Missing or NaN speeds
classify as Calm.

Two projections place a speed on a 0-100 gauge:

- ``linear``: proportional up to 64 kts, pinned at 100 above.
- ``log``: ``ln(1 + speed) / ln(65)``, which spreads out the light and
  moderate winds that make up most Bay readings.
"""

import math
from typing import Optional

from src.data.beaufort_scale import BEAUFORT_SCALE, GAUGE_FULL_SCALE_KTS, BeaufortBand
from src.errors import DomainError

GAUGE_SCALES = ("linear", "log")

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def _is_missing(value: Optional[float]) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def classify(speed_kts: Optional[float]) -> BeaufortBand:
    """Return the Beaufort band for a wind speed in knots."""
    if _is_missing(speed_kts):
        return BEAUFORT_SCALE[0]

    for band in BEAUFORT_SCALE:
        if band.max_kts >= speed_kts:
            return band

    # Unreachable while the last band is unbounded
    return BEAUFORT_SCALE[-1]


def wave_height_for(speed_kts: Optional[float]) -> str:
    """Qualitative wave height descriptor for the speed's band."""
    return classify(speed_kts).wave_height


def linear_position(speed_kts: Optional[float]) -> float:
    if _is_missing(speed_kts) or speed_kts <= 0:
        return 0.0
    return min(speed_kts, GAUGE_FULL_SCALE_KTS) / GAUGE_FULL_SCALE_KTS * 100


def log_position(speed_kts: Optional[float]) -> float:
    if _is_missing(speed_kts) or speed_kts <= 0:
        return 0.0
    position = math.log1p(speed_kts) / math.log1p(GAUGE_FULL_SCALE_KTS) * 100
    return max(0.0, min(position, 100.0))


def gauge_position(speed_kts: Optional[float], scale: str = "linear") -> float:
    """
    Position of a speed on a 0-100 gauge.

    Args:
        speed_kts: Wind speed in knots
        scale: "linear" or "log"

    Raises:
        DomainError: for an unknown scale name
    """
    if scale == "linear":
        return linear_position(speed_kts)
    if scale == "log":
        return log_position(speed_kts)
    raise DomainError(
        f"Unknown gauge scale: {scale!r}",
        details={"scale": scale, "known": list(GAUGE_SCALES)},
    )


def compass_point(direction_deg: Optional[float]) -> Optional[str]:
    """16-point compass name for a direction in degrees."""
    if _is_missing(direction_deg):
        return None
    index = int(round(direction_deg / 22.5)) % 16
    return COMPASS_POINTS[index]


def describe_wind(
    speed_kts: Optional[float],
    gust_kts: Optional[float] = None,
    direction_deg: Optional[float] = None,
    scale: str = "linear",
) -> dict:
    """Everything the conditions panel shows about the wind."""
    band = classify(speed_kts)
    return {
        "force": band.force,
        "label": band.label,
        "wave_height": band.wave_height,
        "color": band.color,
        "text_color": band.text_color,
        "speed_kts": speed_kts,
        "gust_kts": gust_kts,
        "gust_force": classify(gust_kts).force if not _is_missing(gust_kts) else None,
        "direction_deg": direction_deg,
        "compass": compass_point(direction_deg),
        "gauge": {
            "scale": scale,
            "speed": gauge_position(speed_kts, scale),
            "gust": gauge_position(gust_kts, scale) if not _is_missing(gust_kts) else None,
        },
    }
