"""
Route planner: waypoint accumulation, great-circle distance and ETA.

Distances use the haversine formula on a spherical Earth of mean radius
6371 km, converted to nautical miles with 0.539957 nm/km. ETA divides the
total distance by a fixed hull speed for the vessel class; it ignores wind,
current and tacking (see ``src.routes.sailing_time`` for the wind-aware
estimate).
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from src.data.vessel_classes import hull_speed_kts
from src.errors import InvalidQueryError

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0
KM_TO_NM = 0.539957


@dataclass(frozen=True)
class Waypoint:
    """A route point in decimal degrees."""
    lat: float
    lon: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lat, self.lon)


@dataclass
class RouteLeg:
    """A leg between two waypoints."""
    from_wp: Waypoint
    to_wp: Waypoint
    distance_nm: float
    bearing_deg: float


PointLike = Union[Waypoint, Tuple[float, float], Sequence[float]]


def validate_coordinate(lat: float, lon: float) -> None:
    """Raise InvalidQueryError unless lat is in [-90, 90] and lon in [-180, 180]."""
    errors = {}
    # Written as negated ranges so NaN fails too
    if not -90 <= lat <= 90:
        errors["lat"] = "must be between -90 and 90"
    if not -180 <= lon <= 180:
        errors["lon"] = "must be between -180 and 180"
    if errors:
        raise InvalidQueryError("Invalid coordinate", details=errors)


def _as_waypoint(point: PointLike) -> Waypoint:
    if isinstance(point, Waypoint):
        return point
    lat, lon = point
    return Waypoint(float(lat), float(lon))


def haversine_nm(a: PointLike, b: PointLike) -> float:
    """
    Great circle distance between two points.

    Args:
        a, b: Waypoints or (lat, lon) pairs in degrees

    Returns:
        Distance in nautical miles
    """
    p1, p2 = _as_waypoint(a), _as_waypoint(b)

    lat1_rad = math.radians(p1.lat)
    lat2_rad = math.radians(p2.lat)
    dlat = math.radians(p2.lat - p1.lat)
    dlon = math.radians(p2.lon - p1.lon)

    h = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2)
    # Rounding can push h a hair above 1 for antipodal points
    h = min(h, 1.0)

    distance_km = 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))
    return distance_km * KM_TO_NM


def initial_bearing(a: PointLike, b: PointLike) -> float:
    """
    Initial bearing from point a to point b.

    Returns:
        Bearing in degrees (0-360)
    """
    p1, p2 = _as_waypoint(a), _as_waypoint(b)

    lat1_rad = math.radians(p1.lat)
    lat2_rad = math.radians(p2.lat)
    dlon = math.radians(p2.lon - p1.lon)

    y = math.sin(dlon) * math.cos(lat2_rad)
    x = (math.cos(lat1_rad) * math.sin(lat2_rad) -
         math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon))

    bearing = math.degrees(math.atan2(y, x))
    return (bearing + 360) % 360


def legs(sequence: Sequence[PointLike]) -> List[RouteLeg]:
    """Calculate legs between consecutive waypoints."""
    points = [_as_waypoint(p) for p in sequence]
    result = []
    for wp1, wp2 in zip(points, points[1:]):
        result.append(RouteLeg(wp1, wp2, haversine_nm(wp1, wp2), initial_bearing(wp1, wp2)))
    return result


def total_distance_nm(sequence: Sequence[PointLike]) -> float:
    """Sum of leg distances; 0 for fewer than two waypoints."""
    if len(sequence) < 2:
        return 0.0
    return sum(leg.distance_nm for leg in legs(sequence))


def eta_hours(sequence: Sequence[PointLike], vessel_class: str) -> Optional[float]:
    """
    Hours to cover the route at the vessel class's hull speed.

    Returns None for fewer than two waypoints.

    Raises:
        DomainError: for an unmapped vessel class
    """
    if len(sequence) < 2:
        return None
    return total_distance_nm(sequence) / hull_speed_kts(vessel_class)


class RoutePlanner:
    """
    Ordered, append-only waypoint list owned by one caller.

    Not thread-safe; concurrent mutation of one instance is the owner's
    problem to prevent.

    Usage:
        planner = RoutePlanner()
        planner.append(37.8060, -122.4659)
        planner.append(37.8591, -122.4853)
        planner.eta_hours("30ft")
    """

    def __init__(self, waypoints: Iterable[PointLike] = ()):
        self._waypoints: List[Waypoint] = []
        for point in waypoints:
            wp = _as_waypoint(point)
            self.append(wp.lat, wp.lon)

    def append(self, lat: float, lon: float) -> Waypoint:
        validate_coordinate(lat, lon)
        wp = Waypoint(lat, lon)
        self._waypoints.append(wp)
        return wp

    def clear(self) -> None:
        self._waypoints.clear()

    @property
    def waypoints(self) -> List[Waypoint]:
        return list(self._waypoints)

    def __len__(self) -> int:
        return len(self._waypoints)

    def legs(self) -> List[RouteLeg]:
        return legs(self._waypoints)

    def total_distance_nm(self) -> float:
        return total_distance_nm(self._waypoints)

    def eta_hours(self, vessel_class: str) -> Optional[float]:
        return eta_hours(self._waypoints, vessel_class)
