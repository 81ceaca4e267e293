"""Route distance, ETA and sailing time estimates."""

from .planner import (
    RouteLeg,
    RoutePlanner,
    Waypoint,
    eta_hours,
    haversine_nm,
    initial_bearing,
    legs,
    total_distance_nm,
    validate_coordinate,
)
from .sailing_time import SailingEstimate, estimate_sailing_time

__all__ = [
    "RouteLeg",
    "RoutePlanner",
    "Waypoint",
    "eta_hours",
    "haversine_nm",
    "initial_bearing",
    "legs",
    "total_distance_nm",
    "validate_coordinate",
    "SailingEstimate",
    "estimate_sailing_time",
]
