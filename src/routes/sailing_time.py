"""
Wind-aware sailing time estimate.

A rule-of-thumb refinement of the plain hull-speed ETA: it adds the time to
motor out of the departure harbor, derates hull speed for the wind strength
and the average point of sail, and stretches upwind routes for tacking.
All factors are empirical constants, not a performance polar.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Optional, Sequence

from src.data.harbors import DEFAULT_EXIT_HOURS, get_harbor
from src.data.vessel_classes import hull_speed_kts
from src.routes.planner import PointLike, initial_bearing, legs, total_distance_nm

logger = logging.getLogger(__name__)

LIGHT_AIR_KTS = 3.0
TACKING_PENALTY = 1.15
MIN_SPEED_FRACTION = 0.3  # Motoring floor as a fraction of hull speed


@dataclass
class SailingEstimate:
    """Result of a wind-aware time estimate."""
    total_hours: float
    harbor_exit_hours: float
    sailing_hours: float
    distance_nm: float
    tacking_penalty: float
    sailing_speed_kts: float
    efficiency: float
    wind_speed_kts: float
    wind_direction_deg: float

    def to_dict(self) -> dict:
        return asdict(self)


def _normalized_wind_angle(wind_direction_deg: float, course_deg: float) -> float:
    """Angle between wind and course folded to [0, 1]; 0 is dead upwind."""
    angle = abs(wind_direction_deg - course_deg)
    return min(angle, 360 - angle) / 180


def sailing_efficiency(
    sequence: Sequence[PointLike],
    wind_direction_deg: float,
    wind_speed_kts: float,
) -> float:
    """Fraction of achievable speed for the average point of sail."""
    if wind_speed_kts < LIGHT_AIR_KTS:
        return 0.3  # Mostly motoring

    route_legs = legs(sequence)
    if not route_legs:
        return 0.3

    avg_course = sum(leg.bearing_deg for leg in route_legs) / len(route_legs)
    angle = _normalized_wind_angle(wind_direction_deg, avg_course)

    if angle < 0.3:
        return 0.6  # Close hauled
    if angle < 0.6:
        return 0.8  # Beam reach
    if angle < 0.8:
        return 0.9  # Broad reach
    return 0.8  # Running


def tacking_penalty(sequence: Sequence[PointLike], wind_direction_deg: float) -> float:
    """Distance multiplier when the overall course lies within 45 degrees of the wind."""
    if len(sequence) < 2:
        return 1.0

    course = initial_bearing(sequence[0], sequence[-1])
    if _normalized_wind_angle(wind_direction_deg, course) < 0.25:
        return TACKING_PENALTY
    return 1.0


def sailing_speed_kts(hull_speed: float, wind_speed_kts: float, efficiency: float) -> float:
    """Expected boat speed for the wind strength, floored at motoring speed."""
    if wind_speed_kts < 5:
        speed = hull_speed * 0.6
    elif wind_speed_kts < 15:
        speed = hull_speed * 0.8
    elif wind_speed_kts < 25:
        speed = hull_speed * 0.9
    else:
        speed = hull_speed * 0.7  # Reefed

    speed *= efficiency
    return max(speed, hull_speed * MIN_SPEED_FRACTION)


def estimate_sailing_time(
    sequence: Sequence[PointLike],
    vessel_class: str,
    wind_speed_kts: Optional[float] = None,
    wind_direction_deg: Optional[float] = None,
    harbor: Optional[str] = None,
) -> Optional[SailingEstimate]:
    """
    Estimate elapsed time for a route, including the harbor exit.

    Args:
        sequence: Waypoints in sailing order
        vessel_class: Key into the hull speed table
        wind_speed_kts: Current wind speed (missing counts as calm)
        wind_direction_deg: Direction the wind blows from (missing counts as 0)
        harbor: Departure harbor name for the exit time

    Returns:
        SailingEstimate, or None for fewer than two waypoints

    Raises:
        DomainError: for an unknown vessel class or harbor
    """
    if len(sequence) < 2:
        return None

    hull_speed = hull_speed_kts(vessel_class)
    wind_speed = wind_speed_kts or 0.0
    wind_direction = wind_direction_deg or 0.0

    exit_hours = get_harbor(harbor).exit_hours if harbor else DEFAULT_EXIT_HOURS
    distance = total_distance_nm(sequence)
    efficiency = sailing_efficiency(sequence, wind_direction, wind_speed)
    penalty = tacking_penalty(sequence, wind_direction)
    speed = sailing_speed_kts(hull_speed, wind_speed, efficiency)

    sailing_hours = distance * penalty / speed
    logger.debug(
        f"Sailing estimate: {distance:.2f} nm at {speed:.2f} kts "
        f"(efficiency {efficiency}, tacking x{penalty})"
    )

    return SailingEstimate(
        total_hours=exit_hours + sailing_hours,
        harbor_exit_hours=exit_hours,
        sailing_hours=sailing_hours,
        distance_nm=distance,
        tacking_penalty=penalty,
        sailing_speed_kts=speed,
        efficiency=efficiency,
        wind_speed_kts=wind_speed,
        wind_direction_deg=wind_direction,
    )
