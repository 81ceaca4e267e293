"""Route summary API schemas."""

from typing import List, Optional

from pydantic import BaseModel, Field

from src.data.vessel_classes import DEFAULT_VESSEL_CLASS

from .common import Position


class RouteSummaryRequest(BaseModel):
    """Waypoints in sailing order plus the inputs for the time estimates."""
    waypoints: List[Position] = Field(default_factory=list, max_length=500)
    vessel_class: str = DEFAULT_VESSEL_CLASS
    harbor: Optional[str] = None
    wind_speed_kts: Optional[float] = Field(None, ge=0)
    wind_direction_deg: Optional[float] = Field(None, ge=0, le=360)


class RouteLegModel(BaseModel):
    from_lat: float
    from_lon: float
    to_lat: float
    to_lon: float
    distance_nm: float
    bearing_deg: float


class SailingEstimateModel(BaseModel):
    total_hours: float
    harbor_exit_hours: float
    sailing_hours: float
    distance_nm: float
    tacking_penalty: float
    sailing_speed_kts: float
    efficiency: float
    wind_speed_kts: float
    wind_direction_deg: float


class RouteSummaryResponse(BaseModel):
    waypoint_count: int
    vessel_class: str
    hull_speed_kts: float
    distance_nm: float
    eta_hours: Optional[float] = None  # None below two waypoints
    legs: List[RouteLegModel]
    sailing_estimate: Optional[SailingEstimateModel] = None
