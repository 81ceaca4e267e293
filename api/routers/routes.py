"""
Sailing routes API router.

Stateless: each request carries its waypoints and gets a fresh planner, so
no route state is shared between callers.
"""

import logging

from fastapi import APIRouter

from api.schemas.routes import RouteSummaryRequest, RouteSummaryResponse
from src.data.vessel_classes import hull_speed_kts
from src.routes.planner import RoutePlanner
from src.routes.sailing_time import estimate_sailing_time

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/routes", tags=["Routes"])


@router.post("/summary", response_model=RouteSummaryResponse)
async def route_summary(request: RouteSummaryRequest):
    """
    Distance, hull-speed ETA and wind-aware estimate for a waypoint list.

    ``eta_hours`` and ``sailing_estimate`` are null below two waypoints.
    An unknown vessel class or harbor is rejected with 400.
    """
    planner = RoutePlanner((wp.lat, wp.lon) for wp in request.waypoints)
    hull_speed = hull_speed_kts(request.vessel_class)

    estimate = estimate_sailing_time(
        planner.waypoints,
        request.vessel_class,
        wind_speed_kts=request.wind_speed_kts,
        wind_direction_deg=request.wind_direction_deg,
        harbor=request.harbor,
    )

    return {
        "waypoint_count": len(planner),
        "vessel_class": request.vessel_class,
        "hull_speed_kts": hull_speed,
        "distance_nm": planner.total_distance_nm(),
        "eta_hours": planner.eta_hours(request.vessel_class),
        "legs": [
            {
                "from_lat": leg.from_wp.lat,
                "from_lon": leg.from_wp.lon,
                "to_lat": leg.to_wp.lat,
                "to_lon": leg.to_wp.lon,
                "distance_nm": leg.distance_nm,
                "bearing_deg": leg.bearing_deg,
            }
            for leg in planner.legs()
        ],
        "sailing_estimate": estimate.to_dict() if estimate else None,
    }
