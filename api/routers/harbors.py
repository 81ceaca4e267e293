"""
Harbors API router.

Lists the Bay harbors and bundles everything the conditions panel needs for
one of them: marine reading, tide predictions and the wind classification.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.schemas.beaufort import GaugeScale
from api.state import ApplicationState, get_app_state
from api.tide_service import TideQuery
from src.conditions.beaufort import describe_wind
from src.data.harbors import get_harbor, list_harbors
from src.errors import DomainError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/harbors", tags=["Harbors"])


@router.get("")
async def harbors():
    """Known departure harbors with their tide stations."""
    return {"harbors": [harbor.to_dict() for harbor in list_harbors()]}


@router.get("/{name}/conditions")
def harbor_conditions(
    name: str,
    scale: GaugeScale = Query("linear", description="Gauge projection for the wind"),
    state: ApplicationState = Depends(get_app_state),
):
    """
    Marine reading, tides and wind classification for a harbor.

    The reading's ``wave_height`` is filled from the Beaufort band here; the
    cached reading itself is left untouched.
    """
    try:
        harbor = get_harbor(name)
    except DomainError as e:
        raise HTTPException(status_code=404, detail=e.message)

    marine_cached, reading = state.marine.get_reading(harbor.lat, harbor.lon)
    tides_cached, prediction = state.tides.get_predictions(
        TideQuery(station=harbor.tide_station)
    )

    wind = describe_wind(
        reading.get("wind_speed_kts"),
        reading.get("wind_gust_kts"),
        reading.get("wind_direction_deg"),
        scale=scale,
    )
    reading = {**reading, "wave_height": wind["wave_height"]}

    return {
        "harbor": harbor.to_dict(),
        "marine": {"cached": marine_cached, "data": reading},
        "tides": {"cached": tides_cached, "data": prediction},
        "wind": wind,
    }
