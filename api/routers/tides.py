"""
Tide predictions API router.

All query parameters except ``station`` have CO-OPS defaults (hilo
predictions in feet against MLLW, station local time).
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.schemas.common import ErrorResponse
from api.schemas.tides import TideResponse
from api.state import ApplicationState, get_app_state
from api.tide_service import TideQuery

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Tides"])


@router.get(
    "/tides",
    response_model=TideResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_tides(
    station: Optional[str] = Query(None, description="NOAA station id (default: San Francisco)"),
    product: str = Query("predictions"),
    time_zone: str = Query("lst_ldt"),
    units: str = Query("english"),
    datum: str = Query("MLLW"),
    interval: str = Query("hilo"),
    range_hours: str = Query("24", alias="range", description="Lookahead window in hours"),
    state: ApplicationState = Depends(get_app_state),
):
    """Upcoming high and low tides for a station over the lookahead window."""
    query = TideQuery(
        station=station if station is not None else state.settings.default_tide_station,
        product=product,
        time_zone=time_zone,
        units=units,
        datum=datum,
        interval=interval,
        range=range_hours,
    )
    cached, prediction = state.tides.get_predictions(query)
    return {"cached": cached, "data": prediction}
