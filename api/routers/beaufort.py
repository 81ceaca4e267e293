"""
Beaufort scale API router.

Pure lookups; no upstream calls and no caching.
"""

from typing import Optional

from fastapi import APIRouter, Query

from api.schemas.beaufort import BeaufortClassification, BeaufortScaleResponse, GaugeScale
from src.conditions.beaufort import classify, gauge_position
from src.data.beaufort_scale import BEAUFORT_SCALE

router = APIRouter(prefix="/api/beaufort", tags=["Beaufort"])


@router.get("", response_model=BeaufortClassification)
async def classify_wind(
    speed_kts: Optional[float] = Query(
        None, allow_inf_nan=False, description="Wind speed in knots; missing means calm"
    ),
    scale: GaugeScale = Query("linear", description="Gauge projection"),
):
    """Beaufort band and gauge position for a wind speed."""
    band = classify(speed_kts)
    return {
        "speed_kts": speed_kts,
        "band": band.to_dict(),
        "scale": scale,
        "gauge_position": gauge_position(speed_kts, scale),
    }


@router.get("/scale", response_model=BeaufortScaleResponse)
async def beaufort_scale():
    """The full force 0-12 table."""
    return {"bands": [band.to_dict() for band in BEAUFORT_SCALE]}
