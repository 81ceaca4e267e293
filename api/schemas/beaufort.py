"""Beaufort classification API schemas."""

from typing import List, Literal, Optional

from pydantic import BaseModel

GaugeScale = Literal["linear", "log"]


class BeaufortBandModel(BaseModel):
    """One row of the Beaufort table."""
    force: int
    label: str
    min_kts: float
    max_kts: Optional[float] = None  # None for the unbounded top band
    wave_height: str
    color: str
    text_color: str


class BeaufortClassification(BaseModel):
    speed_kts: Optional[float] = None
    band: BeaufortBandModel
    scale: GaugeScale
    gauge_position: float


class BeaufortScaleResponse(BaseModel):
    bands: List[BeaufortBandModel]
