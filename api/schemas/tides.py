"""Tide prediction API schemas."""

from typing import List, Literal, Optional

from pydantic import BaseModel


class TideEvent(BaseModel):
    """A predicted high or low water."""
    time: Optional[str] = None
    value_ft: Optional[float] = None
    type: Optional[Literal["High", "Low"]] = None


class TidePrediction(BaseModel):
    station: str
    upcoming: List[TideEvent]
    raw_count: int  # Length of the unfiltered upstream series


class TideResponse(BaseModel):
    cached: bool
    data: TidePrediction
