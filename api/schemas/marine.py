"""Marine reading API schemas."""

from typing import Dict, Optional

from pydantic import BaseModel


class MarineUnits(BaseModel):
    """Unit labels for each reading field."""
    wind_speed: str = "kts"
    wind_gust: str = "kts"
    wind_direction: Optional[str] = None
    temperature: Optional[str] = None
    humidity: Optional[str] = None
    pressure: Optional[str] = None
    visibility: Optional[str] = None
    wave_height: Optional[str] = None


class MarineRaw(BaseModel):
    """Unconverted upstream values."""
    wind_speed_kmh: Optional[float] = None
    wind_gust_kmh: Optional[float] = None
    units: Dict[str, Optional[str]] = {}


class MarineReading(BaseModel):
    """Current-hour marine conditions at a coordinate."""
    lat: float
    lon: float
    updated_at: Optional[str] = None
    wind_speed_kts: Optional[float] = None
    wind_gust_kts: Optional[float] = None
    wind_direction_deg: Optional[float] = None
    temperature_c: Optional[float] = None
    humidity: Optional[float] = None
    pressure_hpa: Optional[float] = None
    visibility_km: Optional[float] = None
    wave_height: Optional[str] = None  # Filled from the Beaufort band downstream
    units: MarineUnits
    raw: Optional[MarineRaw] = None


class MarineResponse(BaseModel):
    cached: bool
    data: MarineReading
