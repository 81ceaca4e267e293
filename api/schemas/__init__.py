"""
SailFrisco API Pydantic schemas.

Re-exports all schema classes:
    from api.schemas import Position, MarineResponse, ...
"""

# Common
from .common import Position, ErrorResponse  # noqa: F401

# Marine
from .marine import MarineUnits, MarineRaw, MarineReading, MarineResponse  # noqa: F401

# Tides
from .tides import TideEvent, TidePrediction, TideResponse  # noqa: F401

# Beaufort
from .beaufort import (  # noqa: F401
    BeaufortBandModel,
    BeaufortClassification,
    BeaufortScaleResponse,
)

# Routes
from .routes import (  # noqa: F401
    RouteSummaryRequest,
    RouteLegModel,
    SailingEstimateModel,
    RouteSummaryResponse,
)
