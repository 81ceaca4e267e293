"""Data providers and reference tables for Bay marine conditions."""

from .beaufort_scale import BEAUFORT_SCALE, BeaufortBand
from .harbors import HARBORS, Harbor, get_harbor, list_harbors
from .noaa_tides import NOAATidesClient
from .open_meteo import OpenMeteoClient
from .vessel_classes import HULL_SPEED_KTS, hull_speed_kts

__all__ = [
    'BEAUFORT_SCALE',
    'BeaufortBand',
    'HARBORS',
    'Harbor',
    'get_harbor',
    'list_harbors',
    'NOAATidesClient',
    'OpenMeteoClient',
    'HULL_SPEED_KTS',
    'hull_speed_kts',
]
