"""Wind condition classification."""

from .beaufort import classify, compass_point, describe_wind, gauge_position, wave_height_for

__all__ = [
    "classify",
    "compass_point",
    "describe_wind",
    "gauge_position",
    "wave_height_for",
]
