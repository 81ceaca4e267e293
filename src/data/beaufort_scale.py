"""
Beaufort scale registry: single source of truth for wind force bands.

Each band carries its knot range, display label, display colours and a
qualitative wave-height descriptor. The wave heights are a lookup for
display only; they are not a sea-state model.

Bands are half-open on the left: a speed belongs to the first band whose
``max_kts`` is at or above it, so a value sitting exactly on a boundary falls
in the lower band. ``min_kts`` of each band equals ``max_kts`` of the band
below, which keeps the table contiguous over [0, inf).
"""

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class BeaufortBand:
    """Immutable definition of one Beaufort force."""

    force: int
    label: str
    min_kts: float
    max_kts: float                  # math.inf for force 12
    wave_height: str                # qualitative, e.g. "2-4 ft"
    color: str
    text_color: str

    @property
    def bounded(self) -> bool:
        return not math.isinf(self.max_kts)

    def to_dict(self) -> dict:
        return {
            "force": self.force,
            "label": self.label,
            "min_kts": self.min_kts,
            "max_kts": self.max_kts if self.bounded else None,
            "wave_height": self.wave_height,
            "color": self.color,
            "text_color": self.text_color,
        }


# Gauge full scale in knots; speeds at or above it pin the gauge at 100.
GAUGE_FULL_SCALE_KTS = 64.0

BEAUFORT_SCALE: Tuple[BeaufortBand, ...] = (
    BeaufortBand(0, "Calm", 0, 1, "0 ft", "#E3F2FD", "#1976D2"),
    BeaufortBand(1, "Light Air", 1, 3, "0-1 ft", "#BBDEFB", "#1565C0"),
    BeaufortBand(2, "Light Breeze", 3, 6, "1-2 ft", "#C8E6C9", "#2E7D32"),
    BeaufortBand(3, "Gentle Breeze", 6, 10, "2-4 ft", "#A5D6A7", "#388E3C"),
    BeaufortBand(4, "Moderate Breeze", 10, 16, "3-5 ft", "#DCEDC8", "#689F38"),
    BeaufortBand(5, "Fresh Breeze", 16, 21, "4-8 ft", "#F0F4C3", "#827717"),
    BeaufortBand(6, "Strong Breeze", 21, 27, "6-10 ft", "#FFF9C4", "#F57F17"),
    BeaufortBand(7, "Near Gale", 27, 33, "9-13 ft", "#FFE0B2", "#F57C00"),
    BeaufortBand(8, "Gale", 33, 40, "13-20 ft", "#FFCCBC", "#D84315"),
    BeaufortBand(9, "Strong Gale", 40, 47, "18-25 ft", "#FFAB91", "#BF360C"),
    BeaufortBand(10, "Storm", 47, 55, "23-32 ft", "#FF8A65", "#D32F2F"),
    BeaufortBand(11, "Violent Storm", 55, 63, "29-41 ft", "#FF5722", "#FFFFFF"),
    BeaufortBand(12, "Hurricane", 63, math.inf, "37+ ft", "#D32F2F", "#FFFFFF"),
)


def validate_scale(scale: Tuple[BeaufortBand, ...]) -> None:
    """Raise ValueError unless bands are ordered, contiguous and exhaustive."""
    if not scale:
        raise ValueError("Beaufort scale is empty")
    if scale[0].min_kts != 0:
        raise ValueError("Beaufort scale must start at 0 kts")
    if not math.isinf(scale[-1].max_kts):
        raise ValueError("Last Beaufort band must be unbounded")

    for index, band in enumerate(scale):
        if band.force != index:
            raise ValueError(f"Band at position {index} has force {band.force}")
        if band.max_kts <= band.min_kts:
            raise ValueError(f"Force {band.force} has an empty range")
        if index and band.min_kts != scale[index - 1].max_kts:
            raise ValueError(
                f"Force {band.force} does not start where force {band.force - 1} ends"
            )


validate_scale(BEAUFORT_SCALE)
