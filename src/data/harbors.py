"""
San Francisco Bay harbors served by the app.

Each harbor has a reference position, the NOAA CO-OPS tide station used for
its predictions, and an estimate of the time needed to motor out through its
no-wake zones before sailing starts.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List

from src.errors import DomainError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Harbor:
    """A named departure harbor."""
    name: str
    lat: float
    lon: float
    tide_station: str
    exit_hours: float  # Motoring time to clear the harbor

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "lat": self.lat,
            "lon": self.lon,
            "tide_station": self.tide_station,
            "exit_hours": self.exit_hours,
        }


# Used when a route does not start from a known harbor.
DEFAULT_EXIT_HOURS = 0.3

HARBORS: Dict[str, Harbor] = {
    "Sausalito": Harbor("Sausalito", 37.8591, -122.4853, "9414806", 0.3),
    "Berkeley": Harbor("Berkeley", 37.8659, -122.3114, "9414816", 0.4),
    "Alameda": Harbor("Alameda", 37.7726, -122.2760, "9414750", 0.6),
    "San Francisco": Harbor("San Francisco", 37.8060, -122.4659, "9414290", 0.5),
    "Richmond": Harbor("Richmond", 37.9120, -122.3593, "9414849", 0.4),
}


def list_harbors() -> List[Harbor]:
    return list(HARBORS.values())


def get_harbor(name: str) -> Harbor:
    """
    Find a harbor by name, ignoring case and surrounding whitespace.

    Raises:
        DomainError: if the name is not a known harbor
    """
    wanted = name.strip().lower()
    for harbor in HARBORS.values():
        if harbor.name.lower() == wanted:
            return harbor
    logger.debug(f"Harbor lookup failed: {name!r}")
    raise DomainError(
        f"Unknown harbor: {name!r}",
        details={"harbor": name, "known": list(HARBORS)},
    )
