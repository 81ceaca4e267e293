"""
Hull speed by vessel size class.

These are fixed displacement-hull approximations, not values derived from
waterline length, wind or current. Swap the table to change the ETA model.
"""

from typing import Dict, List

from src.errors import DomainError

HULL_SPEED_KTS: Dict[str, float] = {
    "20ft": 5.4,
    "30ft": 7.3,
    "40ft": 8.5,
    "50ft": 9.2,
}

DEFAULT_VESSEL_CLASS = "30ft"


def _validate_table(table: Dict[str, float]) -> None:
    for vessel_class, speed in table.items():
        if not speed > 0:
            raise ValueError(f"Hull speed for {vessel_class} must be positive, got {speed}")


def vessel_classes() -> List[str]:
    return list(HULL_SPEED_KTS)


def hull_speed_kts(vessel_class: str) -> float:
    """Look up hull speed in knots; unmapped classes raise DomainError."""
    try:
        return HULL_SPEED_KTS[vessel_class]
    except KeyError:
        raise DomainError(
            f"Unknown vessel class: {vessel_class!r}",
            details={"vessel_class": vessel_class, "known": vessel_classes()},
        ) from None


_validate_table(HULL_SPEED_KTS)
