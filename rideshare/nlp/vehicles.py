"""Vehicle-type keywords recognized in search queries."""

from __future__ import annotations

from typing import Optional, Tuple

from .text import normalize

# Order is the tie-break when several keywords occur in one query.
VEHICLE_KEYWORDS: Tuple[str, ...] = (
    "sedan",
    "suv",
    "hatchback",
    "bike",
    "scooty",
    "ev scooty",
    "luxury",
)


def canonical_vehicle(token: str) -> str:
    """Capitalize the first letter only ('bike' -> 'Bike')."""
    return token[:1].upper() + token[1:]


def find_vehicle_token(query: str) -> Optional[str]:
    """Return the first keyword (in list order) contained in the query."""
    lowered = normalize(query)
    if not lowered:
        return None
    for keyword in VEHICLE_KEYWORDS:
        if keyword in lowered:
            return keyword
    return None


def detect_vehicle(query: str) -> Optional[str]:
    """Detect a vehicle type and return its canonical label.

    Example
    -------
        >>> detect_vehicle("cheap bike to office")
        'Bike'
        >>> detect_vehicle("Delhi to Gurgaon") is None
        True
    """
    token = find_vehicle_token(query)
    return canonical_vehicle(token) if token else None
