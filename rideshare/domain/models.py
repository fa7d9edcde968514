"""Immutable domain models for ride search.

All models are frozen dataclasses with slots. They carry no external
dependencies and describe the concepts shared by the parsing tiers,
the ride filter and the repositories.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Optional


def _clean(value: Optional[str]) -> Optional[str]:
    """Return a stripped string, or None when nothing is left."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


class MatchTier(Enum):
    """Which filtering tier produced a result list."""

    INTENT = auto()
    STRICT_ROUTE = auto()
    FREE_TEXT = auto()
    IDENTITY = auto()


@dataclass(frozen=True, slots=True)
class SearchIntent:
    """Structured filters derived from a free-text query.

    Empty or whitespace-only values are normalized to None on creation,
    so a populated field is always a non-empty string.

    Attributes:
        origin: Substring expected in the ride's departure location
        destination: Substring expected in the ride's arrival location
        vehicle_type: Substring expected in the ride's vehicle type
    """

    origin: Optional[str] = None
    destination: Optional[str] = None
    vehicle_type: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", _clean(self.origin))
        object.__setattr__(self, "destination", _clean(self.destination))
        object.__setattr__(self, "vehicle_type", _clean(self.vehicle_type))

    @property
    def is_empty(self) -> bool:
        """Check if no field is populated."""
        return (
            self.origin is None
            and self.destination is None
            and self.vehicle_type is None
        )

    def to_dict(self) -> Dict[str, str]:
        """Return the populated fields using their wire names."""
        data: Dict[str, str] = {}
        if self.origin:
            data["from"] = self.origin
        if self.destination:
            data["to"] = self.destination
        if self.vehicle_type:
            data["vehicleType"] = self.vehicle_type
        return data


def populated(intent: Optional[SearchIntent]) -> Optional[SearchIntent]:
    """Collapse an intent with no populated field into None."""
    if intent is None or intent.is_empty:
        return None
    return intent


@dataclass(frozen=True, slots=True)
class User:
    """A marketplace member, either hosting or requesting rides."""

    id: str
    name: str
    avatar: str = ""
    rating: float = 5.0
    trips_count: int = 0


@dataclass(frozen=True, slots=True)
class Ride:
    """A point-to-point ride offer.

    The search core only reads ``origin``, ``destination`` and
    ``vehicle_type``; the remaining attributes are listing details.
    """

    id: str
    host_id: str
    name: str
    car: str
    vehicle_type: str
    price: float
    seats_left: int
    avatar: str
    eta: str
    origin: str
    destination: str
    date: str
    time: str
    rating: float
    badge: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RideDraft:
    """User-entered fields of a ride about to be posted.

    Attributes:
        origin: Departure location
        destination: Arrival location
        price: Price per seat
        vehicle_type: Free-form vehicle type (e.g. 'Sedan', 'Bike')
        seats: Number of seats offered
        date: Free-form date ('2026-11-02', 'tomorrow'); blank means today
        time: Departure time; blank means 'Now'
    """

    origin: str = ""
    destination: str = ""
    price: Optional[float] = None
    vehicle_type: str = ""
    seats: int = 1
    date: str = ""
    time: str = ""


@dataclass(frozen=True, slots=True)
class FilterResult:
    """Rides kept by the filter together with the tier that kept them."""

    rides: tuple[Ride, ...] = field(default_factory=tuple)
    tier: MatchTier = MatchTier.IDENTITY

    @property
    def count(self) -> int:
        """Return the number of rides kept."""
        return len(self.rides)
