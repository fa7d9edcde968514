"""Ride listing service - posting and looking up ride offers."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional

import dateparser

from ..domain.errors import RideNotFoundError, RideValidationError
from ..domain.models import Ride, RideDraft, User
from ..ports.repository import RideRepositoryPort


def normalize_ride_date(raw: str, now: datetime) -> str:
    """Turn a user-entered date into ISO ``YYYY-MM-DD``.

    Relative expressions ('tomorrow', 'next friday') resolve against
    ``now``. Blank or unparseable input falls back to today.
    """
    if raw and raw.strip():
        parsed = dateparser.parse(
            raw.strip(),
            settings={"PREFER_DATES_FROM": "future", "RELATIVE_BASE": now},
        )
        if parsed:
            return parsed.date().isoformat()
    return now.date().isoformat()


@dataclass
class RideListingService:
    """Post new ride offers and fetch existing ones.

    Attributes:
        repository: Where rides are stored
        clock: Source of the current time, injectable for tests
    """

    repository: RideRepositoryPort
    clock: Callable[[], datetime] = datetime.now

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _missing_fields(self, draft: RideDraft) -> List[str]:
        missing = []
        if not draft.origin.strip():
            missing.append("origin")
        if not draft.destination.strip():
            missing.append("destination")
        if draft.price is None:
            missing.append("price")
        if not draft.vehicle_type.strip():
            missing.append("vehicle_type")
        return missing

    def post_ride(self, host: User, draft: RideDraft) -> Ride:
        """Validate a draft and store it as a new ride.

        Args:
            host: The member offering the ride.
            draft: Fields entered by the host.

        Returns:
            The stored ride, now first in the listing.

        Raises:
            RideValidationError: If a required field is missing.
        """
        missing = self._missing_fields(draft)
        if missing:
            raise RideValidationError(
                "Please fill in all required fields, including vehicle type",
                missing_fields=tuple(missing),
            )

        vehicle_type = draft.vehicle_type.strip()
        ride = Ride(
            id=str(uuid.uuid4()),
            host_id=host.id,
            name=host.name,
            car=f"{vehicle_type} (Verify)",
            vehicle_type=vehicle_type,
            price=float(draft.price),  # type: ignore[arg-type]
            seats_left=max(int(draft.seats or 1), 1),
            avatar=host.avatar,
            eta="Now",
            origin=draft.origin.strip(),
            destination=draft.destination.strip(),
            date=normalize_ride_date(draft.date, self.clock()),
            time=draft.time.strip() or "Now",
            rating=host.rating,
        )

        self.repository.add(ride)
        self._logger.info(
            "Ride posted",
            extra={"ride_id": ride.id, "host_id": host.id, "vehicle_type": vehicle_type},
        )
        return ride

    def get_ride(self, ride_id: str) -> Ride:
        """Look up a ride by identifier.

        Raises:
            RideNotFoundError: If no ride has this identifier.
        """
        ride: Optional[Ride] = self.repository.get(ride_id)
        if ride is None:
            raise RideNotFoundError(f"Ride not found: {ride_id}", ride_id=ride_id)
        return ride
