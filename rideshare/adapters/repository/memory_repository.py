"""In-memory ride repository."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ...domain.models import Ride


@dataclass
class InMemoryRideRepository:
    """RideRepositoryPort holding rides in a list, newest first.

    Attributes:
        rides: Initial listing, in display order
    """

    rides: Iterable[Ride] = field(default_factory=tuple)

    _rides: List[Ride] = field(init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rides = list(self.rides)
        self._logger = logging.getLogger(__name__)

    def list(self) -> Sequence[Ride]:
        with self._lock:
            return tuple(self._rides)

    def get(self, ride_id: str) -> Optional[Ride]:
        with self._lock:
            return next((r for r in self._rides if r.id == ride_id), None)

    def add(self, ride: Ride) -> Ride:
        with self._lock:
            self._rides.insert(0, ride)
        self._logger.info("Ride stored", extra={"ride_id": ride.id})
        return ride
