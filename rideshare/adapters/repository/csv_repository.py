"""CSV ride repository adapter.

Loads the ride listing from a CSV file once and keeps it in memory.
Rides posted afterwards are held in memory only.

Expected header::

    id,host_id,name,car,vehicle_type,price,seats_left,avatar,eta,badge,from,to,date,time,rating
"""

from __future__ import annotations

import csv
import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ...config import RepositoryConfig, get_config
from ...domain.errors import RepositoryError
from ...domain.models import Ride


def _to_float(raw: str, default: float) -> float:
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


def _to_int(raw: str, default: int) -> int:
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


@dataclass
class CSVRideRepository:
    """RideRepositoryPort reading rides from a CSV file.

    Attributes:
        config: Repository configuration (data directory, file name)
    """

    config: RepositoryConfig = field(default_factory=lambda: get_config().repository)

    _rides: Optional[List[Ride]] = field(default=None, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _row_to_ride(self, row: Dict[str, str]) -> Optional[Ride]:
        def col(name: str) -> str:
            return (row.get(name) or "").strip()

        ride_id, origin, destination = col("id"), col("from"), col("to")
        if not ride_id or not origin or not destination:
            return None

        return Ride(
            id=ride_id,
            host_id=col("host_id"),
            name=col("name"),
            car=col("car"),
            vehicle_type=col("vehicle_type"),
            price=_to_float(col("price"), 0.0),
            seats_left=_to_int(col("seats_left"), 1),
            avatar=col("avatar"),
            eta=col("eta"),
            badge=col("badge") or None,
            origin=origin,
            destination=destination,
            date=col("date"),
            time=col("time"),
            rating=_to_float(col("rating"), 5.0),
        )

    def _load(self) -> List[Ride]:
        with self._lock:
            if self._rides is None:
                self._rides = self._read_file()
            return self._rides

    def _read_file(self) -> List[Ride]:
        path = self.config.rides_path
        self._logger.debug("Loading rides", extra={"path": str(path)})

        rides: List[Ride] = []
        skipped = 0
        try:
            with path.open(encoding="utf-8", newline="") as f:
                for row in csv.DictReader(f):
                    ride = self._row_to_ride(row)
                    if ride is None:
                        skipped += 1
                        continue
                    rides.append(ride)
        except OSError as e:
            raise RepositoryError(
                f"Failed to load rides: {e}",
                file_path=str(path),
                cause=e,
            )

        self._logger.info("Rides loaded", extra={"rides": len(rides), "skipped": skipped})
        return rides

    def list(self) -> Sequence[Ride]:
        """Return every ride in listing order.

        Raises:
            RepositoryError: If the CSV file cannot be read.
        """
        with self._lock:
            return tuple(self._load())

    def get(self, ride_id: str) -> Optional[Ride]:
        with self._lock:
            return next((r for r in self._load() if r.id == ride_id), None)

    def add(self, ride: Ride) -> Ride:
        with self._lock:
            self._load().insert(0, ride)
        self._logger.info("Ride stored (memory only)", extra={"ride_id": ride.id})
        return ride

    def clear_cache(self) -> None:
        """Forget loaded rides so the next call re-reads the file."""
        with self._lock:
            self._rides = None
