"""Repository port - Read and append access to ride listings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Ride


class RideRepositoryPort(Protocol):
    """Port for the ride collection.

    Implementations:
    - adapters/repository/memory_repository.py (InMemoryRideRepository)
    - adapters/repository/csv_repository.py (CSVRideRepository)

    The search core only calls list(); posting a ride uses add().
    """

    def list(self) -> Sequence[Ride]:
        """Return every ride, newest first.

        Returns:
            The full ride collection. Callers must not mutate it.
        """
        ...

    def get(self, ride_id: str) -> Optional[Ride]:
        """Look up a ride by identifier.

        Args:
            ride_id: The ride identifier.

        Returns:
            The ride, or None if not found.
        """
        ...

    def add(self, ride: Ride) -> Ride:
        """Store a new ride at the front of the listing.

        Args:
            ride: The ride to store.

        Returns:
            The stored ride.
        """
        ...
