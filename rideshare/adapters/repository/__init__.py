"""Repository adapters - Implementations of the RideRepositoryPort."""

from .csv_repository import CSVRideRepository
from .memory_repository import InMemoryRideRepository

__all__ = ["CSVRideRepository", "InMemoryRideRepository"]
