"""Typed domain errors for ride search and listing.

All errors inherit from RideShareError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RideShareError(Exception):
    """Base error for the ride-sharing domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class IntentProviderError(RideShareError):
    """The remote intent provider could not produce an answer.

    Attributes:
        provider: Name of the provider that failed
        is_timeout: Whether the failure was a timeout
    """

    provider: str = ""
    is_timeout: bool = False


@dataclass
class RepositoryError(RideShareError):
    """Ride data could not be loaded or stored.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class RideNotFoundError(RideShareError):
    """No ride with the requested identifier.

    Attributes:
        ride_id: The identifier that was not found
    """

    ride_id: str = ""


@dataclass
class RideValidationError(RideShareError):
    """A ride draft is missing required fields.

    Attributes:
        missing_fields: Names of the fields that must be filled in
    """

    missing_fields: tuple[str, ...] = ()


@dataclass
class ConfigurationError(RideShareError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
