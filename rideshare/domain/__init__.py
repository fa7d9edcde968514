"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    IntentProviderError,
    RepositoryError,
    RideNotFoundError,
    RideShareError,
    RideValidationError,
)
from .models import (
    FilterResult,
    MatchTier,
    Ride,
    RideDraft,
    SearchIntent,
    User,
    populated,
)

__all__ = [
    # Models
    "SearchIntent",
    "Ride",
    "RideDraft",
    "User",
    "FilterResult",
    "MatchTier",
    "populated",
    # Errors
    "RideShareError",
    "IntentProviderError",
    "RepositoryError",
    "RideNotFoundError",
    "RideValidationError",
    "ConfigurationError",
]
