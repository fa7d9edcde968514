"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the search core and external
adapters. They enable dependency injection and keep the parsing and
filtering logic testable without network or storage.
"""

from .cache import CachePort
from .nlp import IntentParserPort, RemoteIntentProviderPort
from .repository import RideRepositoryPort

__all__ = [
    # NLP
    "IntentParserPort",
    "RemoteIntentProviderPort",
    # Storage
    "RideRepositoryPort",
    # Cache
    "CachePort",
]
