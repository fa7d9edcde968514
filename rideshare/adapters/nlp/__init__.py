"""NLP adapters - Implementations of the intent ports.

Available implementations:
- RuleBasedIntentParser: Local heuristic parsing (always available)
- HTTPIntentProvider: Remote extraction service over HTTP
- NullIntentProvider: Remote provider that never answers
"""

from .null_provider import NullIntentProvider
from .remote_adapter import HTTPIntentProvider, RemoteIntentPayload
from .rule_based import RuleBasedIntentParser

__all__ = [
    "RuleBasedIntentParser",
    "HTTPIntentProvider",
    "RemoteIntentPayload",
    "NullIntentProvider",
]
