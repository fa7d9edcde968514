"""NLP ports - Abstractions for turning a query into a search intent.

Both the local heuristic parser and the optional remote provider share
the same shape: one query in, one intent (or None) out. This lets the
orchestrator treat them as interchangeable tiers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import SearchIntent


class IntentParserPort(Protocol):
    """Port for local, deterministic intent parsing.

    Implementations:
    - adapters/nlp/rule_based.py (RuleBasedIntentParser)
    """

    def parse(self, query: str) -> Optional[SearchIntent]:
        """Parse a query into a structured intent.

        Args:
            query: Raw user input.

        Returns:
            SearchIntent with at least one populated field, or None.
        """
        ...


class RemoteIntentProviderPort(Protocol):
    """Port for an external natural-language extraction service.

    Implementations:
    - adapters/nlp/remote_adapter.py (HTTPIntentProvider)
    - adapters/nlp/null_provider.py (NullIntentProvider) - offline/testing

    Implementations may raise on failure; the orchestrator treats any
    exception as "no result".
    """

    def parse(self, query: str) -> Optional[SearchIntent]:
        """Ask the provider for a structured intent.

        Args:
            query: Raw user input, passed through unchanged.

        Returns:
            SearchIntent, or None when nothing was extracted.

        Raises:
            IntentProviderError: On network, timeout or payload errors.
        """
        ...
