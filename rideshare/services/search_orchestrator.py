"""Search intent resolution with an explicit fallback chain.

The orchestrator tries an ordered list of strategies, each a function
``(query) -> SearchIntent | None``, and returns the first populated
intent. A failing strategy is logged and skipped, never propagated:

- remote provider configured: remote extraction, then a minimal
  ' to ' route guess;
- no remote provider: the local heuristic parser alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from ..domain.models import SearchIntent, populated
from ..nlp.text import split_route
from ..ports.nlp import IntentParserPort, RemoteIntentProviderPort

IntentStrategy = Callable[[str], Optional[SearchIntent]]


def guess_route_intent(query: str) -> Optional[SearchIntent]:
    """Best-effort origin/destination guess from a ' to ' split.

    Both halves are trimmed and lower-cased. No vehicle detection is
    attempted here.
    """
    halves = split_route(query.lower())
    if halves is None:
        return None
    head, tail = halves
    return populated(SearchIntent(origin=head, destination=tail))


@dataclass
class SearchOrchestrator:
    """Resolve a free-text query into a search intent.

    Attributes:
        local_parser: Heuristic parser used when no remote provider is set
        remote_provider: Optional external extraction service
    """

    local_parser: IntentParserPort
    remote_provider: Optional[RemoteIntentProviderPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def strategies(self) -> List[Tuple[str, IntentStrategy]]:
        """Return the ordered (name, strategy) chain for this configuration."""
        if self.remote_provider is not None:
            return [
                ("remote", self.remote_provider.parse),
                ("route_guess", guess_route_intent),
            ]
        return [("rule_based", self.local_parser.parse)]

    def resolve_intent(self, query: Optional[str]) -> Optional[SearchIntent]:
        """Resolve one query into one intent.

        Args:
            query: Raw user input.

        Returns:
            The first populated intent produced by the chain, or None
            when the caller should fall back to plain substring search.
        """
        if not query or not query.strip():
            return None

        for name, strategy in self.strategies():
            try:
                intent = populated(strategy(query))
            except Exception as e:
                self._logger.warning(
                    "Intent strategy failed, trying next tier",
                    extra={"strategy": name, "error": str(e)},
                )
                continue

            if intent is not None:
                self._logger.info(
                    "Search intent resolved",
                    extra={"strategy": name, "intent": intent.to_dict()},
                )
                return intent

            self._logger.debug("Intent strategy found nothing", extra={"strategy": name})

        return None
