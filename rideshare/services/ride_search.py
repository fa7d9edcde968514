"""Ride search service - query in, filtered listing out.

Wires the orchestrator, the ride filter and the ride repository
together for one-shot searches.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.models import FilterResult, SearchIntent
from ..ports.repository import RideRepositoryPort
from .ride_filter import RideFilter
from .search_orchestrator import SearchOrchestrator


@dataclass(frozen=True)
class SearchResponse:
    """Outcome of a search: the intent used and the rides kept.

    Attributes:
        query: The query as submitted
        intent: Resolved intent, or None when plain text matching applied
        result: Filtered rides and the tier that produced them
    """

    query: str
    intent: Optional[SearchIntent]
    result: FilterResult


@dataclass
class RideSearchService:
    """Main service for searching ride offers.

    Attributes:
        orchestrator: Resolves queries into intents
        repository: Source of the ride listing
        ride_filter: Applies intents and queries to the listing
    """

    orchestrator: SearchOrchestrator
    repository: RideRepositoryPort
    ride_filter: RideFilter = field(default_factory=RideFilter)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def filter_listing(
        self, intent: Optional[SearchIntent], query: Optional[str]
    ) -> FilterResult:
        """Filter the current listing without resolving a new intent."""
        return self.ride_filter.filter(self.repository.list(), intent, query)

    def search(self, query: Optional[str]) -> SearchResponse:
        """Resolve a query and filter the listing with the result.

        Args:
            query: Raw user input; blank returns the full listing.

        Returns:
            SearchResponse with intent and filtered rides.

        Raises:
            RepositoryError: If the ride listing cannot be loaded.
        """
        text = query or ""
        intent = self.orchestrator.resolve_intent(text)
        result = self.filter_listing(intent, text)

        self._logger.info(
            "Search complete",
            extra={
                "query_length": len(text),
                "intent": intent.to_dict() if intent else None,
                "tier": result.tier.name,
                "rides": result.count,
            },
        )
        return SearchResponse(query=text, intent=intent, result=result)
