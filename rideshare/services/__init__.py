"""Services layer - Application orchestration.

Available services:
- SearchOrchestrator: Tiered query-to-intent resolution
- RideFilter: Tiered matching of rides against an intent or query
- RideSearchService: One-shot search over the ride repository
- SearchSession: Stateful search bar with last-action-wins semantics
- RideListingService: Posting and lookup of ride offers
"""

from .ride_filter import RideFilter
from .ride_listing import RideListingService
from .ride_search import RideSearchService, SearchResponse
from .search_orchestrator import SearchOrchestrator, guess_route_intent
from .search_session import SearchSession

__all__ = [
    "SearchOrchestrator",
    "guess_route_intent",
    "RideFilter",
    "RideSearchService",
    "SearchResponse",
    "SearchSession",
    "RideListingService",
]
