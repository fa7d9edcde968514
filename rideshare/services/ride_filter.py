"""Ride filtering against a resolved intent or a raw query.

Tiers are evaluated in strict order:

1. intent: AND of the populated intent fields (authoritative, even
   when it keeps nothing);
2. strict route: raw query ' to ' split, origin AND destination, used
   only if it keeps at least one ride;
3. free text: raw query contained in origin, destination or vehicle;
4. identity: no intent and a blank query keep every ride.

Filtering is stable and never mutates the input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..domain.models import FilterResult, MatchTier, Ride, SearchIntent, populated
from ..nlp.text import contains, normalize, split_route


def matches_intent(ride: Ride, intent: SearchIntent) -> bool:
    """True when the ride satisfies every populated intent field."""
    return (
        contains(ride.origin, intent.origin)
        and contains(ride.destination, intent.destination)
        and contains(ride.vehicle_type, intent.vehicle_type)
    )


def matches_text(ride: Ride, needle: str) -> bool:
    """True when the needle occurs in origin, destination or vehicle type."""
    return (
        contains(ride.origin, needle)
        or contains(ride.destination, needle)
        or contains(ride.vehicle_type, needle)
    )


@dataclass
class RideFilter:
    """Apply search intents and raw queries to a ride listing."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def filter(
        self,
        rides: Iterable[Ride],
        intent: Optional[SearchIntent] = None,
        raw_query: Optional[str] = None,
    ) -> FilterResult:
        """Filter rides and report which tier decided the result.

        Args:
            rides: The listing to filter, in display order.
            intent: Resolved intent; an empty intent counts as None.
            raw_query: The user's free-text query.

        Returns:
            FilterResult with the kept rides in their original order.
        """
        listing = tuple(rides)
        intent = populated(intent)

        if intent is not None:
            kept = tuple(r for r in listing if matches_intent(r, intent))
            return self._done(FilterResult(kept, MatchTier.INTENT))

        query = normalize(raw_query)
        if not query:
            return self._done(FilterResult(listing, MatchTier.IDENTITY))

        halves = split_route(query)
        if halves is not None:
            head, tail = halves[0].strip(), halves[1].strip()
            if head and tail:
                strict = tuple(
                    r
                    for r in listing
                    if contains(r.origin, head) and contains(r.destination, tail)
                )
                if strict:
                    return self._done(FilterResult(strict, MatchTier.STRICT_ROUTE))

        kept = tuple(r for r in listing if matches_text(r, query))
        return self._done(FilterResult(kept, MatchTier.FREE_TEXT))

    def apply(
        self,
        rides: Iterable[Ride],
        intent: Optional[SearchIntent] = None,
        raw_query: Optional[str] = None,
    ) -> List[Ride]:
        """Filter rides and return them as a list."""
        return list(self.filter(rides, intent, raw_query).rides)

    def _done(self, result: FilterResult) -> FilterResult:
        self._logger.debug(
            "Rides filtered",
            extra={"tier": result.tier.name, "kept": result.count},
        )
        return result
