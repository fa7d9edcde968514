"""Local heuristic intent parsing for ride search queries.

This is the always-available tier: pure, deterministic and free of
I/O. It combines vehicle keyword detection with route extraction.

Example
-------
    >>> parse_query("Bike to Cyber Hub")
    SearchIntent(origin=None, destination='Cyber Hub', vehicle_type='Bike')
    >>> parse_query("Delhi to Gurgaon")
    SearchIntent(origin='Delhi', destination='Gurgaon', vehicle_type=None)
    >>> parse_query("hello world") is None
    True
"""

from __future__ import annotations

from typing import Optional

from ..domain.models import SearchIntent, populated
from .routes import extract_route
from .text import has_route_separator
from .vehicles import canonical_vehicle, find_vehicle_token


def parse_query(query: Optional[str]) -> Optional[SearchIntent]:
    """Turn a free-text query into a structured search intent.

    Parameters
    ----------
    query:
        Raw user input. Leading and trailing whitespace is ignored.

    Returns
    -------
    Optional[SearchIntent]
        The intent, or None when neither a route separator nor a
        vehicle keyword was found (the caller should fall back to
        plain substring search).
    """
    if not query or not query.strip():
        return None

    text = query.strip()
    token = find_vehicle_token(text)

    if not has_route_separator(text) and token is None:
        return None

    route = extract_route(text, token)
    return populated(
        SearchIntent(
            origin=route.origin,
            destination=route.destination,
            vehicle_type=canonical_vehicle(token) if token else None,
        )
    )
