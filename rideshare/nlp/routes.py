"""Origin/destination extraction from a free-text query.

A route is read from text of the form ``[from] <origin> to <destination>``.
Only the first ' to ' separates the halves, so destinations such as
'Road to Mandalay' survive intact.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .text import remove_token, split_route

_FROM_PREFIX_RE = re.compile(r"^from ", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class ExtractedRoute:
    """Raw route halves. An empty string means 'unspecified'."""

    origin: str = ""
    destination: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.origin and not self.destination


def extract_route(query: str, vehicle_token: Optional[str] = None) -> ExtractedRoute:
    """Extract candidate origin and destination substrings.

    Parameters
    ----------
    query:
        The original query, casing preserved.
    vehicle_token:
        Detected vehicle keyword, removed from both halves so that
        'Bike to Office' does not yield 'Bike' as an origin.

    Returns
    -------
    ExtractedRoute
        Trimmed halves, either of which may be empty. An empty route is
        returned when the separator is absent or either half is blank
        before cleanup.
    """
    halves = split_route(query)
    if halves is None:
        return ExtractedRoute()

    head, tail = halves
    if not head.strip() or not tail.strip():
        return ExtractedRoute()

    head = _FROM_PREFIX_RE.sub("", head.strip(), count=1)

    if vehicle_token:
        head = remove_token(head, vehicle_token)
        tail = remove_token(tail, vehicle_token)

    return ExtractedRoute(origin=head.strip(), destination=tail.strip())
