"""Case-insensitive text helpers shared by every search tier.

All substring comparisons in the parser, the orchestrator and the
ride filter go through these functions so that each tier lower-cases
and trims in exactly the same way.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

ROUTE_SEPARATOR = " to "

_SEPARATOR_RE = re.compile(re.escape(ROUTE_SEPARATOR), re.IGNORECASE)


def normalize(text: Optional[str]) -> str:
    """Trim and lower-case a string; None becomes ''."""
    if not text:
        return ""
    return text.strip().lower()


def contains(haystack: Optional[str], needle: Optional[str]) -> bool:
    """Case-insensitive substring test.

    An empty needle matches anything, mirroring how an absent filter
    imposes no constraint.
    """
    needle_norm = normalize(needle)
    if not needle_norm:
        return True
    return needle_norm in normalize(haystack)


def has_route_separator(text: Optional[str]) -> bool:
    """Check whether the text contains ' to ' in any casing."""
    if not text:
        return False
    return _SEPARATOR_RE.search(text) is not None


def split_route(text: str) -> Optional[Tuple[str, str]]:
    """Split on the first case-insensitive ' to '.

    The halves are returned as they appear in the text (untrimmed,
    original casing).

    Returns:
        (head, tail), or None when the separator is absent.
    """
    parts = _SEPARATOR_RE.split(text, maxsplit=1)
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def remove_token(text: str, token: str) -> str:
    """Remove every case-insensitive occurrence of ``token``."""
    if not token:
        return text
    return re.sub(re.escape(token), "", text, flags=re.IGNORECASE)
