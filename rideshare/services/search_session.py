"""Interactive search state behind a search bar.

A session keeps the text being typed, the structured intent of the
last submitted query and a ``processing`` flag for the waiting
indicator. Front-ends may call it from several worker threads: the
most recent action wins and late answers from superseded submissions
are dropped.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..domain.models import Ride, SearchIntent
from .ride_search import RideSearchService


@dataclass
class SearchSession:
    """Stateful wrapper around RideSearchService for one user.

    Attributes:
        service: The search service used for resolution and filtering
    """

    service: RideSearchService

    _query: str = field(default="", repr=False)
    _intent: Optional[SearchIntent] = field(default=None, repr=False)
    _processing: bool = field(default=False, repr=False)
    _generation: int = field(default=0, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def query(self) -> str:
        return self._query

    @property
    def intent(self) -> Optional[SearchIntent]:
        return self._intent

    @property
    def processing(self) -> bool:
        return self._processing

    def update_query(self, text: str) -> None:
        """Record typed text and drop the structured intent.

        Typing invalidates any submission still in flight.
        """
        with self._lock:
            self._query = text or ""
            self._intent = None
            self._processing = False
            self._generation += 1

    def submit(self, query: Optional[str] = None) -> Optional[SearchIntent]:
        """Resolve the current query into a structured intent.

        Args:
            query: Optional text replacing the current query first.

        Returns:
            The intent now active, or None when the query is blank,
            nothing structured was found, or a newer action superseded
            this submission.
        """
        with self._lock:
            if query is not None:
                self._query = query
            text = self._query
            if not text.strip():
                return None
            self._generation += 1
            generation = self._generation
            self._processing = True
            self._intent = None

        intent = self.service.orchestrator.resolve_intent(text)

        with self._lock:
            if generation != self._generation:
                self._logger.debug(
                    "Discarding superseded search result",
                    extra={"generation": generation, "current": self._generation},
                )
                return None
            self._intent = intent
            self._processing = False
            return intent

    def clear(self) -> None:
        """Reset query and filters, showing the full listing again."""
        self.update_query("")

    def results(self) -> List[Ride]:
        """Return the listing filtered by the current intent and query."""
        with self._lock:
            intent, text = self._intent, self._query
        return list(self.service.filter_listing(intent, text).rides)

    def active_filters(self) -> List[Tuple[str, str]]:
        """Return (label, value) pairs for the populated intent fields."""
        intent = self._intent
        if intent is None:
            return []
        labels = (
            ("From", intent.origin),
            ("To", intent.destination),
            ("Vehicle", intent.vehicle_type),
        )
        return [(label, value) for label, value in labels if value]
