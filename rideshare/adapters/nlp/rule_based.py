"""Rule-based intent parser adapter.

This adapter exposes nlp/intent_parser.py through the IntentParserPort
interface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.models import SearchIntent
from ...nlp.intent_parser import parse_query


@dataclass
class RuleBasedIntentParser:
    """Heuristic parser: vehicle keywords plus ' to ' route splitting."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def parse(self, query: str) -> Optional[SearchIntent]:
        intent = parse_query(query)
        self._logger.debug(
            "Query parsed (rule-based)",
            extra={
                "query_length": len(query or ""),
                "intent": intent.to_dict() if intent else None,
            },
        )
        return intent
