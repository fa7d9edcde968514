"""HTTP remote intent provider adapter.

Sends the raw query to an external natural-language extraction service
and validates whatever comes back. The service is expected to answer
with a JSON object such as::

    {"from": "Delhi", "to": "Gurgaon", "vehicleType": "SUV"}

or the same object wrapped in ``{"intent": {...}}``. Unknown keys are
ignored and missing or non-string fields count as absent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...config import SearchConfig, get_config
from ...domain.errors import ConfigurationError, IntentProviderError
from ...domain.models import SearchIntent, populated
from ...nlp.text import normalize
from ...ports.cache import CachePort
from ..cache.null_cache import NullCache


class RemoteIntentPayload(BaseModel):
    """Validated shape of the provider's answer."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    origin: Optional[str] = Field(default=None, alias="from")
    destination: Optional[str] = Field(default=None, alias="to")
    vehicle_type: Optional[str] = Field(default=None, alias="vehicleType")

    @field_validator("origin", "destination", "vehicle_type", mode="before")
    @classmethod
    def _strings_only(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    def to_intent(self) -> Optional[SearchIntent]:
        return populated(
            SearchIntent(
                origin=self.origin,
                destination=self.destination,
                vehicle_type=self.vehicle_type,
            )
        )


@dataclass
class HTTPIntentProvider:
    """RemoteIntentProviderPort backed by a JSON-over-HTTP service.

    Attributes:
        config: Search configuration (URL, API key, timeout)
        cache: Cache of successful answers keyed by normalized query;
            the container injects an InMemoryCache, the default stores nothing
        session: HTTP session used for every call
    """

    config: SearchConfig = field(default_factory=lambda: get_config().search)
    cache: CachePort[SearchIntent] = field(default_factory=NullCache)
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if not self.config.remote_url:
            raise ConfigurationError(
                "Remote intent provider requires a URL",
                setting_name="RIDESHARE_SEARCH_REMOTE_URL",
            )

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.config.remote_api_key:
            headers["Authorization"] = f"Bearer {self.config.remote_api_key}"
        return headers

    def _request(self, query: str) -> Any:
        """POST the query and return the decoded JSON body.

        Raises:
            IntentProviderError: On timeout, transport, HTTP or JSON errors.
        """
        try:
            response = self.session.post(
                self.config.remote_url,  # type: ignore[arg-type]
                json={"query": query},
                headers=self._headers(),
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
        except requests.Timeout as e:
            raise IntentProviderError(
                "Remote intent provider timed out",
                provider=type(self).__name__,
                is_timeout=True,
                cause=e,
            )
        except requests.RequestException as e:
            raise IntentProviderError(
                "Remote intent provider request failed",
                provider=type(self).__name__,
                cause=e,
            )

        try:
            return response.json()
        except ValueError as e:
            raise IntentProviderError(
                "Remote intent provider returned non-JSON payload",
                provider=type(self).__name__,
                cause=e,
            )

    def _decode(self, body: Any) -> Optional[SearchIntent]:
        if isinstance(body, dict) and isinstance(body.get("intent"), dict):
            body = body["intent"]
        if not isinstance(body, dict):
            raise IntentProviderError(
                f"Unexpected payload type: {type(body).__name__}",
                provider=type(self).__name__,
            )
        try:
            return RemoteIntentPayload.model_validate(body).to_intent()
        except ValidationError as e:
            raise IntentProviderError(
                "Remote intent payload failed validation",
                provider=type(self).__name__,
                cause=e,
            )

    def parse(self, query: str) -> Optional[SearchIntent]:
        """Ask the remote service for an intent.

        Args:
            query: Raw user input.

        Returns:
            SearchIntent with at least one populated field, or None.

        Raises:
            IntentProviderError: If the service cannot be reached or
                answers with something that is not a JSON object.
        """
        key = normalize(query)
        if not key:
            return None

        def fetch() -> Optional[SearchIntent]:
            intent = self._decode(self._request(query))
            self._logger.debug(
                "Remote intent received",
                extra={"query": key, "intent": intent.to_dict() if intent else None},
            )
            return intent

        return self.cache.get_or_compute(key, fetch)
