"""No-op remote intent provider for offline use and tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...domain.models import SearchIntent


@dataclass
class NullIntentProvider:
    """RemoteIntentProviderPort that never extracts anything."""

    def parse(self, query: str) -> Optional[SearchIntent]:
        return None
