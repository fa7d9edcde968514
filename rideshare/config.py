"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for search, data and
logging settings. Every value can be overridden via environment
variables:
- RIDESHARE_SEARCH_STRATEGY=remote
- RIDESHARE_SEARCH_REMOTE_URL=https://nlp.example.com/intent
- RIDESHARE_DATA_DATA_DIR=/path/to/data
- RIDESHARE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchConfig(BaseSettings):
    """Search intent resolution configuration.

    Environment variables prefixed with RIDESHARE_SEARCH_.

    ``timeout_seconds`` is handed to requests, which applies it to the
    connection and to each socket read separately. It bounds a stalled
    service, not a server that keeps trickling bytes.
    """

    model_config = SettingsConfigDict(env_prefix="RIDESHARE_SEARCH_")

    strategy: Literal["rule_based", "remote"] = "rule_based"
    remote_url: Optional[str] = None
    remote_api_key: Optional[str] = None
    timeout_seconds: float = 5.0
    cache_ttl_seconds: Optional[float] = 300.0
    cache_max_size: int = 256

    @property
    def remote_enabled(self) -> bool:
        """True when the remote provider is selected and reachable."""
        return self.strategy == "remote" and bool(self.remote_url)


class RepositoryConfig(BaseSettings):
    """Ride data configuration.

    Environment variables prefixed with RIDESHARE_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="RIDESHARE_DATA_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    rides_file: str = "rides.csv"

    @property
    def rides_path(self) -> Path:
        """Full path to the rides CSV file."""
        return self.data_dir / self.rides_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RIDESHARE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RIDESHARE_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.search.strategy)
        print(config.repository.rides_path)

    Environment variables prefixed with RIDESHARE_.
    """

    model_config = SettingsConfigDict(env_prefix="RIDESHARE_")

    search: SearchConfig = Field(default_factory=SearchConfig)
    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
