"""Dependency injection container.

A small explicit container: ports are registered with factories and
resolved on demand. Singletons are created lazily and guarded by a
lock, so a container can be shared by a threaded front-end.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar

from .config import AppConfig, get_config

T = TypeVar("T")


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        search = container.resolve(RideSearchService)

        # Testing
        container = Container()
        container.register(RideRepositoryPort, lambda: InMemoryRideRepository(rides))

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        The remote intent provider is wired only when the configuration
        selects the remote strategy and provides a URL; otherwise the
        orchestrator runs the local heuristic parser alone.
        """
        from .adapters.cache import InMemoryCache
        from .adapters.nlp import HTTPIntentProvider, RuleBasedIntentParser
        from .adapters.repository import CSVRideRepository
        from .ports.cache import CachePort
        from .ports.nlp import IntentParserPort, RemoteIntentProviderPort
        from .ports.repository import RideRepositoryPort
        from .services import (
            RideFilter,
            RideListingService,
            RideSearchService,
            SearchOrchestrator,
        )

        config = config or get_config()
        container = cls(config=config)

        container.register(
            CachePort,
            lambda: InMemoryCache(
                name="remote_intent",
                default_ttl_seconds=config.search.cache_ttl_seconds,
                max_size=config.search.cache_max_size,
            ),
        )

        # NLP
        container.register(IntentParserPort, lambda: RuleBasedIntentParser())

        def create_remote_provider() -> Optional[RemoteIntentProviderPort]:
            if not config.search.remote_enabled:
                return None
            return HTTPIntentProvider(
                config=config.search,
                cache=container.resolve(CachePort),
            )

        container.register(RemoteIntentProviderPort, create_remote_provider)

        container.register(
            SearchOrchestrator,
            lambda: SearchOrchestrator(
                local_parser=container.resolve(IntentParserPort),
                remote_provider=container.resolve(RemoteIntentProviderPort),
            ),
        )

        # Storage
        container.register(
            RideRepositoryPort,
            lambda: CSVRideRepository(config.repository),
        )

        # Services
        container.register(RideFilter, lambda: RideFilter())
        container.register(
            RideSearchService,
            lambda: RideSearchService(
                orchestrator=container.resolve(SearchOrchestrator),
                repository=container.resolve(RideRepositoryPort),
                ride_filter=container.resolve(RideFilter),
            ),
        )
        container.register(
            RideListingService,
            lambda: RideListingService(repository=container.resolve(RideRepositoryPort)),
        )

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container."""
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
