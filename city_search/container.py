"""Dependency injection container.

A small explicit registry: front-ends resolve the controller from it,
tests register fakes for the ports instead of the Nominatim and Folium
adapters.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        controller = container.resolve(CityLookupController)

        # Testing
        container = Container()
        container.register(GeocoderPort, lambda: FakeGeocoder())
        geocoder = container.resolve(GeocoderPort)

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
        """Create a container with the production bindings.

        Adapters are only instantiated when first resolved.
        """
        from .adapters.cache import InMemoryCache
        from .adapters.geocoding import NominatimGeocoderAdapter
        from .adapters.rendering import FoliumMapRenderer
        from .debounce import Debouncer
        from .ports.cache import CachePort
        from .ports.geocoding import GeocoderPort
        from .ports.rendering import MapRendererPort
        from .services import CityLookupController, CityLookupService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            CachePort,
            lambda: InMemoryCache(
                name="geocode",
                ttl_seconds=config.search.cache_ttl_seconds,
                max_size=config.search.cache_max_size,
            ),
        )
        container.register(
            GeocoderPort,
            lambda: NominatimGeocoderAdapter(
                config=config.geocoding,
                cache=container.resolve(CachePort),
                result_limit=config.search.result_limit,
            ),
        )
        container.register(MapRendererPort, lambda: FoliumMapRenderer())
        container.register(
            Debouncer,
            lambda: Debouncer(delay_seconds=config.search.debounce_seconds),
        )
        container.register(
            CityLookupService,
            lambda: CityLookupService(geocoder=container.resolve(GeocoderPort)),
        )
        container.register(
            CityLookupController,
            lambda: CityLookupController(service=container.resolve(CityLookupService)),
        )

        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container (created on first use)."""
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
