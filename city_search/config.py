"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration
of the city search app: the Nominatim endpoint, debouncing and caching
of searches, the web UI and logging.

Configuration can be overridden via environment variables:
- CITY_GEO_USER_AGENT="my-app (me@example.org)"
- CITY_SEARCH_DEBOUNCE_SECONDS=0.3
- CITY_UI_PORT=8080
- CITY_LOG_STRUCTURED=true
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeocodingConfig(BaseSettings):
    """Nominatim endpoint configuration.

    Environment variables prefixed with CITY_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="CITY_GEO_")

    scheme: Literal["https", "http"] = "https"
    domain: str = "nominatim.openstreetmap.org"
    details_path: str = "/details"
    user_agent: str = "city-search"
    timeout_seconds: int = 10
    rate_limit_delay: float = 1.0
    max_retries: int = 2
    error_wait_seconds: float = 2.0
    reverse_zoom: int = Field(default=10, ge=0, le=18)
    language: Optional[str] = None

    @property
    def details_url(self) -> str:
        """Full URL of the place details endpoint."""
        return f"{self.scheme}://{self.domain}{self.details_path}"


class SearchConfig(BaseSettings):
    """Search behaviour configuration.

    Environment variables prefixed with CITY_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITY_SEARCH_")

    debounce_seconds: float = Field(default=0.5, ge=0)
    result_limit: Optional[int] = Field(default=None, ge=1, le=50)
    cache_ttl_seconds: Optional[float] = 300.0
    cache_max_size: Optional[int] = 256


class UIConfig(BaseSettings):
    """Web UI configuration.

    Environment variables prefixed with CITY_UI_.
    """

    model_config = SettingsConfigDict(env_prefix="CITY_UI_")

    host: str = "127.0.0.1"
    port: int = 7860
    share: bool = False
    map_height_px: int = 360


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CITY_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITY_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # one JSON object per line


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.geocoding.details_url)
        print(config.search.debounce_seconds)

    Environment variables prefixed with CITY_.
    """

    model_config = SettingsConfigDict(env_prefix="CITY_")

    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
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
