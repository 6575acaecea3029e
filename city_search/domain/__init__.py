"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CitySearchError,
    ConfigurationError,
    GeocodingError,
    InvalidCoordinatesError,
    PlaceNotFoundError,
    RenderingError,
)
from .models import GeoLocation, OsmType, PlaceDetails, SearchResult

__all__ = [
    # Models
    "GeoLocation",
    "OsmType",
    "SearchResult",
    "PlaceDetails",
    # Errors
    "CitySearchError",
    "GeocodingError",
    "PlaceNotFoundError",
    "InvalidCoordinatesError",
    "ConfigurationError",
    "RenderingError",
]
