"""Typed domain errors for the city search app.

All errors inherit from CitySearchError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CitySearchError(Exception):
    """Base error for the city search domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GeocodingError(CitySearchError):
    """The geocoding service could not answer.

    Attributes:
        query: The query or endpoint that failed
        status_code: HTTP status code, when one was received
        is_rate_limited: Whether the failure was due to rate limiting
    """

    query: str = ""
    status_code: Optional[int] = None
    is_rate_limited: bool = False


@dataclass
class PlaceNotFoundError(CitySearchError):
    """No place matches an OSM reference or a coordinate.

    Attributes:
        osm_ref: ``<type letter><id>`` of the missing object, if any
        latitude: Latitude of a reverse lookup that found nothing
        longitude: Longitude of a reverse lookup that found nothing
    """

    osm_ref: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass
class InvalidCoordinatesError(CitySearchError):
    """A latitude or longitude input was rejected.

    Attributes:
        field_name: ``"latitude"`` or ``"longitude"``
        raw_value: The text as typed by the user
    """

    field_name: str = ""
    raw_value: str = ""


@dataclass
class ConfigurationError(CitySearchError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""


@dataclass
class RenderingError(CitySearchError):
    """Map rendering failed.

    Attributes:
        renderer_type: Type of renderer that failed
    """

    renderer_type: str = ""
