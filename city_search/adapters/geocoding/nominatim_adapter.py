"""Nominatim geocoder adapter.

Talks to the three Nominatim endpoints the page needs:
- ``/search`` through geopy, as a structured ``city=`` query
- ``/reverse`` through geopy, at city zoom level
- ``/details`` through a plain requests session, since geopy does not
  wrap it

All outbound calls share one geopy ``RateLimiter`` so the public service
sees at most one request per ``rate_limit_delay`` seconds, and answers
are kept in an injectable cache.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Tuple

import requests
from geopy.exc import GeocoderRateLimited, GeocoderServiceError
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from ...config import GeocodingConfig, get_config
from ...domain.errors import ConfigurationError, GeocodingError, PlaceNotFoundError
from ...domain.models import GeoLocation, OsmType, PlaceDetails, SearchResult
from ...monitoring import log_timing
from ...ports.cache import CachePort
from ..cache.memory_cache import InMemoryCache


def _dispatch(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    return fn(*args, **kwargs)


def _as_tags(value: Any) -> dict[str, str]:
    # Nominatim serialises an empty tag set as ``[]`` rather than ``{}``.
    if not isinstance(value, Mapping):
        return {}
    return {str(k): str(v) for k, v in value.items()}


def _as_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _as_float(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def parse_osm_ref(raw: Mapping[str, Any]) -> Optional[Tuple[OsmType, int]]:
    """Extract ``(osm_type, osm_id)`` from a search or reverse item."""
    osm_id = _as_int(raw.get("osm_id"))
    if osm_id is None:
        return None
    try:
        osm_type = OsmType.parse(str(raw.get("osm_type") or ""))
    except ValueError:
        return None
    return osm_type, osm_id


def parse_search_item(raw: Mapping[str, Any]) -> Optional[SearchResult]:
    """Build a SearchResult from one ``/search`` item, or None if unusable."""
    ref = parse_osm_ref(raw)
    lat = _as_float(raw.get("lat"))
    lon = _as_float(raw.get("lon"))
    if ref is None or lat is None or lon is None:
        return None
    try:
        location = GeoLocation(latitude=lat, longitude=lon)
    except ValueError:
        return None
    return SearchResult(
        osm_id=ref[1],
        osm_type=ref[0],
        display_name=str(raw.get("display_name") or ""),
        location=location,
    )


def parse_details(raw: Mapping[str, Any]) -> PlaceDetails:
    """Build PlaceDetails from a ``/details?format=json`` document.

    Raises:
        ValueError: If the document carries no usable OSM reference.
    """
    ref = parse_osm_ref(raw)
    if ref is None:
        raise ValueError("details document has no osm_type/osm_id")

    centroid: Optional[GeoLocation] = None
    geometry = raw.get("centroid")
    if isinstance(geometry, Mapping):
        coordinates = geometry.get("coordinates") or []
        if len(coordinates) >= 2:
            lon, lat = _as_float(coordinates[0]), _as_float(coordinates[1])
            if lat is not None and lon is not None:
                try:
                    centroid = GeoLocation(latitude=lat, longitude=lon)
                except ValueError:
                    centroid = None

    names = _as_tags(raw.get("names"))
    return PlaceDetails(
        osm_id=ref[1],
        osm_type=ref[0],
        localname=str(raw.get("localname") or ""),
        display_name=str(raw.get("display_name") or names.get("name", "")),
        country_code=str(raw.get("country_code") or ""),
        address_tags=_as_tags(raw.get("addresstags")),
        admin_level=_as_int(raw.get("admin_level")),
        place_type=str(raw.get("type") or ""),
        category=str(raw.get("category") or ""),
        importance=_as_float(raw.get("importance")),
        centroid=centroid,
        extra_tags=_as_tags(raw.get("extratags")),
    )


@dataclass
class NominatimGeocoderAdapter:
    """Nominatim geocoder adapter with caching and rate limiting.

    This adapter implements GeocoderPort using OpenStreetMap's Nominatim
    service.

    Attributes:
        config: Geocoding configuration
        cache: Cache for geocoding answers
        result_limit: Maximum number of search candidates (None = service default)
    """

    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)
    cache: CachePort[Any] = field(
        default_factory=lambda: InMemoryCache(name="geocode", ttl_seconds=300.0)
    )
    result_limit: Optional[int] = None

    _geolocator: Optional[Nominatim] = field(default=None, repr=False)
    _session: Optional[requests.Session] = field(default=None, repr=False)
    _call: Optional[Callable[..., Any]] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if not self.config.user_agent.strip():
            raise ConfigurationError(
                "Nominatim requires an identifying User-Agent",
                setting_name="CITY_GEO_USER_AGENT",
            )

    def _get_geolocator(self) -> Nominatim:
        if self._geolocator is None:
            self._logger.debug(
                "Initializing Nominatim geocoder",
                extra={
                    "domain": self.config.domain,
                    "user_agent": self.config.user_agent,
                    "timeout": self.config.timeout_seconds,
                },
            )
            self._geolocator = Nominatim(
                user_agent=self.config.user_agent,
                timeout=self.config.timeout_seconds,
                domain=self.config.domain,
                scheme=self.config.scheme,
            )
        return self._geolocator

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"User-Agent": self.config.user_agent})
        return self._session

    def _rate_limited(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        if self._call is None:
            self._call = RateLimiter(
                _dispatch,
                min_delay_seconds=self.config.rate_limit_delay,
                max_retries=self.config.max_retries,
                error_wait_seconds=self.config.error_wait_seconds,
                swallow_exceptions=False,
            )
        return self._call(fn, *args, **kwargs)

    def _language(self) -> Any:
        # geopy uses False for "no preference".
        return self.config.language or False

    def search_cities(self, text: str) -> List[SearchResult]:
        """Search candidate places by city name.

        Args:
            text: Free text typed by the user.

        Returns:
            Usable candidates in service order; empty for blank text.

        Raises:
            GeocodingError: If Nominatim could not be reached.
        """
        query = (text or "").strip()
        if not query:
            return []

        cache_key = f"search:{query.lower()}:{self.result_limit}:{self.config.language}"
        return self.cache.get_or_compute(cache_key, lambda: self._search(query))

    def _search(self, query: str) -> List[SearchResult]:
        geolocator = self._get_geolocator()
        try:
            with log_timing(self._logger, "Nominatim search", query=query) as timing:
                locations = self._rate_limited(
                    geolocator.geocode,
                    {"city": query},
                    exactly_one=False,
                    limit=self.result_limit,
                    language=self._language(),
                )
                timing["results"] = len(locations or [])
        except GeocoderServiceError as e:
            raise GeocodingError(
                "City search failed",
                cause=e,
                query=query,
                is_rate_limited=isinstance(e, GeocoderRateLimited),
            )

        results: List[SearchResult] = []
        for location in locations or []:
            result = parse_search_item(location.raw)
            if result is None:
                self._logger.debug(
                    "Skipping unusable search item",
                    extra={"query": query, "item": location.raw},
                )
                continue
            results.append(result)
        return results

    def reverse(self, location: GeoLocation) -> Optional[Tuple[OsmType, int]]:
        """Reverse geocode a coordinate at city zoom level.

        Args:
            location: GPS coordinates to look up.

        Returns:
            The OSM reference found there, or None.

        Raises:
            GeocodingError: If Nominatim could not be reached.
        """
        cache_key = (
            f"reverse:{location.latitude:.6f},{location.longitude:.6f}"
            f":{self.config.reverse_zoom}"
        )
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        geolocator = self._get_geolocator()
        point = f"{location.latitude}, {location.longitude}"
        try:
            with log_timing(self._logger, "Nominatim reverse", point=point):
                found = self._rate_limited(
                    geolocator.reverse,
                    point,
                    exactly_one=True,
                    zoom=self.config.reverse_zoom,
                    language=self._language(),
                )
        except GeocoderServiceError as e:
            raise GeocodingError(
                "Reverse geocoding failed",
                cause=e,
                query=point,
                is_rate_limited=isinstance(e, GeocoderRateLimited),
            )

        if found is None:
            self._logger.debug("Reverse geocode found nothing", extra={"point": point})
            return None

        ref = parse_osm_ref(found.raw)
        if ref is None:
            self._logger.debug(
                "Reverse geocode answer has no OSM reference",
                extra={"point": point, "item": found.raw},
            )
            return None

        self.cache.set(cache_key, ref)
        return ref

    def place_details(self, osm_type: OsmType, osm_id: int) -> PlaceDetails:
        """Fetch ``/details`` for one OSM object.

        Raises:
            PlaceNotFoundError: If Nominatim does not know the object.
            GeocodingError: On transport errors or malformed answers.
        """
        osm_ref = f"{osm_type.code}{osm_id}"
        return self.cache.get_or_compute(
            f"details:{osm_ref}:{self.config.language}",
            lambda: self._details(osm_type, osm_id, osm_ref),
        )

    def _details(self, osm_type: OsmType, osm_id: int, osm_ref: str) -> PlaceDetails:
        params: dict[str, Any] = {
            "osmtype": osm_type.code,
            "osmid": osm_id,
            "format": "json",
        }
        if self.config.language:
            params["accept-language"] = self.config.language

        session = self._get_session()
        try:
            with log_timing(self._logger, "Nominatim details", osm_ref=osm_ref):
                response = self._rate_limited(
                    session.get,
                    self.config.details_url,
                    params=params,
                    timeout=self.config.timeout_seconds,
                )
        except requests.RequestException as e:
            raise GeocodingError("Place details request failed", cause=e, query=osm_ref)

        if response.status_code == 404:
            raise PlaceNotFoundError("No place with that OSM id", osm_ref=osm_ref)
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise GeocodingError(
                "Place details request failed",
                cause=e,
                query=osm_ref,
                status_code=response.status_code,
                is_rate_limited=response.status_code == 429,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GeocodingError(
                "Place details answer is not JSON", cause=e, query=osm_ref
            )

        if not isinstance(data, Mapping):
            raise GeocodingError("Unexpected place details answer", query=osm_ref)
        if "error" in data:
            raise PlaceNotFoundError(
                f"Nominatim reported an error: {data['error']}", osm_ref=osm_ref
            )

        try:
            return parse_details(data)
        except ValueError as e:
            raise GeocodingError(
                "Unexpected place details answer", cause=e, query=osm_ref
            )
