"""City lookup service.

Orchestrates the geocoder for the two lookup paths of the page:
name search then details, and coordinate then details.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ..domain.errors import PlaceNotFoundError
from ..domain.models import GeoLocation, PlaceDetails, SearchResult
from ..ports.geocoding import GeocoderPort


@dataclass
class CityLookupService:
    """Name and coordinate lookups on top of a GeocoderPort.

    Example:
        service = CityLookupService(geocoder=NominatimGeocoderAdapter())
        candidates = service.search("Đà Nẵng")
        details = service.details_for(candidates[0])
    """

    geocoder: GeocoderPort
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def search(self, text: str) -> List[SearchResult]:
        if not text or not text.strip():
            return []
        results = self.geocoder.search_cities(text)
        self._logger.info(
            "City search", extra={"query": text.strip(), "results": len(results)}
        )
        return results

    def details_for(self, result: SearchResult) -> PlaceDetails:
        return self.geocoder.place_details(result.osm_type, result.osm_id)

    def details_at(self, location: GeoLocation) -> PlaceDetails:
        """Reverse geocode ``location`` then fetch the place details.

        Raises:
            PlaceNotFoundError: If nothing is found at that position.
            GeocodingError: If the service could not be reached.
        """
        ref = self.geocoder.reverse(location)
        if ref is None:
            raise PlaceNotFoundError(
                "No place found at these coordinates",
                latitude=location.latitude,
                longitude=location.longitude,
            )
        osm_type, osm_id = ref
        return self.geocoder.place_details(osm_type, osm_id)
