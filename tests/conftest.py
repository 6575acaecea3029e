"""Shared fixtures: Nominatim payloads and an in-memory geocoder."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

import pytest

from city_search.adapters.geocoding.nominatim_adapter import parse_details
from city_search.domain.errors import GeocodingError, PlaceNotFoundError
from city_search.domain.models import GeoLocation, OsmType, PlaceDetails, SearchResult

HANOI_DETAILS = {
    "place_id": 282614347,
    "osm_type": "R",
    "osm_id": 1903516,
    "category": "boundary",
    "type": "administrative",
    "admin_level": 4,
    "localname": "Hà Nội",
    "names": {"name": "Hà Nội", "name:en": "Hanoi"},
    "addresstags": {"state": "Hà Nội", "country": "Việt Nam"},
    "country_code": "vn",
    "importance": 0.7283,
    "extratags": {
        "population": "8053663",
        "website": "https://hanoi.gov.vn",
        "wikidata": "Q1858",
        "wikipedia": "vi:Hà Nội",
    },
    "centroid": {"type": "Point", "coordinates": [105.8341598, 21.0277644]},
}

HANOI_SEARCH_ITEM = {
    "place_id": 282614347,
    "osm_type": "relation",
    "osm_id": 1903516,
    "lat": "21.0283334",
    "lon": "105.854041",
    "display_name": "Hà Nội, Việt Nam",
}


class FakeGeocoder:
    """GeocoderPort double recording every call."""

    def __init__(self) -> None:
        self.results: Dict[str, List[SearchResult]] = {}
        self.places: Dict[Tuple[OsmType, int], PlaceDetails] = {}
        self.reverse_refs: Dict[Tuple[float, float], Tuple[OsmType, int]] = {}
        self.fail_with: Optional[Exception] = None
        self.calls: List[tuple] = []
        # Runs while a search request is "on the wire".
        self.during_search: Optional[Callable[[str], None]] = None

    def search_cities(self, text: str) -> List[SearchResult]:
        self.calls.append(("search", text))
        if self.during_search is not None:
            hook, self.during_search = self.during_search, None
            hook(text)
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.results.get(text.strip(), []))

    def reverse(self, location: GeoLocation) -> Optional[Tuple[OsmType, int]]:
        self.calls.append(("reverse", location.latitude, location.longitude))
        if self.fail_with is not None:
            raise self.fail_with
        return self.reverse_refs.get((location.latitude, location.longitude))

    def place_details(self, osm_type: OsmType, osm_id: int) -> PlaceDetails:
        self.calls.append(("details", osm_type, osm_id))
        if self.fail_with is not None:
            raise self.fail_with
        try:
            return self.places[(osm_type, osm_id)]
        except KeyError:
            raise PlaceNotFoundError("unknown", osm_ref=f"{osm_type.code}{osm_id}")


@pytest.fixture
def hanoi_details() -> PlaceDetails:
    return parse_details(HANOI_DETAILS)


@pytest.fixture
def hanoi_result() -> SearchResult:
    return SearchResult(
        osm_id=1903516,
        osm_type=OsmType.RELATION,
        display_name="Hà Nội, Việt Nam",
        location=GeoLocation(latitude=21.0283334, longitude=105.854041),
    )


@pytest.fixture
def fake_geocoder(hanoi_result, hanoi_details) -> FakeGeocoder:
    geocoder = FakeGeocoder()
    geocoder.results["Hà Nội"] = [hanoi_result]
    geocoder.places[(OsmType.RELATION, 1903516)] = hanoi_details
    geocoder.reverse_refs[(21.0278, 105.8342)] = (OsmType.RELATION, 1903516)
    return geocoder


@pytest.fixture
def service_error() -> GeocodingError:
    return GeocodingError("Nominatim unavailable", query="test")
