"""Geocoding port - Abstraction over the place lookup service.

This protocol defines the contract for geocoding services, allowing
the Nominatim adapter to be swapped for a fake in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol, Tuple

if TYPE_CHECKING:
    from ..domain.models import GeoLocation, OsmType, PlaceDetails, SearchResult


class GeocoderPort(Protocol):
    """Port for geocoding services.

    Implementation: adapters/geocoding/nominatim_adapter.py
    """

    def search_cities(self, text: str) -> List[SearchResult]:
        """Search candidate places whose city name matches ``text``.

        Args:
            text: Free text typed by the user (e.g., "Hà Nội", "Paris").

        Returns:
            Candidates in the order ranked by the service. Empty for
            blank text.

        Raises:
            GeocodingError: If the service could not be reached.
        """
        ...

    def reverse(self, location: GeoLocation) -> Optional[Tuple[OsmType, int]]:
        """Find the OSM object covering a coordinate.

        Args:
            location: GPS coordinates to look up.

        Returns:
            The ``(osm_type, osm_id)`` reference, or None if nothing
            was found at that position.

        Raises:
            GeocodingError: If the service could not be reached.
        """
        ...

    def place_details(self, osm_type: OsmType, osm_id: int) -> PlaceDetails:
        """Fetch the enriched attributes of one OSM object.

        Raises:
            PlaceNotFoundError: If the object is unknown to the service.
            GeocodingError: If the service could not be reached.
        """
        ...
