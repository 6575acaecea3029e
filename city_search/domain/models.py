"""Immutable domain models for the city search app.

All models are frozen dataclasses with slots. They carry no knowledge of
the Nominatim wire format; adapters are responsible for building them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional


class OsmType(Enum):
    """OpenStreetMap object type.

    The value is the single upper-case letter the details endpoint
    expects in its ``osmtype`` parameter.
    """

    NODE = "N"
    WAY = "W"
    RELATION = "R"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str) -> OsmType:
        """Parse ``"node"``/``"way"``/``"relation"`` or ``"N"``/``"W"``/``"R"``.

        Raises:
            ValueError: If the string is not a known OSM type.
        """
        text = (raw or "").strip()
        if not text:
            raise ValueError("OSM type is empty")
        letter = text[0].upper()
        for member in cls:
            if member.value == letter and (
                len(text) == 1 or text.lower() == member.name.lower()
            ):
                return member
        raise ValueError(f"Unknown OSM type: {raw!r}")


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class SearchResult:
    """A candidate place returned by a name search.

    Attributes:
        osm_id: OpenStreetMap object id
        osm_type: OpenStreetMap object type
        display_name: Full human-readable name with its hierarchy
        location: Coordinates of the candidate
    """

    osm_id: int
    osm_type: OsmType
    display_name: str
    location: GeoLocation


@dataclass(frozen=True, slots=True)
class PlaceDetails:
    """Enriched attributes of a single place.

    Attributes:
        osm_id: OpenStreetMap object id
        osm_type: OpenStreetMap object type
        localname: Name of the place in its local language
        display_name: Full name, used when no local name is known
        country_code: ISO 3166-1 alpha-2 code, as returned (lower case)
        address_tags: ``addr:*`` tags of the object
        admin_level: OSM administrative level
        place_type: OSM value of the main tag (``city``, ``town``...)
        category: OSM key of the main tag (``place``, ``boundary``...)
        importance: Nominatim importance score
        centroid: Centroid of the object geometry
        extra_tags: Additional tags (population, website, wikidata...)
    """

    osm_id: int
    osm_type: OsmType
    localname: str = ""
    display_name: str = ""
    country_code: str = ""
    address_tags: Mapping[str, str] = field(default_factory=dict)
    admin_level: Optional[int] = None
    place_type: str = ""
    category: str = ""
    importance: Optional[float] = None
    centroid: Optional[GeoLocation] = None
    extra_tags: Mapping[str, str] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return self.localname or self.display_name

    @property
    def state(self) -> Optional[str]:
        return self.address_tags.get("state")

    @property
    def country(self) -> Optional[str]:
        return self.address_tags.get("country")

    @property
    def population(self) -> Optional[str]:
        return self.extra_tags.get("population")

    @property
    def website(self) -> Optional[str]:
        return self.extra_tags.get("website")

    @property
    def wikidata(self) -> Optional[str]:
        return self.extra_tags.get("wikidata")

    @property
    def wikipedia(self) -> Optional[str]:
        return self.extra_tags.get("wikipedia")
