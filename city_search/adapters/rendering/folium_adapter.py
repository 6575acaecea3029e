"""Folium map renderer adapter.

Renders the selected place as a small interactive map, returned as a
standalone HTML document the page embeds in an iframe.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field

import folium

from ...domain.errors import RenderingError
from ...domain.models import PlaceDetails


@dataclass
class FoliumMapRenderer:
    """Folium-based place map renderer.

    This adapter implements MapRendererPort.

    Attributes:
        zoom_start: Initial zoom level of the map
    """

    zoom_start: int = 11
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render_place(self, place: PlaceDetails) -> str:
        """Render a map with one marker on the place centroid.

        Raises:
            RenderingError: If the place has no centroid or Folium fails.
        """
        if place.centroid is None:
            raise RenderingError(
                "Cannot render a place without centroid", renderer_type="folium"
            )

        position = [place.centroid.latitude, place.centroid.longitude]
        try:
            m = folium.Map(location=position, zoom_start=self.zoom_start, control_scale=True)
            folium.Marker(
                location=position,
                popup=html.escape(place.title or f"{place.osm_type.code}{place.osm_id}"),
                tooltip=html.escape(place.place_type or place.category or ""),
            ).add_to(m)
            document = m.get_root().render()
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "osm_id": place.osm_id},
            )
            raise RenderingError(
                f"Map rendering failed: {e}", renderer_type="folium", cause=e
            )

        self._logger.debug(
            "Map rendered",
            extra={"osm_id": place.osm_id, "bytes": len(document)},
        )
        return document
