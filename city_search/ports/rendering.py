"""Rendering port - Abstraction for the place map.

This protocol defines the contract for map rendering, allowing
different implementations (Folium, static images...) to be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import PlaceDetails


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py
    """

    def render_place(self, place: PlaceDetails) -> str:
        """Render a map centred on a place.

        Args:
            place: The place to show. Its centroid must be known.

        Returns:
            A standalone HTML document.

        Raises:
            RenderingError: If the place has no centroid or rendering fails.
        """
        ...
