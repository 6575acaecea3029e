"""Rendering adapters - Implementations of MapRendererPort.

Available implementations:
- FoliumMapRenderer: Interactive Leaflet map through Folium
"""

from .folium_adapter import FoliumMapRenderer

__all__ = ["FoliumMapRenderer"]
