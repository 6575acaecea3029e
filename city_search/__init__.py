"""Top-level package for the City Search project.

A single-page city lookup: search OpenStreetMap places by city name or
by latitude/longitude through Nominatim, and show the details of the
selected place.
"""

__version__ = "0.1.0"
