"""Validation of the latitude/longitude text fields.

The fields are free text, so they are parsed here before any reverse
geocoding request is issued.
"""

from __future__ import annotations

import math
from typing import Optional

from .domain.errors import InvalidCoordinatesError
from .domain.models import GeoLocation

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def _normalise_decimal(raw: str) -> str:
    text = raw.strip()
    # "21,0285" with a decimal comma; "1,234.5" stays invalid.
    if text.count(",") == 1 and "." not in text:
        text = text.replace(",", ".")
    return text


def _parse_number(raw: str, field_name: str) -> float:
    text = _normalise_decimal(raw)
    try:
        value = float(text)
    except ValueError as e:
        raise InvalidCoordinatesError(
            f"{field_name.capitalize()} is not a number",
            cause=e,
            field_name=field_name,
            raw_value=raw,
        )

    if not math.isfinite(value):
        raise InvalidCoordinatesError(
            f"{field_name.capitalize()} must be finite",
            field_name=field_name,
            raw_value=raw,
        )
    return value


def _check_range(value: float, bounds: tuple[float, float], field_name: str, raw: str) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise InvalidCoordinatesError(
            f"{field_name.capitalize()} must be between {low:g} and {high:g}, got {value:g}",
            field_name=field_name,
            raw_value=raw,
        )


def parse_coordinates(latitude_text: Optional[str], longitude_text: Optional[str]) -> Optional[GeoLocation]:
    """Parse the two coordinate fields.

    Returns None when either field is blank, meaning there is nothing to
    look up yet.

    Raises:
        InvalidCoordinatesError: If a field is not a finite number or is
            out of range.
    """
    latitude_text = latitude_text or ""
    longitude_text = longitude_text or ""
    if not latitude_text.strip() or not longitude_text.strip():
        return None

    latitude = _parse_number(latitude_text, "latitude")
    longitude = _parse_number(longitude_text, "longitude")
    _check_range(latitude, LATITUDE_RANGE, "latitude", latitude_text)
    _check_range(longitude, LONGITUDE_RANGE, "longitude", longitude_text)

    return GeoLocation(latitude=latitude, longitude=longitude)


def split_coordinate_pair(text: str) -> Optional[tuple[str, str]]:
    """Split ``"lat, lon"`` or ``"lat lon"`` typed on a single line.

    Returns None when the text does not look like two numbers, so the
    caller can treat it as a city name instead.
    """
    stripped = text.strip()
    for separator in (";", ",", " "):
        parts = [p for p in stripped.split(separator) if p.strip()]
        if len(parts) == 2 and all(_looks_numeric(p) for p in parts):
            return parts[0].strip(), parts[1].strip()
    return None


def _looks_numeric(text: str) -> bool:
    try:
        value = float(_normalise_decimal(text))
    except ValueError:
        return False
    if not math.isfinite(value):
        return False
    return True
