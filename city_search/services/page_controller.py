"""Page-level UI controller.

The page state is an immutable snapshot; every user action is a method
taking the current snapshot and returning the next one. Front-ends
(Gradio, terminal) only store the snapshot and render it.

Invariants kept by every transition:
- at most one place details object is selected;
- search results are hidden while a place is selected;
- editing the search text drops the selection and any error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .. import messages
from ..coordinates import parse_coordinates
from ..domain.errors import GeocodingError, InvalidCoordinatesError, PlaceNotFoundError
from ..domain.models import PlaceDetails, SearchResult
from .city_lookup import CityLookupService


@dataclass(frozen=True, slots=True)
class PageState:
    """Everything the page shows at one point in time.

    Attributes:
        search_text: Content of the city name box
        results: Candidates of the last completed search
        searched_text: Text the ``results`` belong to (None = not searched yet)
        search_error: Inline error of the last search, if it failed
        selected: Place whose details panel is shown
        error_message: Inline error of a coordinate or details lookup
        latitude_text: Content of the latitude box
        longitude_text: Content of the longitude box
    """

    search_text: str = ""
    results: Tuple[SearchResult, ...] = ()
    searched_text: Optional[str] = None
    search_error: Optional[str] = None
    selected: Optional[PlaceDetails] = None
    error_message: Optional[str] = None
    latitude_text: str = ""
    longitude_text: str = ""

    @property
    def show_results(self) -> bool:
        return bool(self.search_text) and self.selected is None

    @property
    def is_loading(self) -> bool:
        return (
            self.show_results
            and self.search_error is None
            and self.searched_text != self.search_text
        )

    @property
    def is_empty_result(self) -> bool:
        return (
            self.show_results
            and self.searched_text == self.search_text
            and self.search_error is None
            and not self.results
        )


@dataclass
class CityLookupController:
    """State transitions of the city lookup page."""

    service: CityLookupService
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def initial_state(self) -> PageState:
        return PageState()

    def edit_search_text(self, state: PageState, text: str) -> PageState:
        return replace(
            state,
            search_text=text or "",
            results=(),
            searched_text=None,
            search_error=None,
            selected=None,
            error_message=None,
        )

    def run_search(self, state: PageState) -> PageState:
        """Fetch candidates for the current search text."""
        if not state.search_text.strip():
            return replace(state, results=(), searched_text=state.search_text, search_error=None)

        try:
            results = self.service.search(state.search_text)
        except GeocodingError as e:
            self._logger.warning(
                "City search failed",
                extra={"query": state.search_text, "error": str(e)},
            )
            return replace(
                state,
                results=(),
                searched_text=state.search_text,
                search_error=messages.SERVICE_ERROR,
            )

        return replace(
            state,
            results=tuple(results),
            searched_text=state.search_text,
            search_error=None,
        )

    def select_result(self, state: PageState, index: Optional[int]) -> PageState:
        """Show the details of the candidate at ``index``."""
        if index is None or not 0 <= index < len(state.results) or not state.show_results:
            return state

        item = state.results[index]
        state = replace(state, search_text="", error_message=None)
        try:
            details = self.service.details_for(item)
        except (PlaceNotFoundError, GeocodingError) as e:
            self._logger.error(
                "Error fetching details",
                extra={"osm_id": item.osm_id, "error": str(e)},
            )
            return replace(state, selected=None, error_message=messages.NO_RESULT)

        return replace(state, selected=details)

    def edit_coordinates(
        self, state: PageState, latitude_text: str, longitude_text: str
    ) -> PageState:
        return replace(
            state, latitude_text=latitude_text or "", longitude_text=longitude_text or ""
        )

    def search_coordinates(self, state: PageState) -> PageState:
        """Reverse geocode the coordinate fields and show the place found."""
        try:
            location = parse_coordinates(state.latitude_text, state.longitude_text)
        except InvalidCoordinatesError as e:
            self._logger.info(
                "Coordinates rejected",
                extra={"field": e.field_name, "raw_value": e.raw_value},
            )
            return replace(state, selected=None, error_message=messages.INVALID_COORDINATES)

        if location is None:
            return state

        try:
            details = self.service.details_at(location)
        except PlaceNotFoundError:
            return replace(state, selected=None, error_message=messages.NO_RESULT)
        except GeocodingError as e:
            self._logger.error(
                "Coordinate lookup failed",
                extra={
                    "lat": location.latitude,
                    "lon": location.longitude,
                    "error": str(e),
                },
            )
            return replace(state, selected=None, error_message=messages.NO_RESULT)

        return replace(
            state,
            selected=details,
            error_message=None,
            search_text="",
            results=(),
            searched_text=None,
            search_error=None,
        )
