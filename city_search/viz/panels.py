"""Text rendering of the result list and the details panel.

Both the Gradio page (Markdown) and the terminal front-end (plain text)
render from the same ordered field list.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .. import messages
from ..domain.models import PlaceDetails, SearchResult
from ..services.page_controller import PageState


def result_label(result: SearchResult) -> str:
    """One-line label of a search candidate."""
    return (
        f"{result.display_name} "
        f"(Lat: {result.location.latitude}, Lon: {result.location.longitude})"
    )


def result_labels(results: Sequence[SearchResult]) -> List[str]:
    return [result_label(r) for r in results]


def search_status(state: PageState) -> Optional[str]:
    """Loading / empty / error line shown above the result list, if any."""
    if not state.show_results:
        return None
    if state.search_error:
        return state.search_error
    if state.is_loading:
        return messages.LOADING
    if state.is_empty_result:
        return messages.NO_RESULT
    return None


def detail_fields(place: PlaceDetails) -> List[Tuple[str, str]]:
    """Ordered ``(label, value)`` pairs of the details panel.

    Fields the service did not return are left out.
    """
    fields: List[Tuple[str, str]] = []

    if place.address_tags:
        if place.state:
            fields.append(("State", place.state))
        if place.country:
            fields.append(("Country", place.country))
        if place.country_code:
            fields.append(("Country Code", place.country_code.upper()))

    if place.admin_level:
        fields.append(("Admin Level", str(place.admin_level)))
    if place.place_type:
        fields.append(("Type", place.place_type))
    if place.category:
        fields.append(("Category", place.category))
    if place.importance:
        fields.append(("Importance", str(place.importance)))

    if place.centroid is not None:
        fields.append(("Latitude", str(place.centroid.latitude)))
        fields.append(("Longitude", str(place.centroid.longitude)))

    if place.population:
        fields.append(("Population", place.population))
    if place.website:
        fields.append(("Website", place.website))
    if place.wikidata:
        fields.append(("Wikidata", place.wikidata))
    if place.wikipedia:
        fields.append(("Wikipedia", place.wikipedia))

    return fields


def _md_escape(text: str) -> str:
    for char in ("\\", "*", "_", "[", "]", "`", "#", "<", ">"):
        text = text.replace(char, "\\" + char)
    return text


def details_markdown(place: Optional[PlaceDetails]) -> str:
    """Markdown of the details panel; empty when nothing is selected."""
    if place is None:
        return ""

    lines = [f"### {_md_escape(place.title)}", ""]
    for label, value in detail_fields(place):
        if label == "Website":
            lines.append(f"**{label}:** [{_md_escape(value)}]({value})  ")
        else:
            lines.append(f"**{label}:** {_md_escape(value)}  ")
    return "\n".join(lines).rstrip()


def details_text(place: PlaceDetails) -> str:
    """Plain-text details panel for the terminal."""
    lines = [place.title]
    width = max((len(label) for label, _ in detail_fields(place)), default=0)
    for label, value in detail_fields(place):
        lines.append(f"  {label + ':':<{width + 1}} {value}")
    return "\n".join(lines)


def error_markdown(state: PageState) -> str:
    if not state.error_message:
        return ""
    return f"**{state.error_message}**"
