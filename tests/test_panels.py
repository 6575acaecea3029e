"""Tests for the result list and details panel rendering."""

from dataclasses import replace

from city_search import messages
from city_search.domain.models import OsmType, PlaceDetails
from city_search.services import PageState
from city_search.viz.panels import (
    detail_fields,
    details_markdown,
    details_text,
    error_markdown,
    result_label,
    search_status,
)


def test_result_label(hanoi_result):
    assert result_label(hanoi_result) == "Hà Nội, Việt Nam (Lat: 21.0283334, Lon: 105.854041)"


def test_detail_fields_order(hanoi_details):
    labels = [label for label, _ in detail_fields(hanoi_details)]
    assert labels == [
        "State",
        "Country",
        "Country Code",
        "Admin Level",
        "Type",
        "Category",
        "Importance",
        "Latitude",
        "Longitude",
        "Population",
        "Website",
        "Wikidata",
        "Wikipedia",
    ]


def test_detail_fields_values(hanoi_details):
    fields = dict(detail_fields(hanoi_details))
    assert fields["Country Code"] == "VN"
    assert fields["Latitude"] == "21.0277644"
    assert fields["Longitude"] == "105.8341598"


def test_missing_fields_are_omitted():
    place = PlaceDetails(osm_id=5, osm_type=OsmType.NODE, localname="Hội An", importance=0.0)
    assert detail_fields(place) == []


def test_country_code_needs_address_tags():
    place = PlaceDetails(osm_id=1, osm_type=OsmType.NODE, localname="X", country_code="vn")
    assert detail_fields(place) == []

    tagged = replace(place, address_tags={"country": "Việt Nam"})
    assert detail_fields(tagged) == [("Country", "Việt Nam"), ("Country Code", "VN")]


def test_details_markdown(hanoi_details):
    markdown = details_markdown(hanoi_details)

    assert markdown.startswith("### Hà Nội")
    assert "**Website:** [https://hanoi.gov.vn](https://hanoi.gov.vn)" in markdown
    assert "**Country Code:** VN" in markdown


def test_details_markdown_escapes_names(hanoi_details):
    place = replace(hanoi_details, localname="*Bold* [city]")
    assert details_markdown(place).startswith("### \\*Bold\\* \\[city\\]")


def test_details_markdown_empty_without_selection():
    assert details_markdown(None) == ""


def test_details_text(hanoi_details):
    lines = details_text(hanoi_details).splitlines()

    assert lines[0] == "Hà Nội"
    assert any(line.split() == ["Country", "Code:", "VN"] for line in lines)


def test_search_status():
    assert search_status(PageState()) is None
    assert search_status(PageState(search_text="Huế")) == messages.LOADING
    assert search_status(PageState(search_text="Huế", searched_text="Huế")) == messages.NO_RESULT
    assert (
        search_status(PageState(search_text="Huế", search_error=messages.SERVICE_ERROR))
        == messages.SERVICE_ERROR
    )


def test_error_markdown():
    assert error_markdown(PageState()) == ""
    assert error_markdown(PageState(error_message=messages.NO_RESULT)) == f"**{messages.NO_RESULT}**"
