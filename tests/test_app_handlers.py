"""Tests for the Gradio event handlers of the web page (no network, no server)."""

import importlib.util
from pathlib import Path

import gradio as gr
import pytest

from city_search.debounce import Debouncer
from city_search.services import CityLookupController, CityLookupService

APP_PATH = Path(__file__).resolve().parents[1] / "apps" / "app.py"


class FakeMapRenderer:
    def render_place(self, place):
        return f"<p>{place.title}</p>"


@pytest.fixture(scope="module")
def app_module():
    spec = importlib.util.spec_from_file_location("city_search_app", APP_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def app(app_module, monkeypatch, fake_geocoder):
    controller = CityLookupController(service=CityLookupService(geocoder=fake_geocoder))
    monkeypatch.setattr(app_module, "controller", controller)
    monkeypatch.setattr(app_module, "debouncer", Debouncer(delay_seconds=0))
    monkeypatch.setattr(app_module, "map_renderer", FakeMapRenderer())
    return app_module


def is_unchanged(outputs):
    return len(outputs) == 6 and all(o == gr.update() for o in outputs)


def test_settled_keystroke_renders_results(app, hanoi_result):
    outputs = app.on_search_input("Hà Nội", None)

    state, radio = outputs[0], outputs[1]
    assert state.results == (hanoi_result,)
    assert radio["visible"] is True
    assert len(radio["choices"]) == 1


def test_superseded_keystroke_leaves_page_alone(app, fake_geocoder):
    debouncer = Debouncer(delay_seconds=0.5)
    debouncer.sleep = lambda _d: debouncer.cancel(app.SEARCH_EVENT)
    app.debouncer = debouncer

    assert is_unchanged(app.on_search_input("Hà", None))
    assert fake_geocoder.calls == []


def test_late_answer_does_not_overwrite_newer_search(app, fake_geocoder, hanoi_result):
    newer = {}

    def type_more(_text):
        newer["outputs"] = app.on_search_input("Hà Nội", None)

    fake_geocoder.during_search = type_more
    older = app.on_search_input("Hà", None)

    assert is_unchanged(older)
    assert newer["outputs"][0].results == (hanoi_result,)
    assert [c[1] for c in fake_geocoder.calls] == ["Hà", "Hà Nội"]


def test_late_answer_does_not_undo_selection(app, fake_geocoder, hanoi_details):
    shown = app.on_search_input("Hà Nội", None)[0]
    picked = {}

    def select_first(_text):
        picked["outputs"] = app.on_select_result(0, shown)

    fake_geocoder.during_search = select_first
    retyped = app.on_search_input("Hà Nội", shown)

    assert is_unchanged(retyped)
    search_box, state = picked["outputs"][0], picked["outputs"][1]
    assert search_box["value"] == ""
    assert state.selected == hanoi_details
    assert state.show_results is False


def test_late_answer_does_not_undo_coordinate_search(app, fake_geocoder, hanoi_details):
    found = {}

    def search_coordinates(_text):
        found["outputs"] = app.on_coordinate_search("21.0278", "105.8342", None)

    fake_geocoder.during_search = search_coordinates
    stale = app.on_search_input("Huế", None)

    assert is_unchanged(stale)
    assert found["outputs"][1].selected == hanoi_details


def test_selection_renders_details_and_map(app):
    shown = app.on_search_input("Hà Nội", None)[0]

    outputs = app.on_select_result(0, shown)

    details, map_view = outputs[5], outputs[6]
    assert details["visible"] is True
    assert "Hà Nội" in details["value"]
    assert map_view["visible"] is True
    assert "<iframe" in map_view["value"]


def test_blank_coordinates_keep_pending_search(app, fake_geocoder, hanoi_result):
    def click_with_empty_fields(_text):
        app.on_coordinate_search("", "", None)

    fake_geocoder.during_search = click_with_empty_fields
    outputs = app.on_search_input("Hà Nội", None)

    assert outputs[0].results == (hanoi_result,)
