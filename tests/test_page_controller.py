"""Tests for the page state transitions."""

import pytest

from city_search import messages
from city_search.services import CityLookupController, CityLookupService, PageState


@pytest.fixture
def controller(fake_geocoder):
    return CityLookupController(service=CityLookupService(geocoder=fake_geocoder))


@pytest.fixture
def searched(controller):
    state = controller.edit_search_text(controller.initial_state(), "Hà Nội")
    return controller.run_search(state)


class TestNameSearch:
    def test_typing_shows_loading_until_search_runs(self, controller):
        state = controller.edit_search_text(controller.initial_state(), "Hà Nội")

        assert state.show_results is True
        assert state.is_loading is True
        assert state.results == ()

    def test_search_fills_results(self, searched, hanoi_result):
        assert searched.results == (hanoi_result,)
        assert searched.is_loading is False
        assert searched.is_empty_result is False

    def test_no_match(self, controller):
        state = controller.run_search(
            controller.edit_search_text(controller.initial_state(), "Atlantis")
        )
        assert state.is_empty_result is True

    def test_service_failure_is_shown_inline(self, controller, fake_geocoder, service_error):
        fake_geocoder.fail_with = service_error
        state = controller.run_search(
            controller.edit_search_text(controller.initial_state(), "Hà Nội")
        )

        assert state.search_error == messages.SERVICE_ERROR
        assert state.results == ()
        assert state.is_loading is False
        assert state.is_empty_result is False

    def test_blank_text_hides_results(self, controller, fake_geocoder):
        state = controller.run_search(controller.edit_search_text(controller.initial_state(), ""))

        assert state.show_results is False
        assert fake_geocoder.calls == []


class TestSelection:
    def test_select_shows_details_and_hides_results(self, controller, searched, hanoi_details):
        state = controller.select_result(searched, 0)

        assert state.selected == hanoi_details
        assert state.search_text == ""
        assert state.show_results is False
        assert state.error_message is None

    @pytest.mark.parametrize("index", [None, -1, 1, 99])
    def test_invalid_index_is_ignored(self, controller, searched, index):
        assert controller.select_result(searched, index) is searched

    def test_details_failure(self, controller, searched, fake_geocoder, service_error):
        fake_geocoder.fail_with = service_error
        state = controller.select_result(searched, 0)

        assert state.selected is None
        assert state.error_message == messages.NO_RESULT

    def test_editing_search_text_clears_selection(self, controller, searched):
        state = controller.select_result(searched, 0)
        state = controller.edit_search_text(state, "Huế")

        assert state.selected is None
        assert state.error_message is None
        assert state.show_results is True


class TestCoordinateSearch:
    def test_found(self, controller, searched, hanoi_details):
        state = controller.edit_coordinates(searched, "21.0278", "105.8342")
        state = controller.search_coordinates(state)

        assert state.selected == hanoi_details
        assert state.error_message is None
        assert state.search_text == ""
        assert state.show_results is False

    def test_blank_fields_do_nothing(self, controller, fake_geocoder):
        state = controller.edit_coordinates(controller.initial_state(), "21.0", "")

        assert controller.search_coordinates(state) is state
        assert fake_geocoder.calls == []

    def test_invalid_fields(self, controller, fake_geocoder, hanoi_details):
        state = PageState(selected=hanoi_details)
        state = controller.search_coordinates(
            controller.edit_coordinates(state, "95", "105.8")
        )

        assert state.selected is None
        assert state.error_message == messages.INVALID_COORDINATES
        assert fake_geocoder.calls == []

    def test_nothing_found(self, controller, hanoi_details):
        state = PageState(selected=hanoi_details)
        state = controller.search_coordinates(
            controller.edit_coordinates(state, "0", "-140")
        )

        assert state.selected is None
        assert state.error_message == messages.NO_RESULT

    def test_service_failure(self, controller, fake_geocoder, service_error):
        fake_geocoder.fail_with = service_error
        state = controller.search_coordinates(
            controller.edit_coordinates(controller.initial_state(), "21.0278", "105.8342")
        )

        assert state.selected is None
        assert state.error_message == messages.NO_RESULT

    def test_coordinate_fields_survive_name_search(self, controller):
        state = controller.edit_coordinates(controller.initial_state(), "1", "2")
        state = controller.edit_search_text(state, "Huế")

        assert (state.latitude_text, state.longitude_text) == ("1", "2")
