"""Terminal front-end driving the page controller.

Commands typed at the prompt:
- a city name searches by name;
- ``lat, lon`` searches by coordinates;
- a number picks a candidate of the last search;
- an empty line quits.
"""

from __future__ import annotations

from typing import Callable

from .. import messages
from ..coordinates import split_coordinate_pair
from ..services.page_controller import CityLookupController, PageState
from ..viz.panels import details_text, result_label, search_status

PROMPT = "> "


def handle_line(controller: CityLookupController, state: PageState, line: str) -> PageState:
    """Apply one line of input to the page state."""
    text = line.strip()

    if text.isdigit() and state.show_results and state.results:
        return controller.select_result(state, int(text) - 1)

    pair = split_coordinate_pair(text)
    if pair is not None:
        state = controller.edit_coordinates(state, pair[0], pair[1])
        return controller.search_coordinates(state)

    state = controller.edit_search_text(state, text)
    return controller.run_search(state)


def render(state: PageState) -> str:
    """Plain-text rendering of what the page would show."""
    blocks = []

    status = search_status(state)
    if status and not state.is_loading:
        blocks.append(status)
    if state.show_results and state.results:
        blocks.append(
            "\n".join(
                f"{i}. {result_label(result)}"
                for i, result in enumerate(state.results, start=1)
            )
        )
    if state.error_message:
        blocks.append(state.error_message)
    if state.selected is not None:
        blocks.append(details_text(state.selected))

    return "\n\n".join(blocks)


def run_session(
    controller: CityLookupController,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> PageState:
    """Prompt loop; returns the last state when the user quits."""
    write(f"=== {messages.TITLE} ===")
    write(messages.SUBTITLE)

    state = controller.initial_state()
    while True:
        try:
            line = read(PROMPT)
        except EOFError:
            break
        if not line.strip():
            break

        state = handle_line(controller, state, line)
        output = render(state)
        if output:
            write(output)

    return state
