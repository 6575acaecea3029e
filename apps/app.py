# -*- coding: utf-8 -*-
import html
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Tuple

import gradio as gr

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from city_search import messages
from city_search.container import get_container
from city_search.debounce import Debouncer
from city_search.domain.errors import RenderingError
from city_search.monitoring import configure_logging
from city_search.ports.rendering import MapRendererPort
from city_search.services import CityLookupController, PageState
from city_search.viz.panels import (
    details_markdown,
    error_markdown,
    result_labels,
    search_status,
)

logger = logging.getLogger("city_search.app")

container = get_container()
config = container.config
controller: CityLookupController = container.resolve(CityLookupController)
debouncer: Debouncer = container.resolve(Debouncer)
map_renderer: MapRendererPort = container.resolve(MapRendererPort)

SEARCH_EVENT = "search"


def _map_iframe_from_html(document_html: str, *, height_px: int) -> str:
    escaped = html.escape(document_html, quote=True)
    return (
        f'<iframe srcdoc="{escaped}" '
        f'style="width: 100%; height: {height_px}px; border: 0;" '
        f'loading="lazy"></iframe>'
    )


def _map_html(state: PageState) -> str:
    if state.selected is None or state.selected.centroid is None:
        return ""
    try:
        document = map_renderer.render_place(state.selected)
    except RenderingError as e:
        logger.warning("Map unavailable", extra={"error": str(e)})
        return ""
    return _map_iframe_from_html(document, height_px=config.ui.map_height_px)


def _render(state: PageState) -> Tuple[Any, ...]:
    """Outputs in the order of ``PAGE_OUTPUTS``."""
    show_results = state.show_results and bool(state.results)
    status = search_status(state)
    return (
        state,
        gr.update(
            choices=result_labels(state.results) if show_results else [],
            value=None,
            visible=show_results,
        ),
        gr.update(value=status or "", visible=bool(status)),
        gr.update(value=error_markdown(state), visible=bool(state.error_message)),
        gr.update(value=details_markdown(state.selected), visible=state.selected is not None),
        gr.update(value=_map_html(state), visible=state.selected is not None),
    )


def _unchanged() -> Tuple[Any, ...]:
    return tuple(gr.update() for _ in range(6))


def on_search_input(text: str, state: Optional[PageState]):
    state = controller.edit_search_text(state or controller.initial_state(), text)
    token = debouncer.settle(SEARCH_EVENT)
    if token is None:
        # A newer keystroke owns the page now.
        return _unchanged()
    state = controller.run_search(state)
    if not debouncer.is_current(SEARCH_EVENT, token):
        # The answer came back after a newer event took over the page.
        logger.debug("Dropping stale search answer", extra={"query": text})
        return _unchanged()
    return _render(state)


def on_select_result(index: Optional[int], state: Optional[PageState]):
    state = state or controller.initial_state()
    if index is None:
        return (gr.update(),) + _render(state)
    debouncer.cancel(SEARCH_EVENT)
    state = controller.select_result(state, index)
    return (gr.update(value=state.search_text),) + _render(state)


def on_coordinate_search(latitude: str, longitude: str, state: Optional[PageState]):
    state = controller.edit_coordinates(
        state or controller.initial_state(), latitude, longitude
    )
    state = controller.search_coordinates(state)
    if state.selected is not None:
        # The found place replaces the name search, running or not.
        debouncer.cancel(SEARCH_EVENT)
    return (gr.update(value=state.search_text),) + _render(state)


# ============================ UI ============================
with gr.Blocks(title=messages.TITLE) as app:
    gr.Markdown(
        f"""
<h1 style="text-align: center; letter-spacing: 0.05em;">{messages.TITLE}</h1>
<p style="text-align: center;">{messages.SUBTITLE}</p>
"""
    )

    page_state = gr.State(PageState())

    search_box = gr.Textbox(
        label=messages.SEARCH_LABEL, placeholder=messages.SEARCH_PLACEHOLDER
    )

    gr.Markdown(f"**{messages.COORDINATES_LABEL}**")
    with gr.Row():
        latitude_box = gr.Textbox(show_label=False, placeholder=messages.LATITUDE_PLACEHOLDER)
        longitude_box = gr.Textbox(show_label=False, placeholder=messages.LONGITUDE_PLACEHOLDER)
        coord_button = gr.Button(messages.SEARCH_BUTTON)

    status_md = gr.Markdown(visible=False)
    results_radio = gr.Radio(choices=[], type="index", show_label=False, visible=False)
    error_md = gr.Markdown(visible=False)
    details_md = gr.Markdown(visible=False)
    map_view = gr.HTML(visible=False)

    gr.Markdown(f"<p style='text-align: center;'>{messages.FOOTER}</p>")

    PAGE_OUTPUTS = [page_state, results_radio, status_md, error_md, details_md, map_view]

    search_box.input(
        on_search_input,
        inputs=[search_box, page_state],
        outputs=PAGE_OUTPUTS,
        concurrency_limit=None,
        show_progress="hidden",
    )

    results_radio.select(
        on_select_result,
        inputs=[results_radio, page_state],
        outputs=[search_box] + PAGE_OUTPUTS,
    )

    coord_button.click(
        on_coordinate_search,
        inputs=[latitude_box, longitude_box, page_state],
        outputs=[search_box] + PAGE_OUTPUTS,
    )


def main() -> None:
    configure_logging(config.observability)
    logger.info(
        "Starting City Search UI",
        extra={"host": config.ui.host, "port": config.ui.port},
    )
    app.queue().launch(
        server_name=config.ui.host, server_port=config.ui.port, share=config.ui.share
    )


if __name__ == "__main__":
    main()
