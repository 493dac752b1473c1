from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, html

from elle_browser.core.filter_state import FilterState
from elle_browser.services.browser_session import BrowserSession
from elle_browser.ui.callbacks.callbacks_filters import active_language
from elle_browser.ui.helpers import format_count, question_card, selected_badges, ui_strings
from elle_browser.ui.ids import IDs
from elle_browser.ui.i18n import translate

if TYPE_CHECKING:
    from elle_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # FilterState -> badges, count, question cards
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SELECTED_BADGES, "children"),
        Output(IDs.Control.RESULT_COUNT, "children"),
        Output(IDs.Control.RESULTS, "children"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Store.LANGUAGE, "data"),
    )
    def render_results(state_data, language):
        language = active_language(ctx, language)
        state = FilterState.from_dict(state_data)

        session = BrowserSession(ctx.datasets, language, state, switch_policy=ctx.switch_policy)
        filtered = session.filtered()

        logger.debug("Rendered question list", extra=session.summary())

        if len(filtered) == 0:
            cards = [html.P(translate(language, "no_results"), className="text-muted")]
        else:
            cards = [question_card(r, state.search_query, language) for r in filtered]

        return (
            selected_badges(state, language),
            format_count(language, len(filtered)),
            cards,
        )

    # ---------------------------------------------------------
    # Language -> static UI strings
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.PAGE_TITLE, "children"),
        Output(IDs.Control.SEARCH_INPUT, "placeholder"),
        Output(IDs.Control.SHOW_FILTERS, "label"),
        Output(IDs.Control.DIFFICULTY_LABEL, "children"),
        Output(IDs.Control.TYPE_LABEL, "children"),
        Output(IDs.Control.DOMAIN_LABEL, "children"),
        Output(IDs.Control.LANGUAGE_BUTTON, "children"),
        Input(IDs.Store.LANGUAGE, "data"),
    )
    def update_ui_strings(language):
        t = ui_strings(active_language(ctx, language))
        return (
            t["title"],
            t["search_placeholder"],
            t["filters"],
            t["difficulty_filter"],
            t["type_filter"],
            t["domain_filter"],
            t["language_button"],
        )
