from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional

import dash
from dash import ALL, Input, Output, State, exceptions

from elle_browser.core.dataset_loader import DatasetConfigError
from elle_browser.core.exceptions import DatasetSchemaError
from elle_browser.core.filter_state import FilterState
from elle_browser.services.browser_session import apply_switch_policy
from elle_browser.ui.helpers import all_facet_options
from elle_browser.ui.ids import IDs
from elle_browser.validation.errors import ValidationError

if TYPE_CHECKING:
    from elle_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def active_language(ctx: AppConfig, language: Optional[str]) -> str:
    """
    Stored language if it is configured and its dataset loads, otherwise the
    default one.
    """
    if not language or language not in ctx.datasets:
        return ctx.default_language

    try:
        ctx.datasets[language]
    except (DatasetConfigError, DatasetSchemaError, ValidationError) as e:
        logger.error(
            "Dataset failed to load; using default language",
            extra={
                "language": language,
                "default_language": ctx.default_language,
                "error": str(e),
            },
        )
        return ctx.default_language

    return language


def next_language(languages: List[str], current: str) -> str:
    """The language after `current`, wrapping around."""
    if not languages:
        return current
    if current not in languages:
        return languages[0]
    return languages[(languages.index(current) + 1) % len(languages)]


def build_filter_state(
    ctx: AppConfig,
    triggered_id: Any,
    language: str,
    previous: dict | None,
    search: str | None,
    difficulties: list | None,
    types: list | None,
    domains: list | None,
) -> FilterState:
    """
    Pure helper turning the UI inputs into the canonical FilterState.

    - language change: keep the previous state, then apply the switch policy
    - badge click: toggle that one value off (or on) in the previous state
    - anything else: the controls are the source of truth
    """
    if triggered_id == IDs.Store.LANGUAGE:
        state = FilterState.from_dict(previous)
        ds = ctx.datasets[language]
        apply_switch_policy(state, ds.facet_values(), ctx.switch_policy)
        return state

    if isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.SELECTED_BADGE:
        state = FilterState.from_dict(previous)
        state.toggle(triggered_id["facet"], triggered_id["value"])
        return state

    return FilterState.from_dict(
        {
            "search_query": search,
            "difficulties": difficulties,
            "types": types,
            "domains": domains,
        }
    )


def search_box_value(triggered_id: Any, state: FilterState) -> Any:
    """
    Value to write back into the search box.

    Left alone while the user is typing; otherwise mirrors the state, so a
    reset on language switch also clears the box.
    """
    if triggered_id == IDs.Control.SEARCH_INPUT:
        return dash.no_update
    return state.search_query


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Language toggle
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.LANGUAGE, "data"),
        Input(IDs.Control.LANGUAGE_BUTTON, "n_clicks"),
        State(IDs.Store.LANGUAGE, "data"),
        prevent_initial_call=True,
    )
    def toggle_language(_n_clicks, language):
        current = active_language(ctx, language)
        return next_language(ctx.languages, current)

    # ---------------------------------------------------------
    # Show / hide the facet panel
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.FILTER_PANEL, "style"),
        Input(IDs.Control.SHOW_FILTERS, "value"),
    )
    def toggle_filter_panel(show: bool | None):
        return {} if show else {"display": "none"}

    # ---------------------------------------------------------
    # UI -> FilterState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Control.DIFFICULTY_SELECT, "value"),
        Output(IDs.Control.TYPE_SELECT, "value"),
        Output(IDs.Control.DOMAIN_SELECT, "value"),
        Output(IDs.Control.DIFFICULTY_SELECT, "options"),
        Output(IDs.Control.TYPE_SELECT, "options"),
        Output(IDs.Control.DOMAIN_SELECT, "options"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.DIFFICULTY_SELECT, "value"),
        Input(IDs.Control.TYPE_SELECT, "value"),
        Input(IDs.Control.DOMAIN_SELECT, "value"),
        Input({"type": IDs.Pattern.SELECTED_BADGE, "facet": ALL, "value": ALL}, "n_clicks"),
        Input(IDs.Store.LANGUAGE, "data"),
        State(IDs.Store.FILTER_STATE, "data"),
    )
    def sync_filter_state_from_ui(
            search, difficulties, types, domains, _badge_clicks, language, previous
    ):
        triggered_id = dash.ctx.triggered_id

        # Newly rendered badges fire with n_clicks=0; only real clicks count
        if isinstance(triggered_id, dict):
            triggered = dash.ctx.triggered
            if not triggered or not triggered[0].get("value"):
                raise exceptions.PreventUpdate

        language = active_language(ctx, language)
        state = build_filter_state(
            ctx, triggered_id, language, previous, search, difficulties, types, domains
        )

        logger.debug(
            "Filter state updated",
            extra={"language": language, "trigger": str(triggered_id), **state.to_dict()},
        )

        options = all_facet_options(ctx.datasets[language])
        return (
            state.to_dict(),
            search_box_value(triggered_id, state),
            list(state.difficulties),
            list(state.types),
            list(state.domains),
            *options,
        )
