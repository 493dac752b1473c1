from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from elle_browser.core.filter_state import FilterState
from elle_browser.ui.ids import IDs
from elle_browser.ui.layout.build_filter_panel import build_filter_panel
from elle_browser.ui.layout.build_navbar import build_navbar
from elle_browser.ui.layout.build_results_panel import build_results_panel

if TYPE_CHECKING:
    from elle_browser.ui.config import AppConfig


def build_layout(ctx: "AppConfig"):
    language = ctx.default_language
    dataset = ctx.datasets.get(language)

    return dbc.Container(
        fluid=True,
        className="elle-root",
        children=[
            build_navbar(ctx.global_config, language),

            # App-level stores
            dcc.Store(id=IDs.Store.LANGUAGE, data=language, storage_type="session"),
            dcc.Store(id=IDs.Store.FILTER_STATE, data=FilterState().to_dict(), storage_type="memory"),

            dbc.Container(
                [
                    build_filter_panel(dataset, language),
                    build_results_panel(),
                ],
                className="py-4",
            ),
        ],
    )
