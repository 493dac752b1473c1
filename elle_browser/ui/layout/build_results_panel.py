from __future__ import annotations

from dash import html

from elle_browser.ui.ids import IDs


def build_results_panel() -> html.Div:
    return html.Div(
        [
            html.Div(id=IDs.Control.SELECTED_BADGES, className="d-flex flex-wrap mb-2"),
            html.P(id=IDs.Control.RESULT_COUNT, className="text-muted mb-3"),
            html.Div(id=IDs.Control.RESULTS, className="d-grid gap-3"),
        ]
    )
