from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from elle_browser.config.model import GlobalConfig
from elle_browser.ui.i18n import translate
from elle_browser.ui.ids import IDs


def build_navbar(global_config: GlobalConfig, language: str) -> dbc.Navbar:
    reference_url = global_config.reference_url

    title_children = [
        html.H2(translate(language, "title"), id=IDs.Control.PAGE_TITLE, className="mb-0 elle-title"),
    ]
    if reference_url:
        title_children.append(
            html.A(
                "↗",
                id=IDs.Control.REFERENCE_LINK,
                href=reference_url,
                target="_blank",
                rel="noopener noreferrer",
                className="ms-2 text-muted text-decoration-none",
                title=reference_url,
            )
        )

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(title_children, className="d-flex align-items-center"),
                dbc.Button(
                    translate(language, "language_button"),
                    id=IDs.Control.LANGUAGE_BUTTON,
                    outline=True,
                    color="secondary",
                    className="ms-auto px-4",
                    n_clicks=0,
                ),
            ],
        ),
        dark=False,
        className="shadow-sm elle-navbar",
    )
