from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from elle_browser.core.dataset import Dataset
from elle_browser.ui.helpers import all_facet_options
from elle_browser.ui.i18n import translate
from elle_browser.ui.ids import IDs


def _facet_section(label_id: str, label: str, select_id: str, options: list) -> html.Div:
    return html.Div(
        [
            html.Label(label, id=label_id, className="form-label fw-semibold"),
            dbc.Checklist(
                id=select_id,
                options=options,
                value=[],
                inline=True,
                className="elle-facet",
            ),
        ],
        className="mb-3",
    )


def build_filter_panel(dataset: Dataset | None, language: str) -> dbc.Card:
    difficulty_options, type_options, domain_options = all_facet_options(dataset)

    return dbc.Card(
        dbc.CardBody(
            [
                dcc.Input(
                    id=IDs.Control.SEARCH_INPUT,
                    type="text",
                    value="",
                    debounce=False,
                    placeholder=translate(language, "search_placeholder"),
                    className="form-control mb-3",
                ),
                html.Div(
                    dbc.Switch(
                        id=IDs.Control.SHOW_FILTERS,
                        label=translate(language, "filters"),
                        value=False,
                    ),
                    id=IDs.Control.SHOW_FILTERS_LABEL,
                    className="d-flex justify-content-end",
                ),
                # Visibility is purely presentational; selections survive hiding
                html.Div(
                    dbc.Row(
                        [
                            dbc.Col(
                                [
                                    _facet_section(
                                        IDs.Control.DIFFICULTY_LABEL,
                                        translate(language, "difficulty_filter"),
                                        IDs.Control.DIFFICULTY_SELECT,
                                        difficulty_options,
                                    ),
                                    _facet_section(
                                        IDs.Control.TYPE_LABEL,
                                        translate(language, "type_filter"),
                                        IDs.Control.TYPE_SELECT,
                                        type_options,
                                    ),
                                ],
                                md=4,
                            ),
                            dbc.Col(
                                _facet_section(
                                    IDs.Control.DOMAIN_LABEL,
                                    translate(language, "domain_filter"),
                                    IDs.Control.DOMAIN_SELECT,
                                    domain_options,
                                ),
                                md=8,
                            ),
                        ],
                        className="mt-3",
                    ),
                    id=IDs.Control.FILTER_PANEL,
                    style={"display": "none"},
                ),
            ]
        ),
        className="elle-filter-card shadow mb-4",
    )
