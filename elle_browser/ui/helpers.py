from __future__ import annotations

from typing import Dict, List, Tuple

import dash_bootstrap_components as dbc
from dash import html

from elle_browser.core.dataset import Dataset
from elle_browser.core.filter_state import FilterState
from elle_browser.core.question import FACETS, QuestionRecord
from elle_browser.ui.i18n import translate
from elle_browser.ui.ids import badge_id


def facet_options(dataset: Dataset, facet: str) -> List[dict]:
    """
    Checklist options for one facet, built from the full dataset's facet values
    (first-seen order) and labelled with their record counts.
    """
    counts = dataset.value_counts(facet)
    return [
        {"label": f"{value} ({counts.get(value, 0)})", "value": value}
        for value in dataset.facet_values().values_for(facet)
    ]


def all_facet_options(dataset: Dataset | None) -> Tuple[List[dict], List[dict], List[dict]]:
    if dataset is None:
        return [], [], []
    difficulty, type_, domain = (facet_options(dataset, facet) for facet in FACETS)
    return difficulty, type_, domain


def format_count(language: str | None, count: int) -> str:
    return translate(language, "total_questions", count=count)


def _match_spans(text: str, needle: str) -> List[Tuple[int, int]]:
    """
    Spans of `text` whose casefolded form contains `needle`, in original indices.

    Casefolding can expand a character ("ß" -> "ss"), so every folded character
    remembers the original index it came from.
    """
    folded: List[str] = []
    origin: List[int] = []
    for i, ch in enumerate(text):
        for c in ch.casefold():
            folded.append(c)
            origin.append(i)
    haystack = "".join(folded)

    spans: List[Tuple[int, int]] = []
    start = haystack.find(needle)
    while start != -1:
        end = start + len(needle)
        begin, stop = origin[start], origin[end - 1] + 1
        if spans and begin < spans[-1][1]:
            spans[-1] = (spans[-1][0], max(stop, spans[-1][1]))
        else:
            spans.append((begin, stop))
        start = haystack.find(needle, end)
    return spans


def highlight_segments(text: str, query: str | None) -> List[Tuple[str, bool]]:
    """
    Split `text` into (segment, is_match) pairs around casefolded occurrences
    of `query`, the same comparison the search filter uses. A blank query
    yields the whole text unmatched.
    """
    if not query or not query.strip() or not text:
        return [(text, False)] if text else []

    segments: List[Tuple[str, bool]] = []
    pos = 0
    for begin, stop in _match_spans(text, query.casefold()):
        if begin > pos:
            segments.append((text[pos:begin], False))
        segments.append((text[begin:stop], True))
        pos = stop
    if pos < len(text):
        segments.append((text[pos:], False))
    return segments


def _highlighted(text: str, query: str | None) -> list:
    return [
        html.Mark(segment, className="elle-highlight") if is_match else segment
        for segment, is_match in highlight_segments(text, query)
    ]


def question_card(record: QuestionRecord, query: str | None, language: str | None) -> dbc.Card:
    def tags(facet: str, values, color: str) -> List[dbc.Badge]:
        label = translate(language, facet)
        return [
            dbc.Badge(f"{label}: {v}", color=color, className="me-1 mb-1", pill=True)
            for v in values
        ]

    return dbc.Card(
        dbc.CardBody(
            [
                html.Div(
                    f"{translate(language, 'question')} {record.id}",
                    className="text-muted small mb-1",
                ),
                html.P(_highlighted(record.text, query), className="elle-question-text mb-2"),
                html.Div(
                    tags("difficulty", (record.difficulty,), "primary")
                    + tags("type", record.type, "info")
                    + tags("domain", record.domain, "success"),
                ),
            ]
        ),
        className="elle-question-card shadow-sm",
    )


def selected_badges(state: FilterState, language: str | None) -> List[dbc.Badge]:
    """Badges for the current selections; clicking one removes that selection."""
    badges: List[dbc.Badge] = []
    for facet in FACETS:
        label = translate(language, facet)
        for value in state.selected(facet):
            badges.append(
                dbc.Badge(
                    f"{label}: {value} ×",
                    id=badge_id(facet, value),
                    color="secondary",
                    className="me-2 mb-2 elle-selected-badge",
                    style={"cursor": "pointer"},
                    n_clicks=0,
                )
            )
    return badges


def ui_strings(language: str | None) -> Dict[str, str]:
    keys = [
        "title",
        "search_placeholder",
        "filters",
        "difficulty_filter",
        "type_filter",
        "domain_filter",
        "language_button",
    ]
    return {key: translate(language, key) for key in keys}
