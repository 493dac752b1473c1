from __future__ import annotations

__all__ = ["IDs", "badge_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"
        LANGUAGE = "language"

    class Control:
        # Navbar
        PAGE_TITLE = "page-title"
        REFERENCE_LINK = "reference-link"
        LANGUAGE_BUTTON = "language-button"

        # Search + facets
        SEARCH_INPUT = "search-input"
        SHOW_FILTERS = "show-filters"
        SHOW_FILTERS_LABEL = "show-filters-label"
        FILTER_PANEL = "filter-panel"

        DIFFICULTY_LABEL = "difficulty-label"
        TYPE_LABEL = "type-label"
        DOMAIN_LABEL = "domain-label"

        DIFFICULTY_SELECT = "difficulty-select"
        TYPE_SELECT = "type-select"
        DOMAIN_SELECT = "domain-select"

        # Results
        SELECTED_BADGES = "selected-badges"
        RESULT_COUNT = "result-count"
        RESULTS = "results"

    class Pattern:
        # pattern-matching "type" strings
        SELECTED_BADGE = "selected-badge"


def badge_id(facet: str, value: str) -> dict:
    return {"type": IDs.Pattern.SELECTED_BADGE, "facet": facet, "value": value}
