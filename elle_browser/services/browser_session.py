from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from elle_browser.core.dataset import Dataset, FacetValueSets
from elle_browser.core.filter_state import FilterState

logger = logging.getLogger(__name__)


class SwitchPolicy(str, Enum):
    """What happens to the filter state when the active language changes."""

    RESET = "reset"  # clear search text and every selection
    PRUNE = "prune"  # keep search text, drop selections unknown to the new dataset
    KEEP = "keep"    # keep everything, even if nothing matches any more


class BrowserSession:
    """
    Query surface over one active dataset and one FilterState.

    Facet values come from the active dataset's cache and therefore only change
    on a language switch; the filtered view is recomputed (or fetched from the
    dataset's subset cache) from the current state on every read.
    """

    def __init__(
        self,
        datasets: Mapping[str, Dataset],
        language: str,
        state: Optional[FilterState] = None,
        switch_policy: SwitchPolicy = SwitchPolicy.PRUNE,
    ) -> None:
        if language not in datasets:
            raise KeyError(f"Unknown dataset language '{language}'")

        self._datasets = datasets
        self._language = language
        self.state = state if state is not None else FilterState()
        self.switch_policy = SwitchPolicy(switch_policy)

    # -------------------------------------------------------------------------
    # Active dataset
    # -------------------------------------------------------------------------
    @property
    def language(self) -> str:
        return self._language

    @property
    def languages(self) -> List[str]:
        return list(self._datasets)

    @property
    def dataset(self) -> Dataset:
        return self._datasets[self._language]

    @property
    def facet_values(self) -> FacetValueSets:
        return self.dataset.facet_values()

    # -------------------------------------------------------------------------
    # Filtered view
    # -------------------------------------------------------------------------
    def filtered(self) -> Dataset:
        return self.dataset.subset_for_state(self.state)

    @property
    def match_count(self) -> int:
        return len(self.filtered())

    @property
    def total_count(self) -> int:
        return len(self.dataset)

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------
    def set_search(self, text: str | None) -> None:
        self.state.set_search(text)

    def toggle_difficulty(self, value: str) -> None:
        self.state.toggle_difficulty(value)

    def toggle_type(self, value: str) -> None:
        self.state.toggle_type(value)

    def toggle_domain(self, value: str) -> None:
        self.state.toggle_domain(value)

    def reset(self) -> None:
        self.state.reset()

    def switch_language(self, language: str) -> Dict[str, List[str]]:
        """
        Swap the active dataset wholesale and apply the switch policy.

        Returns the selections dropped by the policy, per facet.
        """
        if language not in self._datasets:
            raise KeyError(f"Unknown dataset language '{language}'")

        previous = self._language
        self._language = language

        removed = apply_switch_policy(self.state, self.facet_values, self.switch_policy)

        logger.info(
            "Switched dataset language",
            extra={
                "from_language": previous,
                "to_language": language,
                "policy": self.switch_policy.value,
                "removed_selections": removed,
            },
        )
        return removed

    def toggle_language(self) -> str:
        """Switch to the other language when exactly two are configured."""
        languages = self.languages
        if len(languages) != 2:
            raise ValueError(
                f"toggle_language needs exactly two languages, have {languages}"
            )
        other = languages[1] if self._language == languages[0] else languages[0]
        self.switch_language(other)
        return other

    def summary(self) -> Dict[str, Any]:
        return {
            "language": self._language,
            "total": self.total_count,
            "matches": self.match_count,
            **self.state.to_dict(),
        }


def apply_switch_policy(
    state: FilterState,
    facet_values: FacetValueSets,
    policy: SwitchPolicy,
) -> Dict[str, List[str]]:
    """
    Bring `state` in line with a newly activated dataset's facet values.

    Returns the selections that were dropped, per facet.
    """
    policy = SwitchPolicy(policy)

    if policy is SwitchPolicy.KEEP:
        return {}

    if policy is SwitchPolicy.RESET:
        removed = {
            facet: list(state.selected(facet))
            for facet in ("difficulty", "type", "domain")
            if state.selected(facet)
        }
        state.reset()
        return removed

    return state.prune(facet_values)
