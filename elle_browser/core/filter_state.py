from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from elle_browser.core.dataset import FacetValueSets

_FACET_ATTRS = {
    "difficulty": "difficulties",
    "type": "types",
    "domain": "domains",
}


@dataclass
class FilterState:
    """
    Represents the current search text and facet selections.

    Fields:

    - search_query: free text, matched case-insensitively as a substring
    - difficulties: selected difficulty labels
    - types: selected question types
    - domains: selected domains

    Selections are lists used as insertion-ordered sets so the "selected" badges
    render in the order they were clicked. An empty selection means no
    constraint from that facet.
    """

    search_query: str = ""
    difficulties: List[str] = field(default_factory=list)
    types: List[str] = field(default_factory=list)
    domains: List[str] = field(default_factory=list)

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------
    def set_search(self, text: str | None) -> None:
        self.search_query = text or ""

    def toggle(self, facet: str, value: str) -> None:
        """Remove `value` from the facet's selection if present, append it otherwise."""
        selected = self.selected(facet)
        if value in selected:
            selected.remove(value)
        else:
            selected.append(value)

    def toggle_difficulty(self, value: str) -> None:
        self.toggle("difficulty", value)

    def toggle_type(self, value: str) -> None:
        self.toggle("type", value)

    def toggle_domain(self, value: str) -> None:
        self.toggle("domain", value)

    def reset(self) -> None:
        """Clear the search text and every facet selection."""
        self.search_query = ""
        self.difficulties.clear()
        self.types.clear()
        self.domains.clear()

    def prune(self, facet_values: "FacetValueSets") -> Dict[str, List[str]]:
        """
        Drop selected values that don't exist in `facet_values`.

        Returns the removed values per facet (only facets that lost something).
        """
        removed: Dict[str, List[str]] = {}
        for facet in _FACET_ATTRS:
            selected = self.selected(facet)
            gone = [v for v in selected if not facet_values.contains(facet, v)]
            if gone:
                selected[:] = [v for v in selected if v not in gone]
                removed[facet] = gone
        return removed

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def selected(self, facet: str) -> List[str]:
        """Return the (live) selection list for a facet name."""
        try:
            return getattr(self, _FACET_ATTRS[facet])
        except KeyError:
            raise ValueError(f"Unknown facet '{facet}'") from None

    @property
    def is_neutral(self) -> bool:
        return (
            not self.search_query.strip()
            and not self.difficulties
            and not self.types
            and not self.domains
        )

    def cache_key(self) -> Tuple[str, Tuple[str, ...], Tuple[str, ...], Tuple[str, ...]]:
        """Order-insensitive, hashable snapshot of this state."""

        def norm(values: List[str]) -> Tuple[str, ...]:
            return tuple(sorted(set(map(str, values))))

        query = self.search_query if self.search_query.strip() else ""
        return (query, norm(self.difficulties), norm(self.types), norm(self.domains))

    def copy(self) -> FilterState:
        return FilterState.from_dict(self.to_dict())

    # -------------------------------------------------------------------------
    # Serialisation (Dash stores)
    # -------------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> FilterState:
        data = data or {}
        return cls(
            search_query=str(data.get("search_query") or ""),
            difficulties=list(dict.fromkeys(data.get("difficulties") or [])),
            types=list(dict.fromkeys(data.get("types") or [])),
            domains=list(dict.fromkeys(data.get("domains") or [])),
        )
