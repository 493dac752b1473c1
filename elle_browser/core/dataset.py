from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np
import pandas as pd

from elle_browser.core.exceptions import DatasetSchemaError
from elle_browser.core.predicates import (
    combine_masks,
    multi_value_mask,
    search_mask,
    single_value_mask,
)
from elle_browser.core.question import FACETS, QuestionRecord

if TYPE_CHECKING:
    from elle_browser.core.filter_state import FilterState

SubsetKey = Tuple[str, Tuple[str, ...], Tuple[str, ...], Tuple[str, ...]]


@dataclass(frozen=True)
class FacetValueSets:
    """
    Distinct facet values present in a whole dataset, in first-seen order.

    These always describe the full dataset (never the filtered view) so every
    option stays visible and a selection can be undone.
    """
    difficulties: Tuple[str, ...]
    types: Tuple[str, ...]
    domains: Tuple[str, ...]

    def values_for(self, facet: str) -> Tuple[str, ...]:
        if facet == "difficulty":
            return self.difficulties
        if facet == "type":
            return self.types
        if facet == "domain":
            return self.domains
        raise ValueError(f"Unknown facet '{facet}'")

    def contains(self, facet: str, value: str) -> bool:
        return value in self.values_for(facet)


def derive_facet_values(records: Iterable[QuestionRecord]) -> FacetValueSets:
    """Flatten every record's facet values and keep the distinct ones, first-seen first."""
    difficulties: Dict[str, None] = {}
    types: Dict[str, None] = {}
    domains: Dict[str, None] = {}

    for record in records:
        difficulties.setdefault(record.difficulty)
        for value in record.type:
            types.setdefault(value)
        for value in record.domain:
            domains.setdefault(value)

    return FacetValueSets(
        difficulties=tuple(difficulties),
        types=tuple(types),
        domains=tuple(domains),
    )


class Dataset:
    """
    Immutable, ordered collection of question records for one language.

    Includes:
    - Cached facet value sets (computed once per Dataset)
    - A pandas frame backing vectorised predicate evaluation
    - Cached subsetting keyed by the filter snapshot
    """

    MAX_SUBSET_CACHE = 128

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(
        self,
        name: str,
        language: str,
        records: Sequence[QuestionRecord],
        file_path: Optional[Path] = None,
    ) -> None:
        self.name = name
        self.language = language
        self.file_path = file_path
        self._records: Tuple[QuestionRecord, ...] = tuple(records)

        seen: set[str] = set()
        duplicates: List[str] = []
        for record in self._records:
            if record.id in seen:
                duplicates.append(record.id)
            seen.add(record.id)
        if duplicates:
            raise DatasetSchemaError(
                f"Dataset '{name}' has duplicate question ids: {sorted(set(duplicates))}"
            )

        # ---------------------------------------------------------------------
        # Columnar view used by the predicates (row i <-> self._records[i])
        # ---------------------------------------------------------------------
        self._frame = pd.DataFrame(
            {
                "id": pd.Series([r.id for r in self._records], dtype=object),
                "text": pd.Series([r.text for r in self._records], dtype=object),
                "difficulty": pd.Series([r.difficulty for r in self._records], dtype=object),
                "type": pd.Series([r.type for r in self._records], dtype=object),
                "domain": pd.Series([r.domain for r in self._records], dtype=object),
            }
        )

        # ---------------------------------------------------------------------
        # Caches
        # ---------------------------------------------------------------------
        self._facet_values: Optional[FacetValueSets] = None
        self._subset_cache: Dict[SubsetKey, "Dataset"] = {}

    # -------------------------------------------------------------------------
    # Facet values (cached)
    # -------------------------------------------------------------------------
    def facet_values(self) -> FacetValueSets:
        """
        Return cached distinct difficulty/type/domain values.

        Depends on the records only, so search or selection changes never
        trigger a recomputation.
        """
        if self._facet_values is None:
            self._facet_values = derive_facet_values(self._records)
        return self._facet_values

    def value_counts(self, facet: str) -> Dict[str, int]:
        """Number of records carrying each value of `facet`, in first-seen order."""
        if facet not in FACETS:
            raise ValueError(f"Unknown facet '{facet}'")

        counts: Dict[str, int] = {}
        for record in self._records:
            for value in record.values_for(facet):
                counts[value] = counts.get(value, 0) + 1
        return counts

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------
    def filter_mask(
        self,
        search_query: Optional[str] = None,
        difficulties: Optional[Iterable[str]] = None,
        types: Optional[Iterable[str]] = None,
        domains: Optional[Iterable[str]] = None,
    ) -> np.ndarray:
        """
        Boolean mask of records passing all four predicates.

        AND across predicates, OR within a facet's selection. Pure: no caching.
        """
        frame = self._frame
        return combine_masks(
            len(frame),
            [
                lambda: single_value_mask(frame["difficulty"], difficulties or ()),
                lambda: multi_value_mask(frame["type"], types or ()),
                lambda: multi_value_mask(frame["domain"], domains or ()),
                lambda: search_mask(frame["text"], search_query),
            ],
        )

    def _subset_cache_key(
        self,
        search_query: Optional[str],
        difficulties: Optional[Iterable[str]],
        types: Optional[Iterable[str]],
        domains: Optional[Iterable[str]],
    ) -> SubsetKey:

        def norm(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
            if not values:
                return ()
            return tuple(sorted(set(str(v) for v in values)))

        query = search_query if search_query and search_query.strip() else ""
        return (query, norm(difficulties), norm(types), norm(domains))

    def subset(
        self,
        search_query: Optional[str] = None,
        difficulties: Optional[Iterable[str]] = None,
        types: Optional[Iterable[str]] = None,
        domains: Optional[Iterable[str]] = None,
    ) -> "Dataset":
        """
        Return a new Dataset holding only the visible records, in source order.
        Subsets are cached to avoid recomputation.
        """
        difficulties = list(difficulties or [])
        types = list(types or [])
        domains = list(domains or [])

        key = self._subset_cache_key(search_query, difficulties, types, domains)
        cached = self._subset_cache.get(key)
        if cached is not None:
            return cached

        mask = self.filter_mask(search_query, difficulties, types, domains)
        kept = [record for record, keep in zip(self._records, mask) if keep]

        subset_ds = Dataset(
            name=self.name,
            language=self.language,
            records=kept,
            file_path=self.file_path,
        )

        self._subset_cache[key] = subset_ds

        # Prevent unbounded growth
        if len(self._subset_cache) > self.MAX_SUBSET_CACHE:
            self._subset_cache.clear()

        return subset_ds

    def subset_for_state(self, state: "FilterState") -> "Dataset":
        """
        Convenience wrapper to subset this Dataset based on a FilterState.
        """
        return self.subset(
            search_query=state.search_query,
            difficulties=state.difficulties,
            types=state.types,
            domains=state.domains,
        )

    # -------------------------------------------------------------------------
    # Cache management
    # -------------------------------------------------------------------------
    def clear_caches(self) -> None:
        """Reset caches for subsets and facet value sets."""
        self._subset_cache.clear()
        self._facet_values = None

    # -------------------------------------------------------------------------
    # Properties & getters
    # -------------------------------------------------------------------------
    @property
    def records(self) -> Tuple[QuestionRecord, ...]:
        return self._records

    @property
    def ids(self) -> List[str]:
        return [r.id for r in self._records]

    @property
    def frame(self) -> pd.DataFrame:
        """Columnar copy of the records (one row per record, source order)."""
        return self._frame.copy()

    def get(self, record_id: str) -> Optional[QuestionRecord]:
        return next((r for r in self._records if r.id == record_id), None)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[QuestionRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, language={self.language!r}, n_records={len(self)})"
