"""
Vectorised record predicates.

Every function takes a column of the dataset frame and returns a numpy boolean
mask aligned with it. An empty selection (or a blank search query) is the
neutral element: it yields an all-True mask.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

import numpy as np
import pandas as pd


def _all_true(series: pd.Series) -> np.ndarray:
    return np.ones(len(series), dtype=bool)


def search_mask(text: pd.Series, query: Optional[str]) -> np.ndarray:
    """Case-insensitive plain substring match of `query` inside each text."""
    if query is None or not query.strip():
        return _all_true(text)

    needle = query.casefold()
    return (
        text.astype(str)
        .str.casefold()
        .str.contains(needle, regex=False)
        .to_numpy(dtype=bool)
    )


def single_value_mask(values: pd.Series, selected: Iterable[str]) -> np.ndarray:
    """True where the record's single value is one of `selected`."""
    selected = list(selected)
    if not selected:
        return _all_true(values)
    return values.isin(selected).to_numpy(dtype=bool)


def multi_value_mask(values: pd.Series, selected: Iterable[str]) -> np.ndarray:
    """True where the record's value tuple shares at least one value with `selected`."""
    wanted = set(selected)
    if not wanted:
        return _all_true(values)
    return np.fromiter(
        (not wanted.isdisjoint(v) for v in values),
        dtype=bool,
        count=len(values),
    )


def combine_masks(n: int, predicates: List[Callable[[], np.ndarray]]) -> np.ndarray:
    """
    AND the masks produced by `predicates` together.

    Predicates are evaluated lazily; once nothing survives the rest are skipped.
    """
    mask = np.ones(n, dtype=bool)
    for predicate in predicates:
        if not mask.any():
            break
        mask &= predicate()
    return mask
