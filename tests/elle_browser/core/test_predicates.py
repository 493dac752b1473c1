import pandas as pd

from elle_browser.core.predicates import (
    combine_masks,
    multi_value_mask,
    search_mask,
    single_value_mask,
)


def test_search_mask_is_case_insensitive_substring():
    text = pd.Series(["Flooding risk in deltas", "Air quality", "FLOOD plains"], dtype=object)

    assert search_mask(text, "flood").tolist() == [True, False, True]
    assert search_mask(text, "FLOOD").tolist() == [True, False, True]
    assert search_mask(text, "floodx").tolist() == [False, False, False]


def test_search_mask_treats_regex_characters_literally():
    text = pd.Series(["PM2.5 levels", "PM205 levels"], dtype=object)

    assert search_mask(text, "pm2.5").tolist() == [True, False]


def test_blank_search_is_neutral():
    text = pd.Series(["a", "b"], dtype=object)

    assert search_mask(text, "").tolist() == [True, True]
    assert search_mask(text, "   ").tolist() == [True, True]
    assert search_mask(text, None).tolist() == [True, True]


def test_single_value_mask():
    values = pd.Series(["Easy", "Hard", "Medium"], dtype=object)

    assert single_value_mask(values, []).tolist() == [True, True, True]
    assert single_value_mask(values, ["Hard", "Easy"]).tolist() == [True, True, False]


def test_multi_value_mask_matches_any_selected_value():
    values = pd.Series([("A", "B"), ("A",), ("C",)], dtype=object)

    assert multi_value_mask(values, []).tolist() == [True, True, True]
    assert multi_value_mask(values, ["B"]).tolist() == [True, False, False]
    assert multi_value_mask(values, ["B", "C"]).tolist() == [True, False, True]


def test_multi_value_mask_record_without_values_never_matches_a_selection():
    values = pd.Series([(), ("A",)], dtype=object)

    assert multi_value_mask(values, ["A"]).tolist() == [False, True]
    assert multi_value_mask(values, []).tolist() == [True, True]


def test_combine_masks_short_circuits_once_nothing_survives():
    import numpy as np

    calls = []

    def nothing():
        calls.append("nothing")
        return np.zeros(3, dtype=bool)

    def everything():
        calls.append("everything")
        return np.ones(3, dtype=bool)

    mask = combine_masks(3, [nothing, everything])

    assert mask.tolist() == [False, False, False]
    assert calls == ["nothing"]
