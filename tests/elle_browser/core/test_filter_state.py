from __future__ import annotations

import pytest

from elle_browser.core.dataset import FacetValueSets
from elle_browser.core.filter_state import FilterState


def test_toggle_adds_then_removes():
    st = FilterState()

    st.toggle_type("A")
    st.toggle_type("B")
    assert st.types == ["A", "B"]

    st.toggle_type("A")
    assert st.types == ["B"]


def test_toggle_twice_restores_original_selection():
    st = FilterState(difficulties=["Easy"], domains=["Water", "Air"])
    original = st.to_dict()

    for facet, value in [("difficulty", "Hard"), ("domain", "Air"), ("type", "X")]:
        st.toggle(facet, value)
        st.toggle(facet, value)

    assert st.to_dict()["difficulties"] == original["difficulties"]
    assert sorted(st.domains) == sorted(original["domains"])
    assert st.types == []


def test_toggle_unknown_facet_raises():
    with pytest.raises(ValueError):
        FilterState().toggle("topic", "x")


def test_set_search_and_is_neutral():
    st = FilterState()
    assert st.is_neutral

    st.set_search("   ")
    assert st.is_neutral

    st.set_search("flood")
    assert not st.is_neutral

    st.set_search(None)
    assert st.search_query == ""


def test_reset_clears_everything():
    st = FilterState(search_query="x", difficulties=["Easy"], types=["A"], domains=["W"])

    st.reset()

    assert st == FilterState()


def test_prune_drops_values_missing_from_facet_values():
    st = FilterState(difficulties=["Easy", "简单"], types=["A"], domains=["Water", "水环境"])
    fv = FacetValueSets(difficulties=("Easy",), types=("A", "B"), domains=("Water",))

    removed = st.prune(fv)

    assert removed == {"difficulty": ["简单"], "domain": ["水环境"]}
    assert st.difficulties == ["Easy"]
    assert st.types == ["A"]
    assert st.domains == ["Water"]


def test_cache_key_is_order_insensitive_and_blank_search_neutral():
    a = FilterState(search_query="  ", types=["B", "A"])
    b = FilterState(search_query="", types=["A", "B"])

    assert a.cache_key() == b.cache_key()
    assert hash(a.cache_key()) == hash(b.cache_key())


def test_filter_state_to_from_dict_roundtrip():
    st = FilterState(
        search_query="flood",
        difficulties=["Hard", "Easy"],
        types=["A"],
        domains=["Water", "Air"],
    )

    rebuilt = FilterState.from_dict(st.to_dict())

    assert rebuilt == st


def test_from_dict_tolerates_missing_and_null_values():
    st = FilterState.from_dict({"search_query": None, "types": None})

    assert st == FilterState()
    assert FilterState.from_dict(None) == FilterState()


def test_copy_is_independent():
    st = FilterState(types=["A"])
    clone = st.copy()

    clone.toggle_type("B")

    assert st.types == ["A"]
    assert clone.types == ["A", "B"]
