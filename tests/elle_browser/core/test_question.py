import pytest

from elle_browser.config.model import FieldMapping
from elle_browser.core.exceptions import DatasetSchemaError
from elle_browser.core.question import QuestionRecord, as_values


def test_as_values_scalar_and_list_are_equivalent():
    assert as_values("A") == ("A",)
    assert as_values(["A"]) == ("A",)
    assert as_values(("A", "B")) == ("A", "B")


def test_as_values_drops_duplicates_keeping_first_seen_order():
    assert as_values(["B", "A", "B"]) == ("B", "A")


def test_as_values_stringifies_numbers():
    assert as_values(3) == ("3",)
    assert as_values([1, "x"]) == ("1", "x")


def test_as_values_none_and_empty_give_no_values():
    assert as_values(None) == ()
    assert as_values([]) == ()


@pytest.mark.parametrize("bad", [{"a": 1}, {"A", "B"}, [["A"]], [None], True])
def test_as_values_rejects_malformed_fields(bad):
    with pytest.raises(DatasetSchemaError):
        as_values(bad)


def test_record_normalises_scalar_type_and_domain():
    scalar = QuestionRecord(id="1", text="t", difficulty="Easy", type="A", domain="Water")
    listed = QuestionRecord(id="1", text="t", difficulty="Easy", type=["A"], domain=["Water"])

    assert scalar == listed
    assert scalar.type == ("A",)
    assert scalar.domain == ("Water",)


def test_from_raw_uses_field_mapping_and_keeps_extra_columns():
    raw = {
        "Number": 7,
        "Question": "Flooding risk?",
        "Difficulty": "Hard",
        "Type": "Reasoning",
        "Domain": ["Water", "Ecology"],
        "Answer": "Wetlands",
    }

    record = QuestionRecord.from_raw(raw, FieldMapping())

    assert record.id == "7"
    assert record.text == "Flooding risk?"
    assert record.difficulty == "Hard"
    assert record.type == ("Reasoning",)
    assert record.domain == ("Water", "Ecology")
    assert record.extra == {"Answer": "Wetlands"}


def test_from_raw_with_custom_mapping():
    fields = FieldMapping(id="qid", text="prompt", difficulty="level", type="kind", domain="area")
    raw = {"qid": "q1", "prompt": "p", "level": "Easy", "kind": ["K"], "area": "Air"}

    record = QuestionRecord.from_raw(raw, fields)

    assert record.id == "q1"
    assert record.values_for("domain") == ("Air",)
    assert record.values_for("difficulty") == ("Easy",)


def test_values_for_unknown_facet_raises():
    record = QuestionRecord(id="1", text="t", difficulty="Easy", type="A", domain="W")
    with pytest.raises(ValueError):
        record.values_for("topic")
