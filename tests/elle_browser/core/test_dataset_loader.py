import json

import pytest

from elle_browser.config.model import DatasetConfig
from elle_browser.core.dataset_loader import (
    DatasetConfigError,
    from_config,
    load_records,
    resolve_path,
)
from elle_browser.validation.errors import ValidationError


def _cfg(raw, tmp_path):
    return DatasetConfig.from_raw(raw, source_path=tmp_path / "cfg.json", index=0)


def test_from_config_builds_dataset_with_custom_fields(tmp_path):
    rows = [
        {"qid": "a", "prompt": "Flooding risk", "level": "Easy", "kind": "K", "area": ["Water"], "Answer": "x"},
        {"qid": "b", "prompt": "Haze", "level": "Hard", "kind": ["K", "R"], "area": "Air"},
    ]
    path = tmp_path / "q.json"
    path.write_text(json.dumps(rows))

    cfg = _cfg(
        {
            "name": "Custom",
            "language": "en",
            "path": str(path),
            "fields": {"id": "qid", "text": "prompt", "difficulty": "level", "type": "kind", "domain": "area"},
        },
        tmp_path,
    )

    ds = from_config(cfg)

    assert ds.name == "Custom"
    assert ds.language == "en"
    assert ds.file_path == path
    assert ds.ids == ["a", "b"]
    assert ds.get("a").extra == {"Answer": "x"}
    assert ds.facet_values().types == ("K", "R")


def test_from_config_reads_jsonl(tmp_path):
    path = tmp_path / "q.jsonl"
    path.write_text(
        "\n".join(
            json.dumps(r)
            for r in [
                {"Number": 1, "Question": "a", "Difficulty": "Easy", "Type": "A", "Domain": "W"},
                {"Number": 2, "Question": "b", "Difficulty": "Easy", "Type": "A", "Domain": "W"},
            ]
        )
        + "\n"
    )

    ds = from_config(_cfg({"language": "en", "path": str(path)}, tmp_path))

    assert ds.ids == ["1", "2"]


def test_from_config_missing_file(tmp_path):
    cfg = _cfg({"language": "en", "path": str(tmp_path / "nope.json")}, tmp_path)

    with pytest.raises(DatasetConfigError, match="not found"):
        from_config(cfg)


def test_from_config_missing_language(tmp_path):
    cfg = _cfg({"path": "q.json"}, tmp_path)

    with pytest.raises(DatasetConfigError):
        from_config(cfg)


def test_from_config_unknown_field_mapping_key(tmp_path):
    cfg = _cfg({"language": "en", "path": "q.json", "fields": {"answer": "Answer"}}, tmp_path)

    with pytest.raises(DatasetConfigError):
        from_config(cfg)


def test_from_config_rejects_malformed_records(tmp_path):
    path = tmp_path / "q.json"
    path.write_text(json.dumps([{"Number": 1, "Question": "a", "Difficulty": "Easy", "Type": {"x": 1}, "Domain": "W"}]))

    with pytest.raises(ValidationError) as exc_info:
        from_config(_cfg({"language": "en", "path": str(path)}, tmp_path))

    assert [i.code for i in exc_info.value.issues] == ["RECORD_TYPE_TYPE"]


def test_load_records_requires_array(tmp_path):
    path = tmp_path / "q.json"
    path.write_text(json.dumps({"Number": 1}))

    with pytest.raises(DatasetConfigError, match="JSON array"):
        load_records(path)


def test_resolve_path_uses_env_root_and_strips_data_prefix(tmp_path, monkeypatch):
    (tmp_path / "q.json").write_text("[]")
    monkeypatch.setenv("ELLE_BROWSER_DATA_ROOT", str(tmp_path))

    from pathlib import Path

    assert resolve_path(Path("q.json")) == tmp_path / "q.json"
    assert resolve_path(Path("data/q.json")) == tmp_path / "q.json"


def test_resolve_path_falls_back_to_data_root(tmp_path, monkeypatch):
    monkeypatch.delenv("ELLE_BROWSER_DATA_ROOT", raising=False)
    from pathlib import Path

    assert resolve_path(Path("q.json"), data_root=tmp_path) == tmp_path / "q.json"
    assert resolve_path(Path("q.json")) == Path("q.json")
    assert resolve_path(tmp_path / "abs.json", data_root=Path("/elsewhere")) == tmp_path / "abs.json"
