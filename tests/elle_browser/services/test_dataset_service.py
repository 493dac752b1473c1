import json

import pytest

from elle_browser.config.model import DatasetConfig
from elle_browser.core.dataset_loader import DatasetConfigError
from elle_browser.services.dataset_service import DatasetManager


def _make_manager(tmp_path):
    rows = [{"Number": 1, "Question": "q", "Difficulty": "Easy", "Type": "A", "Domain": "W"}]
    (tmp_path / "en.json").write_text(json.dumps(rows))

    cfg_by_language = {
        "en": DatasetConfig.from_raw(
            {"name": "English", "language": "en", "path": "en.json"},
            source_path=tmp_path / "questions-en.json",
            index=0,
        ),
        "zh": DatasetConfig.from_raw(
            {"name": "Chinese", "language": "zh", "path": "missing.json"},
            source_path=tmp_path / "questions-zh.json",
            index=1,
        ),
    }
    return DatasetManager(cfg_by_language, data_root=tmp_path)


def test_lazy_loading_and_caching(tmp_path, monkeypatch):
    monkeypatch.delenv("ELLE_BROWSER_DATA_ROOT", raising=False)
    manager = _make_manager(tmp_path)

    assert list(manager) == ["en", "zh"]
    assert len(manager) == 2
    assert not manager.is_loaded("en")

    ds = manager["en"]

    assert manager.is_loaded("en")
    assert manager["en"] is ds
    assert ds.ids == ["1"]


def test_unknown_language_is_a_key_error(tmp_path):
    manager = _make_manager(tmp_path)

    assert manager.get("fr") is None
    assert "fr" not in manager
    with pytest.raises(KeyError):
        manager["fr"]


def test_load_error_is_raised_and_not_cached(tmp_path, monkeypatch):
    monkeypatch.delenv("ELLE_BROWSER_DATA_ROOT", raising=False)
    manager = _make_manager(tmp_path)

    with pytest.raises(DatasetConfigError):
        manager["zh"]
    assert not manager.is_loaded("zh")


def test_refresh_config_drops_loaded_datasets(tmp_path, monkeypatch):
    monkeypatch.delenv("ELLE_BROWSER_DATA_ROOT", raising=False)
    manager = _make_manager(tmp_path)
    manager["en"]

    manager.refresh_config({})

    assert len(manager) == 0
    assert not manager.is_loaded("en")


def test_membership_does_not_load(tmp_path, monkeypatch):
    monkeypatch.delenv("ELLE_BROWSER_DATA_ROOT", raising=False)
    manager = _make_manager(tmp_path)

    # zh points at a missing file; asking whether it is configured must not fail
    assert "zh" in manager
    assert "en" in manager
    assert not manager.is_loaded("zh")
    assert not manager.is_loaded("en")
