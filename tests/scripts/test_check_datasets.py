import importlib.util
import json
from pathlib import Path

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "check_datasets.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("check_datasets", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _write_config(tmp_path: Path, rows) -> Path:
    config_root = tmp_path / "config"
    (config_root / "datasets").mkdir(parents=True)
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "en.json").write_text(json.dumps(rows), encoding="utf-8")
    (config_root / "global.json").write_text(
        json.dumps({"ui_title": "T", "default_language": "en", "data_root": "../data"})
    )
    (config_root / "datasets" / "en.json").write_text(
        json.dumps({"name": "English", "language": "en", "path": "en.json"})
    )
    return config_root


def test_check_datasets_prints_facet_summary(tmp_path, capsys):
    rows = [
        {"Number": 1, "Question": "q1", "Difficulty": "Easy", "Type": ["A", "B"], "Domain": "Water"},
        {"Number": 2, "Question": "q2", "Difficulty": "Hard", "Type": "A", "Domain": ["Water", "Air"]},
    ]
    config_root = _write_config(tmp_path, rows)

    _load_script().check_datasets(config_root)

    out = capsys.readouterr().out
    assert "records" in out
    assert "A (2), B (1)" in out
    assert "Water (2), Air (1)" in out


def test_check_datasets_reports_invalid_dataset(tmp_path, capsys):
    rows = [{"Number": 1, "Question": "q1", "Difficulty": "Easy", "Type": {"bad": 1}, "Domain": "Water"}]
    config_root = _write_config(tmp_path, rows)

    _load_script().check_datasets(config_root)

    out = capsys.readouterr().out
    assert "English" in out
    assert "Error:" in out
