from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List, Optional, TYPE_CHECKING

from elle_browser.core.dataset import Dataset
from elle_browser.core.question import QuestionRecord
from elle_browser.validation.dataset_validation import validate_raw_records

if TYPE_CHECKING:
    from elle_browser.config.model import DatasetConfig

logger = logging.getLogger(__name__)


class DatasetConfigError(ValueError):
    """
    Raised when a dataset config is structurally invalid for loading.
    """
    pass


def resolve_path(path: Path, data_root: Optional[Path] = None) -> Path:
    """
    Resolve a dataset path.

    Relative paths are looked up under ELLE_BROWSER_DATA_ROOT (if set), then
    under `data_root`, and otherwise left relative to the working directory.
    """
    if path.is_absolute():
        return path

    env_root = os.environ.get("ELLE_BROWSER_DATA_ROOT")
    root = Path(env_root) if env_root else data_root
    if root is None:
        return path

    resolved = root / path

    # Fallback for redundant 'data/' prefix
    if not resolved.is_file() and path.parts and path.parts[0] == "data":
        alt_path = root / Path(*path.parts[1:])
        if alt_path.is_file():
            resolved = alt_path

    return resolved


def load_records(path: Path) -> List[Any]:
    """
    Read raw question rows from a JSON array file or a JSONL file.
    """
    try:
        with path.open(encoding="utf-8") as f:
            if path.suffix == ".jsonl":
                rows = [json.loads(line) for line in f if line.strip()]
            else:
                rows = json.load(f)
    except json.JSONDecodeError as e:
        raise DatasetConfigError(f"Invalid JSON in question file {path}: {e}") from e

    if not isinstance(rows, list):
        raise DatasetConfigError(
            f"Question file {path} must contain a JSON array, got {type(rows).__name__}"
        )
    return rows


def from_config(cfg: "DatasetConfig", data_root: Optional[Path] = None) -> Dataset:
    """
    Materialise a Dataset from a DatasetConfig.
    """
    try:
        raw_path = cfg.path
        language = cfg.language
        fields = cfg.fields
    except (KeyError, TypeError) as e:
        raise DatasetConfigError(str(e)) from e

    path = resolve_path(raw_path, data_root)
    if not path.is_file():
        raise DatasetConfigError(f"Question file not found at {path}.")

    rows = load_records(path)

    warnings = validate_raw_records(rows, fields)
    for issue in warnings:
        logger.warning(
            issue.message,
            extra={"dataset": cfg.name, "path": str(path), "code": issue.code},
        )

    records = [QuestionRecord.from_raw(row, fields) for row in rows]

    logger.info(
        "Dataset loaded",
        extra={"dataset": cfg.name, "language": language, "n_records": len(records)},
    )

    return Dataset(
        name=cfg.name,
        language=language,
        records=records,
        file_path=path,
    )
