from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Tuple

from elle_browser.config.model import DatasetConfig, GlobalConfig
from elle_browser.core.dataset import Dataset
from elle_browser.core.dataset_loader import DatasetConfigError, from_config
from elle_browser.core.exceptions import ConfigError, DatasetSchemaError
from elle_browser.validation.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_UI_TITLE = "Environmental LLM Evaluation - ELLE"
DEFAULT_LANGUAGE = "en"


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory using the multi-file layout.

    Expected structure:

        root/
            global.json
            datasets/
                questions-en.json
                questions-zh.json
                ...

    Each file in 'datasets/' is parsed into a DatasetConfig. The resulting GlobalConfig includes:

    - ui_title: fallback page title, defaults to 'Environmental LLM Evaluation - ELLE'
    - default_language: language shown on start-up, defaults to 'en'
    - datasets: list of DatasetConfigs
    - data_root: root directory for question files; relative values are resolved
                 against 'root'
    - reference_url: link shown next to the title (paper / dataset page)

    :param root: Directory containing 'global.json' and optionally 'datasets/'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if a JSON file can't be parsed.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    raw_global = _read_json(global_path)
    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    datasets_dir = root / "datasets"
    datasets: List[DatasetConfig] = []

    if datasets_dir.is_dir():
        files = sorted(datasets_dir.glob("*.json"))
        for idx, config_file in enumerate(files):
            # Ignore macOS 'Apple Double' files (._*)
            if config_file.name.startswith("._"):
                continue

            raw = _read_json(config_file)
            if not isinstance(raw, dict):
                raise ConfigError(f"{config_file} must contain a JSON object")
            datasets.append(
                DatasetConfig.from_raw(raw, source_path=config_file, index=idx)
            )
    else:
        logger.warning("Datasets directory not found", extra={"path": str(datasets_dir)})

    # Absolute data_root is used as-is, relative is resolved against the config root
    data_root_raw = raw_global.get("data_root")
    data_root = Path(data_root_raw) if data_root_raw else None
    if data_root and not data_root.is_absolute():
        data_root = (root / data_root).resolve()

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", DEFAULT_UI_TITLE),
        default_language=raw_global.get("default_language", DEFAULT_LANGUAGE),
        datasets=datasets,
        data_root=data_root,
        reference_url=raw_global.get("reference_url"),
    )


def load_dataset_registry(root: Path) -> Tuple[GlobalConfig, Dict[str, DatasetConfig]]:
    """
    Load global config + dataset configs keyed by language code.

    Nothing is materialised here; DatasetManager loads lazily.
    """
    global_config = load_global_config(root)

    cfg_by_language: Dict[str, DatasetConfig] = {}
    for ds_cfg in global_config.datasets:
        try:
            language = ds_cfg.language
            ds_cfg.fields
        except (KeyError, TypeError) as e:
            logger.error(
                "Skipping invalid dataset config",
                extra={"dataset": ds_cfg.name, "path": str(ds_cfg.source_path), "error": str(e)},
            )
            continue

        if language in cfg_by_language:
            logger.warning(
                "Duplicate dataset language ignored",
                extra={"language": language, "dataset": ds_cfg.name},
            )
            continue
        cfg_by_language[language] = ds_cfg

    return global_config, cfg_by_language


def load_datasets(root: Path) -> Tuple[GlobalConfig, List[Dataset]]:
    """
    Load the global configuration and instantiate all Dataset objects.

    1. Loads the top-level GlobalConfig from 'root'.
    2. Calls `from_config` for every DatasetConfig.
    3. Skips any dataset whose config or records are invalid, logging the error.
    4. Returns only successfully materialised Dataset objects.

    :param root: Path to config directory.
    :return: A tuple of (GlobalConfig, List[Dataset]).
    :raises RuntimeError: if no valid datasets could be loaded.
    """
    global_config = load_global_config(root)

    datasets: List[Dataset] = []
    failed = 0

    for ds_cfg in global_config.datasets:
        try:
            ds = from_config(ds_cfg, data_root=global_config.data_root)
        except (DatasetConfigError, DatasetSchemaError, ValidationError) as e:
            failed += 1
            logger.error(
                "Skipping dataset due to config error",
                extra={
                    "dataset": ds_cfg.name,
                    "path": str(ds_cfg.raw.get("path", "")),
                    "error": str(e),
                },
            )
            continue

        datasets.append(ds)

    logger.info(
        "Datasets loaded from config root",
        extra={
            "config_root": str(root),
            "n_datasets": len(datasets),
            "n_failed": failed,
            "dataset_names": [ds.name for ds in datasets],
        },
    )

    if not datasets:
        raise RuntimeError(
            f"No valid datasets could be loaded from config root: {root}"
        )

    return global_config, datasets


def _read_json(path: Path):
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
