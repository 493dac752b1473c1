from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional

from elle_browser.config.model import DatasetConfig
from elle_browser.core.dataset import Dataset
from elle_browser.core.dataset_loader import DatasetConfigError, from_config

logger = logging.getLogger(__name__)


class DatasetManager(Mapping[str, Dataset]):
    """
    Central service for managing the per-language datasets.
    Implements the Mapping interface (dict-like, keyed by language code) so
    datasets are loaded lazily and transparently for the UI layer.
    """

    def __init__(
        self,
        cfg_by_language: Dict[str, DatasetConfig],
        data_root: Optional[Path] = None,
    ):
        self._cfg_by_language = cfg_by_language
        self._data_root = data_root
        self._loaded: Dict[str, Dataset] = {}

    def __getitem__(self, language: str) -> Dataset:
        # 1. Fast path: already materialised
        if language in self._loaded:
            return self._loaded[language]

        # 2. Check config existence
        cfg = self._cfg_by_language.get(language)
        if cfg is None:
            raise KeyError(f"Unknown dataset language '{language}'")

        # 3. Lazy load
        try:
            logger.info("Lazy-loading dataset", extra={"dataset": cfg.name, "language": language})
            ds = from_config(cfg, data_root=self._data_root)
        except DatasetConfigError as e:
            logger.error(
                "Dataset config error on load",
                extra={"dataset": cfg.name, "error": str(e)},
            )
            raise
        except Exception:
            logger.exception(
                "Unexpected error while loading dataset",
                extra={"dataset": cfg.name},
            )
            raise

        self._loaded[language] = ds
        return ds

    def __contains__(self, language: object) -> bool:
        # Configured is enough; membership must not trigger a load
        return language in self._cfg_by_language

    def __iter__(self) -> Iterator[str]:
        return iter(self._cfg_by_language)

    def __len__(self) -> int:
        return len(self._cfg_by_language)

    def is_loaded(self, language: str) -> bool:
        return language in self._loaded

    def refresh_config(self, new_cfg_by_language: Dict[str, DatasetConfig]) -> None:
        """
        Update the configuration map and drop every loaded dataset.
        """
        self._cfg_by_language = new_cfg_by_language
        self._loaded.clear()
