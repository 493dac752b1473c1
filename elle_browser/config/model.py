from __future__ import annotations

from dataclasses import dataclass, fields as dc_fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class FieldMapping:
    """
    Source JSON keys for the semantic fields used internally by the app.

    Defaults match the published ELLE question files.
    """

    id: str = "Number"
    text: str = "Question"
    difficulty: str = "Difficulty"
    type: str = "Type"
    domain: str = "Domain"

    def source_keys(self) -> Tuple[str, ...]:
        return tuple(getattr(self, f.name) for f in dc_fields(self))

    def as_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in dc_fields(self)}


@dataclass
class DatasetConfig:
    """
    Parsed config entry for a single language's question file.
    """

    raw: Dict[str, Any]
    source_path: Path
    index: int

    @property
    def name(self) -> str:
        return self.raw.get("name", f"Dataset {self.index}")

    @property
    def language(self) -> str:
        """Language code this dataset is selected by (e.g. 'en', 'zh')."""
        language = self.raw.get("language")
        if not language:
            raise KeyError(f"No 'language' in dataset config: {self.raw}")
        return str(language)

    @property
    def path(self) -> Path:
        """
        Return the question file path for this dataset.

        Supports both:
        - new schema:  "path": "data/questions-en.json"
        - legacy:      "file": "data/questions-en.json"
        """
        raw_path = self.raw.get("path") or self.raw.get("file")
        if raw_path is None:
            raise KeyError(f"No 'path' or 'file' in dataset config: {self.raw}")
        return Path(raw_path)

    @property
    def fields(self) -> FieldMapping:
        """
        Return the semantic field mapping as a FieldMapping instance.

        If 'fields' is missing or partial, unspecified fields use the ELLE defaults.
        """
        raw_fields = self.raw.get("fields", {}) or {}
        return FieldMapping(**raw_fields)

    @classmethod
    def from_raw(
        cls, raw: Dict[str, Any], source_path: Path, index: int
    ) -> DatasetConfig:
        return cls(raw=raw, source_path=source_path, index=index)


@dataclass
class GlobalConfig:
    ui_title: str
    default_language: str
    datasets: List[DatasetConfig]
    data_root: Optional[Path] = None
    reference_url: Optional[str] = None
