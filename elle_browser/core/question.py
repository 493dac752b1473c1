from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, TYPE_CHECKING

from elle_browser.core.exceptions import DatasetSchemaError

if TYPE_CHECKING:
    from elle_browser.config.model import FieldMapping

FACETS: Tuple[str, ...] = ("difficulty", "type", "domain")
MULTI_VALUED_FACETS: Tuple[str, ...] = ("type", "domain")

_SCALAR_TYPES = (str, int, float)


def is_scalar(value: Any) -> bool:
    # bool is an int subclass but never a meaningful category label
    return isinstance(value, _SCALAR_TYPES) and not isinstance(value, bool)


def as_values(value: Any) -> Tuple[str, ...]:
    """
    Coerce a stored multi-valued field to an ordered tuple of distinct strings.

    - "A"            -> ("A",)
    - ["A", "B", "A"] -> ("A", "B")
    - None / []      -> ()   (no values: contributes nothing, never matches a selection)

    Anything else (dicts, sets, nested lists) is a malformed record and raises
    DatasetSchemaError.
    """
    if value is None:
        return ()

    if is_scalar(value):
        return (str(value),)

    if isinstance(value, (list, tuple)):
        values = []
        for item in value:
            if not is_scalar(item):
                raise DatasetSchemaError(
                    f"Expected a value or a list of values, got element {item!r}"
                )
            values.append(str(item))
        return tuple(dict.fromkeys(values))

    raise DatasetSchemaError(
        f"Expected a value or a list of values, got {type(value).__name__}"
    )


@dataclass(frozen=True)
class QuestionRecord:
    """
    One benchmark question.

    Fields:

    - id: stable identifier, unique within a dataset
    - text: the question itself (searched by free text)
    - difficulty: exactly one difficulty label
    - type / domain: one or more labels each, always normalised to tuples
    - extra: every other source column (reference answer etc), untouched
    """

    id: str
    text: str
    difficulty: str
    type: Tuple[str, ...]
    domain: Tuple[str, ...]
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        # Accept scalar-or-list input when constructed directly
        object.__setattr__(self, "type", as_values(self.type))
        object.__setattr__(self, "domain", as_values(self.domain))

    def values_for(self, facet: str) -> Tuple[str, ...]:
        """Return this record's values for a facet as a tuple (difficulty is a 1-tuple)."""
        if facet == "difficulty":
            return (self.difficulty,)
        if facet == "type":
            return self.type
        if facet == "domain":
            return self.domain
        raise ValueError(f"Unknown facet '{facet}'")

    @classmethod
    def from_raw(
        cls,
        raw: Mapping[str, Any],
        fields: Optional["FieldMapping"] = None,
    ) -> QuestionRecord:
        """Build a record from one source JSON object using a field mapping."""
        if fields is None:
            from elle_browser.config.model import FieldMapping

            fields = FieldMapping()

        used = set(fields.source_keys())
        extra: Dict[str, Any] = {k: v for k, v in raw.items() if k not in used}

        return cls(
            id=str(raw.get(fields.id)),
            text=str(raw.get(fields.text) or ""),
            difficulty=str(raw.get(fields.difficulty)),
            type=raw.get(fields.type),
            domain=raw.get(fields.domain),
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "difficulty": self.difficulty,
            "type": list(self.type),
            "domain": list(self.domain),
            **dict(self.extra),
        }
