from __future__ import annotations

from typing import Any, List, Sequence, TYPE_CHECKING

from elle_browser.core.question import is_scalar
from elle_browser.validation.errors import ValidationError, ValidationIssue

if TYPE_CHECKING:
    from elle_browser.config.model import FieldMapping


def _label(row: dict, fields: "FieldMapping", i: int) -> str:
    rid = row.get(fields.id)
    return f"row {i} (id={rid!r})" if rid is not None else f"row {i}"


def _check_multi_valued(
    issues: List[ValidationIssue], row: dict, key: str, facet: str, where: str
) -> None:
    if key not in row:
        issues.append(ValidationIssue(f"RECORD_{facet.upper()}_MISSING", f"{where}: missing '{key}'."))
        return

    value = row[key]
    if value is None or (isinstance(value, (list, tuple)) and not value):
        # Loadable, but the record will never match a selection on this facet
        issues.append(
            ValidationIssue(
                f"RECORD_{facet.upper()}_EMPTY",
                f"{where}: '{key}' has no values.",
                severity="warning",
            )
        )
        return

    if is_scalar(value):
        return

    if isinstance(value, (list, tuple)) and all(is_scalar(v) for v in value):
        return

    issues.append(
        ValidationIssue(
            f"RECORD_{facet.upper()}_TYPE",
            f"{where}: '{key}' must be a value or a list of values, got {value!r}.",
        )
    )


def validate_raw_records(rows: Sequence[Any], fields: "FieldMapping") -> List[ValidationIssue]:
    """
    Validate raw question rows BEFORE building QuestionRecords.

    Raises ValidationError listing every error found. Returns the remaining
    warning-level issues (e.g. empty type/domain lists) for the caller to log.
    """
    issues: List[ValidationIssue] = []
    seen_ids: set[str] = set()

    for i, row in enumerate(rows):
        if not isinstance(row, dict):
            issues.append(ValidationIssue("RECORD_NOT_OBJECT", f"row {i} must be an object."))
            continue

        where = _label(row, fields, i)

        rid = row.get(fields.id)
        if rid is None or str(rid).strip() == "":
            issues.append(ValidationIssue("RECORD_ID_MISSING", f"{where}: missing '{fields.id}'."))
        elif str(rid) in seen_ids:
            issues.append(ValidationIssue("RECORD_ID_DUPLICATE", f"{where}: duplicate id."))
        else:
            seen_ids.add(str(rid))

        text = row.get(fields.text)
        if not isinstance(text, str):
            issues.append(
                ValidationIssue("RECORD_TEXT", f"{where}: '{fields.text}' must be a string.")
            )

        difficulty = row.get(fields.difficulty)
        if difficulty is None:
            issues.append(
                ValidationIssue("RECORD_DIFFICULTY_MISSING", f"{where}: missing '{fields.difficulty}'.")
            )
        elif not is_scalar(difficulty):
            issues.append(
                ValidationIssue(
                    "RECORD_DIFFICULTY_TYPE",
                    f"{where}: '{fields.difficulty}' must be a single value, got {difficulty!r}.",
                )
            )

        _check_multi_valued(issues, row, fields.type, "type", where)
        _check_multi_valued(issues, row, fields.domain, "domain", where)

    errors = [i for i in issues if i.is_error]
    if errors:
        raise ValidationError(errors)

    return issues
