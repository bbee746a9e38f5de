"""Format rules for metadata values, expressed as a JSON Schema."""

from __future__ import annotations

from pathlib import Path

from jsonschema import Draft202012Validator

from skillcheck.constants.validation import METADATA_FORMAT_SCHEMA
from skillcheck.model import InvalidField

_FORMAT_VALIDATOR = Draft202012Validator(METADATA_FORMAT_SCHEMA)


def check_metadata_format(path: Path, metadata: dict[str, str]) -> list[InvalidField]:
    """Return one violation per metadata field that fails its format rule.

    Missing and blank values are skipped; those are presence problems,
    not format problems.
    """
    present = {key: value for key, value in metadata.items() if value.strip()}
    violations: list[InvalidField] = []
    for error in sorted(_FORMAT_VALIDATOR.iter_errors(present), key=lambda e: [str(p) for p in e.path]):
        key = str(error.path[0]) if error.path else ""
        expected = error.schema.get("description") if isinstance(error.schema, dict) else None
        reason = f"must be {expected}" if expected else error.message
        violations.append(InvalidField(path=path, key=key, reason=f"{reason} (got {error.instance!r})"))
    return violations
