"""Violation kinds and metadata format rules."""

from __future__ import annotations

from typing import Any

MALFORMED_DOCUMENT: str = "MalformedDocument"
MISSING_FIELD: str = "MissingField"
DUPLICATE_NAME: str = "DuplicateName"
IO_FAILURE: str = "IOFailure"
INVALID_FIELD: str = "InvalidField"

NAME_PATTERN: str = r"^[a-z0-9]+(-[a-z0-9]+)*$"
VERSION_PATTERN: str = r"^\d+(\.\d+){0,2}([-+][0-9A-Za-z.-]+)?$"

# Format rules only; presence of required fields is checked separately.
METADATA_FORMAT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "pattern": NAME_PATTERN,
            "description": "lowercase words joined by single hyphens",
        },
        "version": {
            "type": "string",
            "pattern": VERSION_PATTERN,
            "description": "semantic-version-like string such as 1.2.0",
        },
    },
}
