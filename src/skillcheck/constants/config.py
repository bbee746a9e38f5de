"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillcheck.yaml"
DEFAULT_MAX_FILE_MB: int = 2
DEFAULT_DOCUMENT_GLOBS: tuple[str, ...] = ("**/SKILL.md",)
DEFAULT_REQUIRED_FIELDS: tuple[str, ...] = ("name", "description", "license")
DEFAULT_STRICT_FORMAT: bool = True

NAME_FIELD: str = "name"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "document_globs",
        "required_fields",
        "max_file_mb",
        "strict_format",
    }
)
