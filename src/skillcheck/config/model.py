"""Config data model for skillcheck runs."""

from __future__ import annotations

from dataclasses import dataclass

from skillcheck.constants.config import (
    DEFAULT_DOCUMENT_GLOBS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_REQUIRED_FIELDS,
    DEFAULT_STRICT_FORMAT,
)


@dataclass(frozen=True)
class SkillcheckConfig:
    """Resolved validator config."""

    document_globs: tuple[str, ...] = DEFAULT_DOCUMENT_GLOBS
    required_fields: tuple[str, ...] = DEFAULT_REQUIRED_FIELDS
    max_file_mb: int = DEFAULT_MAX_FILE_MB
    strict_format: bool = DEFAULT_STRICT_FORMAT
