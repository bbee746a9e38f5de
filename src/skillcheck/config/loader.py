"""Config loading and normalization for skillcheck runs."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Any

import yaml

from skillcheck.config.model import SkillcheckConfig
from skillcheck.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_DOCUMENT_GLOBS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_REQUIRED_FIELDS,
    DEFAULT_STRICT_FORMAT,
    NAME_FIELD,
)
from skillcheck.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> SkillcheckConfig:
    """Load and validate config from ``skillcheck.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillcheckConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        hints = [f"`{key}`" + _suggest_key(key, ALLOWED_CONFIG_KEYS) for key in unknown]
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(hints)}")

    document_globs = _ensure_string_list(raw.get("document_globs", list(DEFAULT_DOCUMENT_GLOBS)), "document_globs")
    if not document_globs:
        raise ConfigError("document_globs must contain at least one pattern")
    for pattern in document_globs:
        _check_glob_pattern(pattern)

    required_fields = _ensure_string_list(
        raw.get("required_fields", list(DEFAULT_REQUIRED_FIELDS)),
        "required_fields",
    )
    if NAME_FIELD not in required_fields:
        raise ConfigError(f"required_fields must include `{NAME_FIELD}`")

    max_file_mb = raw.get("max_file_mb", DEFAULT_MAX_FILE_MB)
    if isinstance(max_file_mb, bool) or not isinstance(max_file_mb, int) or max_file_mb <= 0:
        raise ConfigError("max_file_mb must be a positive integer")

    strict_format = raw.get("strict_format", DEFAULT_STRICT_FORMAT)
    if not isinstance(strict_format, bool):
        raise ConfigError("strict_format must be a boolean")

    logger.debug("Loaded config from %s", path)
    return SkillcheckConfig(
        document_globs=tuple(document_globs),
        required_fields=tuple(dict.fromkeys(required_fields)),
        max_file_mb=max_file_mb,
        strict_format=strict_format,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of non-blank strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return [item.strip() for item in value if item.strip()]


def _check_glob_pattern(pattern: str) -> None:
    """Reject patterns that would match outside the collection root."""
    if Path(pattern).is_absolute() or pattern.startswith(("/", "\\")):
        raise ConfigError(f"document_globs pattern `{pattern}` must be relative to the collection root")
    if ".." in Path(pattern).parts:
        raise ConfigError(f"document_globs pattern `{pattern}` must not contain `..`")


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a ' (did you mean ...)' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f" (did you mean `{matches[0]}`?)"
    return ""
