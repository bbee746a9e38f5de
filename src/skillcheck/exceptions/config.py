"""Configuration-related exceptions."""

from __future__ import annotations

from skillcheck.exceptions.base import SkillcheckError


class ConfigError(SkillcheckError, ValueError):
    """Raised when validator configuration is invalid."""
