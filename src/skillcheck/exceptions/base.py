"""Base exception for skillcheck."""

from __future__ import annotations


class SkillcheckError(Exception):
    """Base class for all skillcheck errors."""
