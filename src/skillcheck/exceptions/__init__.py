"""Shared exception hierarchy for skillcheck."""

from __future__ import annotations

from .base import SkillcheckError
from .config import ConfigError
from .parsing import DocumentReadError, MalformedDocumentError
from .scanning import CollectionNotFoundError

__all__ = [
    "CollectionNotFoundError",
    "ConfigError",
    "DocumentReadError",
    "MalformedDocumentError",
    "SkillcheckError",
]
