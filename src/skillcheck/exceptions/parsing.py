"""Parsing-related exceptions."""

from __future__ import annotations

from skillcheck.exceptions.base import SkillcheckError


class DocumentReadError(SkillcheckError):
    """Raised when a skill document cannot be read as UTF-8 text."""


class MalformedDocumentError(SkillcheckError, ValueError):
    """Raised when a skill document has no usable metadata block."""
