"""Collection-level exceptions."""

from __future__ import annotations

from skillcheck.exceptions.base import SkillcheckError


class CollectionNotFoundError(SkillcheckError):
    """Raised when the collection path is missing, not a directory, or unreadable."""
