"""Core data models for skillcheck."""

from .entities import (
    CollectionReport,
    DuplicateName,
    FileResult,
    InvalidField,
    IOFailure,
    MalformedDocument,
    MissingField,
    SkillDocument,
    Violation,
    display_path,
)

__all__ = [
    "CollectionReport",
    "DuplicateName",
    "FileResult",
    "IOFailure",
    "InvalidField",
    "MalformedDocument",
    "MissingField",
    "SkillDocument",
    "Violation",
    "display_path",
]
