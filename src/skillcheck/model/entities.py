"""Core entities: parsed documents, violations, and validation results."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from skillcheck.constants.validation import (
    DUPLICATE_NAME,
    INVALID_FIELD,
    IO_FAILURE,
    MALFORMED_DOCUMENT,
    MISSING_FIELD,
)


def display_path(path: Path, root: Path | None = None) -> str:
    """Render *path* relative to *root* when possible."""
    if root is None:
        return path.as_posix()
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


@dataclass(frozen=True)
class SkillDocument:
    """A parsed skill document: flat metadata block plus opaque markdown body."""

    path: Path
    metadata: dict[str, str] = field(default_factory=dict)
    body: str = ""

    def _field(self, key: str) -> str | None:
        return self.metadata.get(key)

    @property
    def name(self) -> str | None:
        return self._field("name")

    @property
    def description(self) -> str | None:
        return self._field("description")

    @property
    def compatibility(self) -> str | None:
        return self._field("compatibility")

    @property
    def license(self) -> str | None:
        return self._field("license")

    @property
    def author(self) -> str | None:
        return self._field("author")

    @property
    def version(self) -> str | None:
        return self._field("version")


@dataclass(frozen=True)
class Violation(ABC):
    """A single problem found in one skill document."""

    kind: ClassVar[str]

    path: Path

    @abstractmethod
    def detail(self, root: Path | None = None) -> str:
        """Describe the problem; paths are rendered relative to *root*."""

    def format(self, root: Path | None = None) -> str:
        """Format as ``<file-path>: <violation-kind>: <detail>``."""
        return f"{display_path(self.path, root)}: {self.kind}: {self.detail(root)}"


@dataclass(frozen=True)
class MalformedDocument(Violation):
    kind: ClassVar[str] = MALFORMED_DOCUMENT

    reason: str = ""

    def detail(self, root: Path | None = None) -> str:
        return self.reason


@dataclass(frozen=True)
class MissingField(Violation):
    kind: ClassVar[str] = MISSING_FIELD

    key: str = ""

    def detail(self, root: Path | None = None) -> str:
        return f"required field `{self.key}` is missing or empty"


@dataclass(frozen=True)
class DuplicateName(Violation):
    """Raised against the second and later files declaring an already-used name."""

    kind: ClassVar[str] = DUPLICATE_NAME

    name: str = ""
    first_path: Path = Path()

    @property
    def second_path(self) -> Path:
        return self.path

    def detail(self, root: Path | None = None) -> str:
        return f"name `{self.name}` is already declared by {display_path(self.first_path, root)}"


@dataclass(frozen=True)
class IOFailure(Violation):
    kind: ClassVar[str] = IO_FAILURE

    reason: str = ""

    def detail(self, root: Path | None = None) -> str:
        return self.reason


@dataclass(frozen=True)
class InvalidField(Violation):
    kind: ClassVar[str] = INVALID_FIELD

    key: str = ""
    reason: str = ""

    def detail(self, root: Path | None = None) -> str:
        return f"`{self.key}` {self.reason}"


@dataclass(frozen=True)
class FileResult:
    """Validation outcome for one file: Ok when it carries no violations."""

    path: Path
    violations: tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations


@dataclass(frozen=True)
class CollectionReport:
    """Aggregate of per-file results for one validation run."""

    root: Path
    results: tuple[FileResult, ...] = ()

    @property
    def ok(self) -> bool:
        """True only if every file result is Ok."""
        return all(result.ok for result in self.results)

    @property
    def violations(self) -> tuple[Violation, ...]:
        return tuple(violation for result in self.results for violation in result.violations)

    @property
    def files_checked(self) -> int:
        return len(self.results)

    @property
    def files_failed(self) -> int:
        return sum(1 for result in self.results if not result.ok)

    def format_lines(self) -> list[str]:
        """Render every violation as one line, in scan order."""
        return [violation.format(self.root) for violation in self.violations]
