"""Tests for violation rendering and result aggregation."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillcheck.model import (
    CollectionReport,
    DuplicateName,
    FileResult,
    InvalidField,
    IOFailure,
    MalformedDocument,
    MissingField,
    Violation,
)

ROOT = Path("/collection")


def test_violation_lines_use_root_relative_paths() -> None:
    path = ROOT / "caching" / "SKILL.md"

    assert MissingField(path=path, key="license").format(ROOT) == (
        "caching/SKILL.md: MissingField: required field `license` is missing or empty"
    )
    assert MalformedDocument(path=path, reason="bad block").format(ROOT) == (
        "caching/SKILL.md: MalformedDocument: bad block"
    )
    assert IOFailure(path=path, reason="cannot read file").format(ROOT) == (
        "caching/SKILL.md: IOFailure: cannot read file"
    )
    assert InvalidField(path=path, key="name", reason="must be lowercase").format(ROOT) == (
        "caching/SKILL.md: InvalidField: `name` must be lowercase"
    )


def test_duplicate_name_mentions_first_path() -> None:
    violation = DuplicateName(path=ROOT / "b" / "SKILL.md", name="foo", first_path=ROOT / "a" / "SKILL.md")

    assert violation.second_path == ROOT / "b" / "SKILL.md"
    assert violation.format(ROOT) == "b/SKILL.md: DuplicateName: name `foo` is already declared by a/SKILL.md"


def test_format_without_root_uses_full_path() -> None:
    path = ROOT / "a" / "SKILL.md"

    assert MissingField(path=path, key="name").format().startswith("/collection/a/SKILL.md: MissingField:")


def test_collection_report_aggregates_results() -> None:
    bad_path = ROOT / "b" / "SKILL.md"
    report = CollectionReport(
        root=ROOT,
        results=(
            FileResult(path=ROOT / "a" / "SKILL.md"),
            FileResult(
                path=bad_path,
                violations=(MissingField(path=bad_path, key="name"), MissingField(path=bad_path, key="license")),
            ),
        ),
    )

    assert not report.ok
    assert report.files_checked == 2
    assert report.files_failed == 1
    assert [v.key for v in report.violations] == ["name", "license"]
    assert len(report.format_lines()) == 2


def test_violation_base_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        Violation(path=ROOT)  # type: ignore[abstract]


def test_empty_report_is_ok() -> None:
    assert CollectionReport(root=ROOT).ok
