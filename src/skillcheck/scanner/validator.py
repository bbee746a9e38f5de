"""Skill document validator: scan a collection and report every violation."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from skillcheck.config import SkillcheckConfig, load_config
from skillcheck.constants.config import NAME_FIELD
from skillcheck.constants.discovery import BYTES_PER_MB
from skillcheck.exceptions import CollectionNotFoundError, DocumentReadError, MalformedDocumentError
from skillcheck.model import (
    CollectionReport,
    DuplicateName,
    FileResult,
    IOFailure,
    MalformedDocument,
    MissingField,
    SkillDocument,
    Violation,
)
from skillcheck.parsers import parse_skill_document
from skillcheck.scanner.discovery import discover_documents, stable_path_key
from skillcheck.scanner.format_rules import check_metadata_format

logger = logging.getLogger(__name__)


def validate(
    collection_path: Path,
    config: SkillcheckConfig | None = None,
    *,
    config_path: Path | None = None,
) -> Iterator[FileResult]:
    """Validate every skill document under *collection_path*.

    The collection path and config are checked eagerly, so
    :class:`CollectionNotFoundError` and :class:`ConfigError` are raised by
    this call itself. Per-file results are then produced lazily, one per
    discovered file, in lexicographic path order. Each call re-scans the
    collection from scratch.
    """
    root = resolve_collection_root(collection_path)
    if config is None:
        config = load_config(root, config_path)
    return _iter_results(root, config)


def validate_collection(
    collection_path: Path,
    config: SkillcheckConfig | None = None,
    *,
    config_path: Path | None = None,
) -> CollectionReport:
    """Run :func:`validate` to completion and aggregate the results."""
    root = resolve_collection_root(collection_path)
    results = tuple(validate(root, config, config_path=config_path))
    report = CollectionReport(root=root, results=results)
    logger.debug(
        "Validated %d document(s) under %s: %d failed",
        report.files_checked,
        root,
        report.files_failed,
    )
    return report


def resolve_collection_root(collection_path: Path) -> Path:
    """Resolve the collection root, raising if it is not a readable directory."""
    root = collection_path.resolve()
    if not root.exists():
        raise CollectionNotFoundError(f"collection path does not exist: {root}")
    if not root.is_dir():
        raise CollectionNotFoundError(f"collection path is not a directory: {root}")
    if not os.access(root, os.R_OK | os.X_OK):
        raise CollectionNotFoundError(f"collection path is not readable: {root}")
    return root


def _iter_results(root: Path, config: SkillcheckConfig) -> Iterator[FileResult]:
    first_seen: dict[str, Path] = {}
    paths = discover_documents(root, config.document_globs)
    logger.debug("Discovered %d document(s) under %s", len(paths), root)

    for path in paths:
        violations = _check_file(path, config, first_seen)
        if violations:
            logger.debug("%s: %d violation(s)", stable_path_key(path, root), len(violations))
        yield FileResult(path=path, violations=tuple(violations))


def _check_file(path: Path, config: SkillcheckConfig, first_seen: dict[str, Path]) -> list[Violation]:
    size_failure = _check_size(path, config.max_file_mb)
    if size_failure is not None:
        return [size_failure]

    try:
        document = parse_skill_document(path)
    except DocumentReadError as exc:
        return [IOFailure(path=path, reason=str(exc))]
    except MalformedDocumentError as exc:
        return [MalformedDocument(path=path, reason=str(exc))]

    violations: list[Violation] = [
        MissingField(path=path, key=key) for key in config.required_fields if not _has_value(document, key)
    ]
    if config.strict_format:
        violations.extend(check_metadata_format(path, document.metadata))

    duplicate = _register_name(document, first_seen)
    if duplicate is not None:
        violations.append(duplicate)
    return violations


def _check_size(path: Path, max_file_mb: int) -> IOFailure | None:
    try:
        size = path.stat().st_size
    except OSError as exc:
        return IOFailure(path=path, reason=f"cannot stat file: {exc.strerror or exc}")
    if size > max_file_mb * BYTES_PER_MB:
        return IOFailure(path=path, reason=f"file is {size} bytes, exceeds the {max_file_mb} MB limit")
    return None


def _has_value(document: SkillDocument, key: str) -> bool:
    return bool(document.metadata.get(key, "").strip())


def _register_name(document: SkillDocument, first_seen: dict[str, Path]) -> DuplicateName | None:
    """Record the document's name, returning a violation if it was already taken."""
    if not _has_value(document, NAME_FIELD):
        return None
    name = (document.name or "").strip()
    first_path = first_seen.setdefault(name, document.path)
    if first_path == document.path:
        return None
    return DuplicateName(path=document.path, name=name, first_path=first_path)
