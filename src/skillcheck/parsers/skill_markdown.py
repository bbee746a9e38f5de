"""Parser for skill documents with a flat YAML metadata block."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillcheck.constants.parsing import FRONTMATTER_DELIMITER, UTF8_BOM
from skillcheck.exceptions import DocumentReadError, MalformedDocumentError
from skillcheck.model import SkillDocument


def read_document_text(path: Path) -> str:
    """Read a skill document as UTF-8 text with any leading BOM removed."""
    try:
        raw_text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentReadError(f"file is not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise DocumentReadError(f"cannot read file: {exc.strerror or exc}") from exc
    return raw_text.lstrip(UTF8_BOM)


def parse_skill_document(path: Path) -> SkillDocument:
    """Parse a skill document into its metadata mapping and markdown body.

    Raises :class:`DocumentReadError` when the file cannot be read and
    :class:`MalformedDocumentError` when the metadata block is absent,
    unterminated, or not a flat key-value mapping.
    """
    lines = read_document_text(path).splitlines()

    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        raise MalformedDocumentError(f"missing opening `{FRONTMATTER_DELIMITER}` metadata marker")

    block_end = _find_block_end(lines)
    if block_end is None:
        raise MalformedDocumentError(f"missing closing `{FRONTMATTER_DELIMITER}` metadata marker")

    block_text = "\n".join(lines[1:block_end])
    try:
        payload = yaml.load(block_text, Loader=yaml.BaseLoader) if block_text.strip() else None
    except yaml.YAMLError as exc:
        raise MalformedDocumentError(f"metadata block is not valid YAML: {_first_line(exc)}") from exc

    return SkillDocument(
        path=path,
        metadata=_flatten_metadata(payload),
        body="\n".join(lines[block_end + 1 :]).strip(),
    )


def _find_block_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() == FRONTMATTER_DELIMITER:
            return index
    return None


def _flatten_metadata(payload: Any) -> dict[str, str]:
    """Check that a loaded payload is a flat ``str -> str`` mapping.

    The block is loaded with ``BaseLoader`` so every scalar keeps its source
    text (``1.10`` stays ``"1.10"``, ``010`` stays ``"010"``); empty values
    load as ``""``.
    """
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise MalformedDocumentError(
            f"metadata block must be a key-value mapping, got {type(payload).__name__}"
        )

    metadata: dict[str, str] = {}
    for key, value in payload.items():
        if isinstance(value, (dict, list)):
            raise MalformedDocumentError(f"metadata value for `{key}` must be a scalar, got {type(value).__name__}")
        metadata[key] = value
    return metadata


def _first_line(exc: yaml.YAMLError) -> str:
    return str(exc).splitlines()[0] if str(exc) else type(exc).__name__
