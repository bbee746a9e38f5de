"""Parsers for skill documents."""

from __future__ import annotations

from .skill_markdown import parse_skill_document, read_document_text

__all__ = ["parse_skill_document", "read_document_text"]
