"""Collection scanning and validation for skillcheck."""

from .discovery import discover_documents
from .validator import resolve_collection_root, validate, validate_collection

__all__ = ["discover_documents", "resolve_collection_root", "validate", "validate_collection"]
