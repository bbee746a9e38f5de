"""File discovery for skill document collections."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def discover_documents(root: Path, document_globs: tuple[str, ...]) -> list[Path]:
    """Discover skill documents by configured glob patterns.

    Every match that is not a directory is returned, including broken
    symlinks, so unreadable and oversized files still get a result. Paths
    are sorted by their root-relative POSIX path, which is the order used to
    decide which of two files declaring the same name comes first.
    """
    discovered: set[Path] = set()
    resolved_root = root.resolve()

    for pattern in document_globs:
        for path in resolved_root.glob(pattern):
            if path.is_dir():
                continue
            if not path.is_file() and not path.is_symlink():
                logger.debug("Skipping %s: not a regular file", path)
                continue
            discovered.add(path)

    return sorted(discovered, key=lambda path: stable_path_key(path, resolved_root))


def stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()
