"""Constants for metadata-block parsing."""

from __future__ import annotations

FRONTMATTER_DELIMITER: str = "---"
UTF8_BOM: str = "\ufeff"
