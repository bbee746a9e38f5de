"""Constants for filesystem discovery of skill documents."""

from __future__ import annotations

BYTES_PER_MB: int = 1024 * 1024
