"""Shared pytest fixtures for building skill collections on disk."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

VALID_METADATA: dict[str, str] = {
    "name": "wp-plugin-security",
    "description": "Security best practices for WordPress plugins",
    "compatibility": "WordPress 6.0+, PHP 7.4+",
    "license": "MIT",
    "author": "Plugin Review Team",
    "version": "1.0.0",
}


def render_skill(metadata: dict[str, str], body: str = "# Skill\n\nSanitize early, escape late.\n") -> str:
    """Render a skill document with a flat metadata block."""
    header = "\n".join(f"{key}: {value}" for key, value in metadata.items())
    return f"---\n{header}\n---\n{body}"


@pytest.fixture
def valid_metadata() -> dict[str, str]:
    """Return a complete metadata mapping for a valid skill document."""
    return dict(VALID_METADATA)


@pytest.fixture(name="render_skill")
def render_skill_fixture() -> Callable[..., str]:
    """Return the skill document renderer."""
    return render_skill


@pytest.fixture
def collection_root(tmp_path: Path) -> Path:
    """Return an empty collection directory."""
    root = tmp_path / "skills"
    root.mkdir()
    return root


@pytest.fixture
def write_skill(collection_root: Path) -> Callable[..., Path]:
    """Return a factory that writes ``<folder>/SKILL.md`` under the collection root."""

    def _write(folder: str, content: str | None = None, **overrides: str | None) -> Path:
        if content is None:
            metadata = {**VALID_METADATA, "name": folder, **overrides}
            content = render_skill({key: value for key, value in metadata.items() if value is not None})
        path = collection_root / folder / "SKILL.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
