"""Tests for skill document discovery."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from skillcheck.scanner.discovery import discover_documents, stable_path_key


def test_discovers_skill_files_sorted(collection_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("wp-security/escaping")
    write_skill("wp-performance")
    (collection_root / "README.md").write_text("# Skills\n", encoding="utf-8")

    found = discover_documents(collection_root, ("**/SKILL.md",))

    root = collection_root.resolve()
    assert [stable_path_key(path, root) for path in found] == [
        "wp-performance/SKILL.md",
        "wp-security/escaping/SKILL.md",
    ]


def test_root_level_skill_file_is_discovered(collection_root: Path) -> None:
    (collection_root / "SKILL.md").write_text("---\nname: root\n---\n", encoding="utf-8")

    found = discover_documents(collection_root, ("**/SKILL.md",))

    assert [path.name for path in found] == ["SKILL.md"]


def test_overlapping_globs_do_not_duplicate(collection_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("caching")

    found = discover_documents(collection_root, ("**/SKILL.md", "caching/*.md"))

    assert len(found) == 1


def test_broken_symlink_is_still_discovered(collection_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("valid")
    (collection_root / "dangling").mkdir()
    (collection_root / "dangling" / "SKILL.md").symlink_to(collection_root / "nowhere.md")

    found = discover_documents(collection_root, ("*/*.md",))

    assert [path.parent.name for path in found] == ["dangling", "valid"]


def test_directories_matching_glob_are_ignored(collection_root: Path) -> None:
    (collection_root / "odd" / "SKILL.md").mkdir(parents=True)

    assert discover_documents(collection_root, ("**/SKILL.md",)) == []


def test_stable_path_key_falls_back_to_absolute(tmp_path: Path) -> None:
    outside = tmp_path / "elsewhere" / "SKILL.md"

    assert stable_path_key(outside, tmp_path / "root") == outside.as_posix()
