"""Shared fixtures for fileutils tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


def write_file(path: Path, content: str | bytes, mode: int = 0o644) -> Path:
    """Write a file (creating parents) and set its permission bits explicitly."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    os.chmod(path, mode)
    return path


def file_mode(path: Path) -> int:
    return path.stat().st_mode & 0o7777


def snapshot_tree(root: Path) -> dict[str, tuple[str, int, bytes | None]]:
    """Map each relative path under root to (kind, mode, content)."""
    result: dict[str, tuple[str, int, bytes | None]] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        if path.is_dir():
            result[rel] = ("dir", file_mode(path), None)
        else:
            result[rel] = ("file", file_mode(path), path.read_bytes())
    return result


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temp directory and chdir into it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def sample_tree(workdir: Path) -> Path:
    """Build a/ with f.txt (0644, "hi") and b/g.txt (0600, "yo")."""
    src = workdir / "a"
    src.mkdir()
    write_file(src / "f.txt", "hi", 0o644)
    (src / "b").mkdir()
    write_file(src / "b" / "g.txt", "yo", 0o600)
    return src
