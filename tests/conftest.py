"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from cachescan.core.classifier import classify
from cachescan.models.cache_file import CacheFile


@pytest.fixture
def cache_tree(tmp_path):
    """Create a small project tree with a mix of cache and regular files.

    Returns (root, expected cache file paths).
    """
    root = tmp_path / "project"
    root.mkdir()

    (root / "notes.txt").write_bytes(b"n" * 10)
    (root / "server.log").write_bytes(b"l" * 100)
    (root / "report.bak").write_bytes(b"b" * 200)

    build = root / "build" / "tmp"
    build.mkdir(parents=True)
    (build / "obj.o").write_bytes(b"o" * 300)

    src = root / "src"
    src.mkdir()
    (src / "main.py").write_bytes(b"print()\n")
    (src / ".main.py.swp").write_bytes(b"s" * 50)

    expected = {
        root / "server.log",
        root / "report.bak",
        build / "obj.o",
        src / ".main.py.swp",
    }
    return root, expected


@pytest.fixture
def make_cache_file():
    """Factory that writes *size* bytes at a path and returns its descriptor."""

    def _make(path: Path, size: int) -> CacheFile:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        return CacheFile(path=path, size_bytes=size, category=classify(path))

    return _make
