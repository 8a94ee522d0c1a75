"""Scan orchestration: walk, filter, describe."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence

from cachescan.core.classifier import is_cache_file
from cachescan.core.walker import walk
from cachescan.models.cache_file import CacheFile

log = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]  # (current, total)


def scan(root: Path | str, on_progress: ProgressCallback | None = None) -> list[CacheFile]:
    """Find cache files below *root*.

    Paths keep the root exactly as given; categories are judged on
    the whole path string. Files sitting directly under a bare relative
    root such as ``.`` have no named parent and are never cache files.

    Args:
        root: Directory to scan.
        on_progress: Optional callback receiving (current, total) after
            each walked file is considered.

    Returns:
        Cache file descriptors in walk order.
    """
    root = Path(root)
    log.info("Walking %s", root)
    paths = walk(root)
    return scan_paths(paths, on_progress=on_progress)


def scan_paths(paths: Sequence[Path], on_progress: ProgressCallback | None = None) -> list[CacheFile]:
    """Filter already-walked *paths* down to cache file descriptors.

    Candidates that vanished or stopped being regular files since the walk
    are dropped. A failing progress callback is logged and ignored.
    """
    total = len(paths)
    files: list[CacheFile] = []

    for index, path in enumerate(paths, 1):
        if on_progress:
            try:
                on_progress(index, total)
            except Exception:
                log.debug("Progress callback failed at %d/%d", index, total, exc_info=True)

        if not is_cache_file(path):
            continue
        cache_file = CacheFile.from_path(path)
        if cache_file is not None:
            files.append(cache_file)

    log.info("Found %d cache files among %d files", len(files), total)
    return files
