"""Recursive directory traversal."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

log = logging.getLogger(__name__)


def walk(root: Path | str) -> list[Path]:
    """Return every regular file below *root*.

    Depth-first over an explicit stack of pending directories, so only one
    directory listing is open at a time and deep trees cannot exhaust the
    interpreter's recursion limit. Symlinks are followed; a directory whose
    real path was already queued is not entered again, which keeps symlink
    loops finite.

    Directories that cannot be listed and entries that cannot be stat-ed
    are skipped. A missing or non-directory *root* yields an empty list.
    """
    files: list[Path] = []
    root = os.fspath(root)

    try:
        if not stat.S_ISDIR(os.stat(root).st_mode):
            log.debug("Not a directory: %s", root)
            return files
    except OSError:
        log.debug("Cannot access scan root: %s", root)
        return files

    seen = {os.path.realpath(root)}
    stack = [root]

    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        mode = entry.stat().st_mode
                    except OSError:
                        log.debug("Cannot stat: %s", entry.path)
                        continue

                    if stat.S_ISDIR(mode):
                        real = os.path.realpath(entry.path)
                        if real in seen:
                            log.debug("Already visited %s, skipping: %s", real, entry.path)
                            continue
                        seen.add(real)
                        stack.append(entry.path)
                    elif stat.S_ISREG(mode):
                        files.append(Path(entry.path))
        except OSError:
            log.debug("Cannot read directory: %s", current)

    return files
