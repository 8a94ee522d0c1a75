"""Cache file descriptor."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from cachescan.models.category import Category

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CacheFile:
    """Single cache file found during a scan.

    ``size_bytes`` is captured when the file is discovered and is not
    re-checked before deletion.
    """

    path: Path
    size_bytes: int
    category: Category

    @property
    def name(self) -> str:
        return self.path.name

    @classmethod
    def from_path(cls, path: Path | str) -> CacheFile | None:
        """Stat *path* and build a descriptor for it.

        Symlinks are followed. Returns None when the lookup fails or the
        target is not a regular file (vanished, directory, broken link).
        """
        from cachescan.core.classifier import classify

        path = Path(path)
        try:
            st = os.stat(path)
        except OSError:
            log.debug("Cannot stat candidate: %s", path)
            return None

        if not stat.S_ISREG(st.st_mode):
            log.debug("Not a regular file, dropping: %s", path)
            return None

        return cls(path=path, size_bytes=st.st_size, category=classify(path))
