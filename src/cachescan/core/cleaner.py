"""Deletion of scanned cache files."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from cachescan.models.cache_file import CacheFile
from cachescan.models.deletion_result import DeletionResult
from cachescan.utils import remove_files

log = logging.getLogger(__name__)

DeleteCallback = Callable[[CacheFile, OSError | None], None]  # (file, error or None)


def delete_files(files: Sequence[CacheFile], on_result: DeleteCallback | None = None) -> DeletionResult:
    """Delete every file in *files*, in order.

    A failure on one file never stops the rest. ``on_result`` fires once
    per file with the error that occurred, or None on success.
    """
    freed, removed, errors = remove_files(files, on_result=on_result)
    if errors:
        log.warning("Failed to delete %d of %d files", len(errors), len(files))
    log.info("Deleted %d files, freed %d bytes", removed, freed)
    return DeletionResult(freed_bytes=freed, files_removed=removed, errors=errors)
