"""Shared utility functions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Sequence

if TYPE_CHECKING:
    from cachescan.models.cache_file import CacheFile

log = logging.getLogger(__name__)


def remove_files(
    files: Sequence[CacheFile],
    *,
    on_result: Callable[[CacheFile, OSError | None], None] | None = None,
) -> tuple[int, int, list[str]]:
    """Remove cache files and return (freed_bytes, files_removed, errors).

    Unlike a best-effort cleanup, a file that is already gone counts as a
    failure: the user asked for it to be deleted and it was not.

    Args:
        files: CacheFile items to remove, processed in order.
        on_result: Called after each attempt with the error, or None.
    """
    freed = 0
    removed = 0
    errors: list[str] = []

    for file in files:
        try:
            file.path.unlink()
        except OSError as e:
            log.debug("Cannot delete %s: %s", file.path, e)
            errors.append(f"{file.path}: {e}")
            if on_result:
                on_result(file, e)
            continue
        removed += 1
        freed += file.size_bytes
        if on_result:
            on_result(file, None)

    return freed, removed, errors


def bytes_to_human(size_bytes: int) -> str:
    """Convert byte count to a human-readable string."""
    if size_bytes < 0:
        return f"-{bytes_to_human(-size_bytes)}"
    if size_bytes == 0:
        return "0 B"

    units = ("B", "KB", "MB", "GB", "TB")
    value = float(size_bytes)
    for unit in units[:-1]:
        if abs(value) < 1024:
            return f"{value:.1f} {unit}" if unit != "B" else f"{int(value)} B"
        value /= 1024
    return f"{value:.1f} {units[-1]}"


def size_unit(size_bytes: int) -> str:
    """Return the unit ``bytes_to_human`` picks for *size_bytes*."""
    return bytes_to_human(size_bytes).rsplit(" ", 1)[-1]


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"
