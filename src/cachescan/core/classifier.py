"""Heuristics that decide whether a path is a cache file and which category it falls in.

Both checks look at the path string only; nothing here touches the filesystem.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Callable

from cachescan.models.category import Category

CACHE_EXTENSIONS = (
    ".cache", ".tmp", ".temp", ".swp", ".swo", ".bak",
    ".log", ".old", ".backup", ".crdownload", ".part",
)

CACHE_DIRECTORIES = frozenset({
    "cache", "caches", ".cache", "temp", ".temp", "tmp", ".tmp",
    "logs", ".logs", "backup", ".backup", "old", ".old",
})

CACHE_NAME_PATTERNS = (
    "cache", "temp", "tmp", "log", "backup", "old", ".swp", ".swo",
    "crdownload", "part", "~$", ".ds_store",
)

_BROWSER_PATTERNS = ("chrome", "firefox", "edge", "safari", "browser", "mozilla")
_TEMP_PATTERNS = (".tmp", ".temp", ".swp", ".swo", ".crdownload", ".part", "tmp", "temp")
_BACKUP_PATTERNS = (".bak", ".backup", ".old", "backup")
_SYSTEM_PATTERNS = ("system", ".cache", "cache")
_APP_PATTERNS = ("app", "application", ".app")

# (file_name, full_path), both lowercased
Predicate = Callable[[str, str], bool]


def _path_contains(*patterns: str) -> Predicate:
    return lambda name, path: any(p in path for p in patterns)


def _name_or_path_contains(*patterns: str) -> Predicate:
    return lambda name, path: any(p in name or p in path for p in patterns)


def _is_log(name: str, path: str) -> bool:
    return name.endswith(".log") or "log" in path


# Evaluated top to bottom, first match wins. A path that matches both the
# log and the temporary patterns (``access.log.tmp``) is a Log.
RULES: tuple[tuple[Predicate, Category], ...] = (
    (_path_contains(*_BROWSER_PATTERNS), Category.BROWSER),
    (_is_log, Category.LOG),
    (_name_or_path_contains(*_TEMP_PATTERNS), Category.TEMPORARY),
    (_name_or_path_contains(*_BACKUP_PATTERNS), Category.BACKUP),
    (_path_contains(*_SYSTEM_PATTERNS), Category.SYSTEM),
    (_path_contains(*_APP_PATTERNS), Category.APPLICATION),
)


def is_cache_file(path: PurePath | str) -> bool:
    """Coarse filter applied to every discovered file.

    Matches on the file name's extension, the name of the directory that
    directly contains the file, or substrings of the file name. A path
    without a file name or without a named parent (``report.bak``,
    ``/x.log``) is never a cache file.
    """
    path = PurePath(path)
    name = path.name.lower()
    parent_name = path.parent.name.lower()
    if not name or not parent_name:
        return False

    if name.endswith(CACHE_EXTENSIONS):
        return True
    if parent_name in CACHE_DIRECTORIES:
        return True
    return any(pattern in name for pattern in CACHE_NAME_PATTERNS)


def classify(path: PurePath | str) -> Category:
    """Return the category of a cache file, judged on its whole path."""
    path = PurePath(path)
    name = path.name.lower()
    if not name:
        return Category.OTHER

    full = str(path).lower()
    for matches, category in RULES:
        if matches(name, full):
            return category
    return Category.OTHER
