"""Cache file categories."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """Bucket a cache file is reported under.

    The value is the display name. Every cache file maps to exactly one
    category; ``OTHER`` catches whatever no rule claims.
    """

    BROWSER = "Browser"
    SYSTEM = "System"
    APPLICATION = "Application"
    LOG = "Log"
    TEMPORARY = "Temporary"
    BACKUP = "Backup"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value
