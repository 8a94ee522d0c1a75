"""Per-category aggregation of scan results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from cachescan.models.cache_file import CacheFile
from cachescan.models.category import Category


@dataclass(slots=True)
class CategoryTotals:
    """File count and byte total for one category."""

    count: int = 0
    total_bytes: int = 0


def summarize(files: Iterable[CacheFile]) -> dict[Category, CategoryTotals]:
    """Group cache files by category.

    Only categories that occur are present. Callers must not rely on the
    iteration order.
    """
    totals: dict[Category, CategoryTotals] = {}
    for file in files:
        entry = totals.setdefault(file.category, CategoryTotals())
        entry.count += 1
        entry.total_bytes += file.size_bytes
    return totals


def total_size(files: Iterable[CacheFile]) -> int:
    """Sum of the recorded sizes."""
    return sum(f.size_bytes for f in files)
