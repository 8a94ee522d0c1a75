"""Cachescan data models."""

from cachescan.models.cache_file import CacheFile
from cachescan.models.category import Category
from cachescan.models.deletion_result import DeletionResult

__all__ = [
    "CacheFile",
    "Category",
    "DeletionResult",
]
