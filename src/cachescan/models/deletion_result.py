"""Deletion result dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class DeletionResult:
    """Result of deleting a batch of cache files.

    Only files that were actually removed count toward ``freed_bytes``
    and ``files_removed``. Each failure leaves one ``"<path>: <error>"``
    message in ``errors``.
    """

    freed_bytes: int = 0
    files_removed: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def files_failed(self) -> int:
        return len(self.errors)
