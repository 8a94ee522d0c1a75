"""Summarize, list and delete scan results.

The workflow never talks to the terminal itself. Yes/no decisions come from
an injected ``confirm`` callable and everything worth showing goes to a
:class:`Presenter`, so the same flow drives the CLI and the tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Sequence

from cachescan.core.cleaner import delete_files
from cachescan.core.report import CategoryTotals, summarize, total_size
from cachescan.models.cache_file import CacheFile
from cachescan.models.category import Category
from cachescan.models.deletion_result import DeletionResult

log = logging.getLogger(__name__)

Confirm = Callable[[str], bool]

SHOW_LIST_QUESTION = "Do you want to see the full list of cache files? (y/N)"
DELETE_QUESTION = "Do you want to delete these cache files? (y/N)"


class WorkflowState(Enum):
    SCANNED = "scanned"
    SUMMARIZED = "summarized"
    RESOLVED = "resolved"


class WorkflowStateError(RuntimeError):
    """Raised when a workflow is run again after it has resolved."""


class Presenter:
    """Receives everything the workflow reports. The base class is silent."""

    def found(self, count: int, total_bytes: int) -> None:
        pass

    def category_summary(self, totals: dict[Category, CategoryTotals]) -> None:
        pass

    def file_list(self, files: Sequence[CacheFile]) -> None:
        pass

    def deleting(self) -> None:
        pass

    def deleted(self, file: CacheFile) -> None:
        pass

    def delete_failed(self, file: CacheFile, error: OSError) -> None:
        pass

    def deletion_summary(self, result: DeletionResult) -> None:
        pass

    def cancelled(self) -> None:
        pass


@dataclass(slots=True)
class WorkflowOutcome:
    """What happened during one workflow run."""

    file_count: int = 0
    total_bytes: int = 0
    totals: dict[Category, CategoryTotals] = field(default_factory=dict)
    listed: bool = False
    deletion: DeletionResult | None = None
    cancelled: bool = False


class DetectWorkflow:
    """Drives one set of scan results from SCANNED to RESOLVED.

    Takes its own copy of *files*; deletion walks that copy in the order it
    was given.
    """

    def __init__(
        self,
        files: Sequence[CacheFile],
        confirm: Confirm,
        presenter: Presenter | None = None,
    ) -> None:
        self.files = list(files)
        self.state = WorkflowState.SCANNED
        self._confirm = confirm
        self._presenter = presenter or Presenter()

    def run(self) -> WorkflowOutcome:
        """Summarize, optionally list, then delete or cancel.

        With no files the summary and both questions are skipped.
        """
        if self.state is not WorkflowState.SCANNED:
            raise WorkflowStateError(f"Workflow already {self.state.value}")

        outcome = WorkflowOutcome(file_count=len(self.files), total_bytes=total_size(self.files))
        self._presenter.found(outcome.file_count, outcome.total_bytes)

        if not self.files:
            self.state = WorkflowState.RESOLVED
            return outcome

        outcome.totals = summarize(self.files)
        self._presenter.category_summary(outcome.totals)
        self.state = WorkflowState.SUMMARIZED

        if self._confirm(SHOW_LIST_QUESTION):
            self._presenter.file_list(self.files)
            outcome.listed = True

        if self._confirm(DELETE_QUESTION):
            outcome.deletion = self._delete()
        else:
            log.info("Deletion declined, %d files left untouched", outcome.file_count)
            self._presenter.cancelled()
            outcome.cancelled = True

        self.state = WorkflowState.RESOLVED
        return outcome

    def _delete(self) -> DeletionResult:
        self._presenter.deleting()

        def on_result(file: CacheFile, error: OSError | None) -> None:
            if error is None:
                self._presenter.deleted(file)
            else:
                self._presenter.delete_failed(file, error)

        result = delete_files(self.files, on_result=on_result)
        self._presenter.deletion_summary(result)
        return result
