"""CLI interface for cachescan."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Sequence

import click

from cachescan.core.report import CategoryTotals
from cachescan.core.scanner import scan_paths
from cachescan.core.walker import walk
from cachescan.core.workflow import DetectWorkflow, Presenter
from cachescan.models.cache_file import CacheFile
from cachescan.models.category import Category
from cachescan.models.deletion_result import DeletionResult
from cachescan.utils import bytes_to_human, format_elapsed, size_unit

_UNIT_COLORS = {
    "TB": "red",
    "GB": "yellow",
    "MB": "green",
    "KB": "blue",
    "B": "magenta",
}


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _format_size(size_bytes: int) -> str:
    return click.style(bytes_to_human(size_bytes), fg=_UNIT_COLORS.get(size_unit(size_bytes), "cyan"))


def _confirm(question: str) -> bool:
    """Ask a yes/no question; only a line reading 'y' (any case) is yes."""
    click.echo(f"\n{click.style(question, fg='yellow')}")
    answer = click.get_text_stream("stdin").readline()
    return answer.strip().lower() == "y"


class ClickPresenter(Presenter):
    """Prints workflow events to the terminal."""

    def found(self, count: int, total_bytes: int) -> None:
        click.echo(
            f"\n{click.style('[OK!]', fg='green')} Found {click.style(str(count), fg='cyan')} "
            f"cache files totaling {_format_size(total_bytes)}"
        )

    def category_summary(self, totals: dict[Category, CategoryTotals]) -> None:
        click.echo(f"\n{click.style('Category Summary:', fg='blue', bold=True)}")
        for category, entry in totals.items():
            click.echo(
                f"  {click.style(category.value, fg='cyan')}: "
                f"{click.style(str(entry.count), fg='cyan')} files ({_format_size(entry.total_bytes)})"
            )

    def file_list(self, files: Sequence[CacheFile]) -> None:
        click.echo(f"\n{click.style('Cache files:', fg='blue', bold=True)}")
        for file in files:
            click.echo(
                f"  {click.style(file.name, fg='yellow')} ({_format_size(file.size_bytes)}) "
                f"[{click.style(file.category.value, fg='magenta')}]\n    {file.path}"
            )

    def deleting(self) -> None:
        click.echo(f"\n{click.style('🗑️', fg='red')} Deleting cache files...")

    def deleted(self, file: CacheFile) -> None:
        click.echo(f"  {click.style('[OK!]', fg='green')} Deleted {file.path}")

    def delete_failed(self, file: CacheFile, error: OSError) -> None:
        click.echo(
            f"  {click.style('[Failed!]', fg='red')} Failed to delete {file.path}: "
            f"{click.style(str(error), fg='red')}"
        )

    def deletion_summary(self, result: DeletionResult) -> None:
        click.echo(
            f"\n{click.style('[OK!]', fg='green')} Deleted {click.style(str(result.files_removed), fg='cyan')} "
            f"files totaling {_format_size(result.freed_bytes)}"
        )

    def cancelled(self) -> None:
        click.echo(f"\n{click.style('[OK!]', fg='green')} Deletion canceled")


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def main(verbose: int) -> None:
    """Cachescan: find and remove cache, log, temp and backup files."""
    _setup_logging(verbose)


@main.command()
@click.argument("path", required=False, type=click.Path(path_type=Path))
def detect(path: Path | None) -> None:
    """Detect cache files under PATH (default: current directory)."""
    root = path if path is not None else Path(".")
    click.echo(f"{click.style('[Scan:]', fg='yellow')} Scanning for cache files in {root}")
    click.echo(f"{click.style('[Running!]', fg='yellow')} Traversing directory structure...")

    start = time.monotonic()
    paths = walk(root)
    with click.progressbar(length=len(paths), label="Scanning files", show_pos=True) as bar:
        files = scan_paths(paths, on_progress=lambda current, total: bar.update(1))
    click.echo(f"Scan completed in {format_elapsed(time.monotonic() - start)}")

    DetectWorkflow(files, confirm=_confirm, presenter=ClickPresenter()).run()
