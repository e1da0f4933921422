"""
Generate the static visualization site: one page per task plus the index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from ..config import SiteConfig
from ..errors import FileSystemError, VisualizationError
from ..render import INDEX_FILENAME, render_index_page, render_task_page, task_page_filename
from ..tasks import TASK_SUFFIX, Dataset, Task, load_task
from ..util import ensure_directory, write_text_file

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    """
    Stores what a build produced.

    Attributes:
        tasks_dir: Directory the task files were read from.
        output_dir: Directory the pages were written to.
        pages_written: Task pages in the order they were written.
        index_path: Location of index.html once written.
        tasks_indexed: Number of tasks shown on the index.
        empty_tasks: Identifiers of tasks without examples.
    """
    tasks_dir: Path
    output_dir: Path
    pages_written: List[Path] = field(default_factory=list)
    index_path: Optional[Path] = None
    tasks_indexed: int = 0
    empty_tasks: List[str] = field(default_factory=list)

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Tasks directory", str(self.tasks_dir))
        yield ("Output directory", str(self.output_dir))
        yield ("Task pages written", str(len(self.pages_written)))
        yield ("Tasks on index", str(self.tasks_indexed))
        yield ("Tasks without examples", str(len(self.empty_tasks)))
        yield ("Index", str(self.index_path) if self.index_path else "not written")


def resolve_directory(path: Path) -> Path:
    """Absolute form of a configured directory; relative paths use the working directory."""
    return Path(path).expanduser().resolve()


def discover_task_files(tasks_dir: Path | str) -> List[Path]:
    """
    List the `*.json` task files directly inside a directory, sorted by name.

    Raises:
        FileSystemError: If the directory is missing or cannot be listed.
    """
    directory = Path(tasks_dir)
    if not directory.is_dir():
        raise FileSystemError("task directory does not exist", path=directory)
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise FileSystemError(f"unable to list task directory: {exc.strerror or exc}", path=directory) from exc
    return sorted(
        (entry for entry in entries if entry.suffix == TASK_SUFFIX and entry.is_file()),
        key=lambda entry: entry.name,
    )


def build_task_page(task_path: Path, output_dir: Path, config: SiteConfig) -> tuple[Task, Path]:
    """
    Parse one task file and write its page.

    Errors raised without a location are re-raised naming the task file.
    """
    try:
        task = load_task(task_path)
        document = render_task_page(task, config)
    except VisualizationError as exc:
        if exc.path is None:
            raise type(exc)(exc.detail, path=task_path) from exc
        raise
    destination = write_text_file(output_dir / task_page_filename(task.identifier), document)
    logger.debug("Wrote %s (%d examples)", destination, task.example_count)
    return task, destination


def build_site(config: SiteConfig) -> BuildReport:
    """
    Rebuild every page for the configured task directory.

    Task pages are written as each file is parsed; the index is written last.
    The first failure aborts the build, so pages for later tasks are not written.

    Args:
        config: Build settings.

    Returns:
        A BuildReport detailing the files written.

    Raises:
        VisualizationError: On the first unreadable, malformed, or unwritable file.
    """
    tasks_dir = resolve_directory(config.tasks_dir)
    output_dir = ensure_directory(resolve_directory(config.output_dir))
    report = BuildReport(tasks_dir=tasks_dir, output_dir=output_dir)

    task_files = discover_task_files(tasks_dir)
    logger.info("Found %d task files in %s", len(task_files), tasks_dir)

    dataset = Dataset()
    for task_path in task_files:
        task, destination = build_task_page(task_path, output_dir, config)
        dataset.add(task)
        report.pages_written.append(destination)
        if task.is_empty:
            logger.info("Task %s has no examples; leaving it off the index", task.identifier)
            report.empty_tasks.append(task.identifier)

    index_html = render_index_page(dataset, config)
    report.index_path = write_text_file(output_dir / INDEX_FILENAME, index_html)
    report.tasks_indexed = sum(1 for _ in dataset.non_empty())

    logger.info(
        "Wrote %d task pages and %s to %s",
        len(report.pages_written),
        INDEX_FILENAME,
        output_dir,
    )
    return report
