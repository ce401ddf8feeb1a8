"""Walk a directory tree and assemble the per-directory project report."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from codeatlas.config import DEFAULT_MAX_FILE_SIZE
from codeatlas.detect import detect_analyzer, is_supported
from codeatlas.extractors.base import FileTooLargeError
from codeatlas.model import DirectoryNode, FileReport, ProjectReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _FileTask:
    directory: str
    path: Path


def scan_directory(
    root: Path,
    *,
    jobs: int = 1,
    exclude: list[str] | None = None,
    legacy_js_context: bool = False,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
) -> ProjectReport:
    """Return the report for every directory under *root*, *root* included.

    Directories are discovered first, in sorted order, so every node and its
    ``subfolders`` exist before any file is analyzed.  File reports are then
    folded in discovery order whether or not they were computed in parallel.
    Errors listing a directory or reading a file propagate.
    """
    structure: ProjectReport = {}
    tasks: list[_FileTask] = []
    _discover(root, structure, tasks, set(exclude or ()))
    logger.debug(
        "Discovered %d directories, %d source files", len(structure), len(tasks)
    )

    def analyze(task: _FileTask) -> FileReport:
        return analyze_file(
            task.path,
            legacy_js_context=legacy_js_context,
            max_file_size=max_file_size,
        )

    if jobs > 1 and len(tasks) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            reports = list(pool.map(analyze, tasks))
    else:
        reports = [analyze(task) for task in tasks]

    for task, report in zip(tasks, reports):
        structure[task.directory].files[task.path.name] = report

    return structure


def _discover(
    directory: Path,
    structure: ProjectReport,
    tasks: list[_FileTask],
    exclude: set[str],
) -> None:
    key = str(directory)
    node = DirectoryNode()
    structure[key] = node
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            # Symlinked directories are neither followed nor analyzed.
            if entry.is_symlink() or entry.name in exclude:
                continue
            node.subfolders.append(entry.name)
            _discover(entry, structure, tasks, exclude)
        elif is_supported(entry):
            tasks.append(_FileTask(key, entry))


def analyze_file(
    path: Path,
    *,
    legacy_js_context: bool = False,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
) -> FileReport:
    """Analyze one file, turning analysis failures into an empty report.

    Reading the file is outside the recoverable boundary: an OSError here
    aborts the scan.
    """
    analyzer = detect_analyzer(path, legacy_js_context=legacy_js_context)
    if analyzer is None:
        return FileReport.empty()

    source = path.read_bytes()
    try:
        if len(source) > max_file_size:
            raise FileTooLargeError(path, len(source), max_file_size)
        return analyzer.analyze(path, source)
    except Exception as e:
        logger.warning("Could not analyze %s: %s", path, e)
        return FileReport.empty()
