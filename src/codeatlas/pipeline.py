"""Orchestrator: configure → walk → serialize."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from codeatlas.config import DEFAULT_OUTPUT, load_config
from codeatlas.model import ProjectReport
from codeatlas.renderer.json_report import write_json
from codeatlas.walker import scan_directory

logger = logging.getLogger(__name__)


def run(
    project_dir: Path,
    *,
    output: Path | None = None,
    jobs: int | None = None,
    legacy_js_context: bool | None = None,
    echo: bool = True,
) -> ProjectReport:
    """Scan *project_dir*, write the JSON report and return it.

    Arguments left as None take their value from the project's config.
    A missing, non-directory or unlistable root logs an error and exits
    with status 1.
    """
    project_dir = project_dir.resolve()
    if not project_dir.is_dir():
        logger.error("Not a readable directory: %s", project_dir)
        sys.exit(1)
    try:
        next(project_dir.iterdir(), None)
    except OSError as e:
        logger.error("Cannot list directory %s: %s", project_dir, e)
        sys.exit(1)

    config = load_config(project_dir)
    if output is not None:
        config.output = output
    if jobs is not None:
        config.jobs = jobs
    if legacy_js_context is not None:
        config.legacy_js_context = legacy_js_context

    report = scan_directory(
        project_dir,
        jobs=config.jobs,
        exclude=config.exclude,
        legacy_js_context=config.legacy_js_context,
        max_file_size=config.max_file_size,
    )

    file_count = sum(len(node.files) for node in report.values())
    logger.debug("Analyzed %d files in %d directories", file_count, len(report))

    out_path = config.output or DEFAULT_OUTPUT
    text = write_json(report, out_path)
    if echo:
        print(text)

    logger.info("Generated %s", out_path)
    return report
