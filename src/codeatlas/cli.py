"""Command-line interface for codeatlas."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from codeatlas.pipeline import run


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="codeatlas",
        description="Scan a source tree and report functions, call edges and imports as JSON.",
    )
    parser.add_argument(
        "project_dir",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Root directory to scan (default: current directory)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output JSON file path (default: output.json)",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=None,
        help="Number of files to analyze in parallel (default: 1)",
    )
    parser.add_argument(
        "--legacy-js-context",
        action="store_true",
        default=None,
        help="Credit JS/TS calls to the most recently declared function, as older releases did",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not echo the report to standard output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("codeatlas").setLevel(logging.DEBUG)

    if args.jobs is not None and args.jobs < 1:
        parser.error("--jobs must be at least 1")

    run(
        args.project_dir,
        output=args.output,
        jobs=args.jobs,
        legacy_js_context=args.legacy_js_context,
        echo=not args.quiet,
    )
