"""Serialize a ProjectReport to pretty-printed JSON."""

from __future__ import annotations

import json
from pathlib import Path

from codeatlas.model import ProjectReport


def report_to_dict(report: ProjectReport) -> dict:
    return {directory: node.to_dict() for directory, node in report.items()}


def report_to_json(report: ProjectReport) -> str:
    """Serialize *report*; key order follows the report's own order."""
    return json.dumps(report_to_dict(report), indent=2)


def write_json(report: ProjectReport, output_path: Path) -> str:
    """Write the report to *output_path*, replacing any previous run's file."""
    text = report_to_json(report)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text + "\n", encoding="utf-8")
    return text
