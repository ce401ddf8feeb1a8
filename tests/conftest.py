"""Pytest configuration and fixtures."""

from pathlib import Path
from textwrap import dedent

import pytest

from codeatlas.detect import detect_analyzer


@pytest.fixture
def analyze():
    """Analyze an in-memory source as if it lived at /project/<filename>."""

    def _analyze(filename: str, code: str, **kwargs):
        path = Path("/project") / filename
        analyzer = detect_analyzer(path, **kwargs)
        assert analyzer is not None, f"no analyzer for {filename}"
        return analyzer.analyze(path, dedent(code).lstrip("\n").encode("utf-8"))

    return _analyze


@pytest.fixture
def make_tree(tmp_path):
    """Create files from a {relative path: content} mapping under tmp_path.

    A path ending in "/" creates an empty directory.
    """

    def _make(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            target = tmp_path / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(dedent(content).lstrip("\n"))
        return tmp_path

    return _make