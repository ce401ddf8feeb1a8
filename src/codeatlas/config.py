"""Scan settings read from .codeatlas.toml or [tool.codeatlas] in pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("output.json")

# tree-sitter memory use grows quickly with file size.
DEFAULT_MAX_FILE_SIZE = 5_000_000


@dataclass
class ScanConfig:
    """Settings for one scan; None output means DEFAULT_OUTPUT."""

    output: Path | None = None
    jobs: int = 1
    exclude: list[str] = field(default_factory=list)
    legacy_js_context: bool = False
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


def load_config(project_dir: Path) -> ScanConfig:
    """Read scan settings for *project_dir*, falling back to defaults."""
    data = _read_table(project_dir)
    config = ScanConfig()
    if not data:
        return config

    output = data.get("output")
    if isinstance(output, str) and output:
        # Relative paths in the config file are relative to the project.
        config.output = project_dir / output
    jobs = data.get("jobs")
    if isinstance(jobs, int) and jobs > 0:
        config.jobs = jobs
    exclude = data.get("exclude")
    if isinstance(exclude, list):
        config.exclude = [str(name) for name in exclude]
    legacy = data.get("legacy_js_context")
    if isinstance(legacy, bool):
        config.legacy_js_context = legacy
    max_size = data.get("max_file_size")
    if isinstance(max_size, int) and max_size > 0:
        config.max_file_size = max_size

    logger.debug("Loaded config: %s", config)
    return config


def _read_table(project_dir: Path) -> dict | None:
    # Try .codeatlas.toml first
    codeatlas_toml = project_dir / ".codeatlas.toml"
    if codeatlas_toml.exists():
        try:
            with open(codeatlas_toml, "rb") as f:
                data = tomllib.load(f)
            return data.get("codeatlas", None)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Ignoring %s: %s", codeatlas_toml, e)

    # Fall back to [tool.codeatlas] in pyproject.toml
    pyproject = project_dir / "pyproject.toml"
    if pyproject.exists():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            return data.get("tool", {}).get("codeatlas", None)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Ignoring %s: %s", pyproject, e)

    return None
