"""Pick the analyzer for a source file from its extension."""

from __future__ import annotations

from pathlib import Path

from codeatlas.extractors.base import FileAnalyzer
from codeatlas.extractors.ecmascript import component_analyzer, module_analyzer
from codeatlas.extractors.generic import RULES, GenericAnalyzer

# Extension (without the dot) -> generic rule table name.
_GENERIC_EXTENSIONS = {
    "py": "python",
    "java": "java",
    "cpp": "cpp",
    "c": "c",
    "go": "go",
}

_MODULE_EXTENSIONS = {"js", "ts"}
_COMPONENT_EXTENSIONS = {"jsx", "tsx"}

SUPPORTED_EXTENSIONS = frozenset(
    {*_GENERIC_EXTENSIONS, *_MODULE_EXTENSIONS, *_COMPONENT_EXTENSIONS}
)


def extension_of(path: Path) -> str:
    return path.suffix[1:]


def is_supported(path: Path) -> bool:
    return extension_of(path) in SUPPORTED_EXTENSIONS


def detect_analyzer(
    path: Path, *, legacy_js_context: bool = False
) -> FileAnalyzer | None:
    """Return the analyzer for *path*, or None for unrecognized extensions."""
    ext = extension_of(path)
    if ext in _COMPONENT_EXTENSIONS:
        return component_analyzer(legacy_context=legacy_js_context)
    if ext in _MODULE_EXTENSIONS:
        return module_analyzer(legacy_context=legacy_js_context)
    language = _GENERIC_EXTENSIONS.get(ext)
    if language is not None:
        return GenericAnalyzer(RULES[language])
    return None
