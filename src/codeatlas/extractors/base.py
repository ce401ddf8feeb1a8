"""Analyzer protocol and the per-file report builder shared by all backends."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from codeatlas.model import CallEdge, FileReport, FunctionRecord, SourceLocation


class AnalysisError(Exception):
    """Base class for failures confined to a single file."""


class ParseError(AnalysisError):
    """Raised when a file cannot be parsed by its grammar."""

    def __init__(self, file_path: Path, language: str, detail: str = ""):
        self.file_path = file_path
        self.language = language
        message = f"Failed to parse {file_path} as {language}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class FileTooLargeError(AnalysisError):
    """Raised when a file exceeds the configured size limit."""

    def __init__(self, file_path: Path, size: int, limit: int):
        self.file_path = file_path
        self.size = size
        self.limit = limit
        super().__init__(
            f"File {file_path} is {size:,} bytes, exceeds limit of {limit:,} bytes"
        )


class FileAnalyzer(Protocol):
    """Protocol for per-language file analyzers."""

    language: str

    def analyze(self, file_path: Path, source: bytes) -> FileReport:
        """Return the report for *source*, read from *file_path*."""
        ...


class ReportBuilder:
    """Accumulate a FileReport during a single traversal of one file.

    Keeps the name -> FunctionRecord registry used to resolve callee
    locations; a later definition with the same name replaces the earlier
    one for lookups made after it.
    """

    def __init__(self, file_path: Path):
        self.file = str(file_path)
        self.report = FileReport()
        self._registry: dict[str, FunctionRecord] = {}

    def location(self, node) -> SourceLocation:
        """Location of a tree-sitter *node* in this file."""
        return SourceLocation(
            file=self.file,
            start_line=node.start_point[0] + 1,
            end_line=node.end_point[0] + 1,
        )

    def define(self, name: str, location: SourceLocation) -> None:
        self.report.functions.append(name)
        self._registry[name] = FunctionRecord(name, location)
        # The latest definition's edge list replaces any earlier one.
        self.report.function_calls[name] = []

    def resolve(self, callee: str) -> SourceLocation:
        record = self._registry.get(callee)
        if record is not None:
            return record.location
        return SourceLocation(file=self.file)

    def add_call(self, caller: str, callee: str) -> bool:
        """Record *caller* -> *callee*; return False when it is a duplicate."""
        edges = self.report.function_calls.get(caller)
        if edges is None:
            return False
        edge = CallEdge(callee, self.resolve(callee))
        key = edge.key
        if any(key.covered_by(existing.key) for existing in edges):
            return False
        edges.append(edge)
        return True

    def add_dependency(self, dependency: str) -> None:
        if dependency and dependency not in self.report.dependencies:
            self.report.dependencies.append(dependency)
