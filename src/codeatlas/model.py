"""Language-agnostic data model for project scan reports."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SourceLocation:
    """Where a function is defined (lines are 1-based, inclusive)."""

    file: str
    start_line: int | None = None
    end_line: int | None = None

    def to_dict(self) -> dict:
        d: dict = {"file": self.file}
        if self.start_line is not None:
            d["startLine"] = self.start_line
        if self.end_line is not None:
            d["endLine"] = self.end_line
        return d


@dataclass(frozen=True)
class EdgeKey:
    """Identity of a call edge for de-duplication within one caller.

    Two keys for the same callee and file are considered the same edge when
    the new key carries no line, or both carry the same line.  The relation is
    deliberately asymmetric: a line-less key is covered by any existing edge
    to that callee, while a key with a line is only covered by an edge with
    that exact line.
    """

    callee: str
    file: str
    start_line: int | None = None

    def covered_by(self, existing: EdgeKey) -> bool:
        if self.callee != existing.callee or self.file != existing.file:
            return False
        return self.start_line is None or self.start_line == existing.start_line


@dataclass(frozen=True)
class CallEdge:
    """A call from the owning function to *name*, resolved to *location*."""

    name: str
    location: SourceLocation

    @property
    def key(self) -> EdgeKey:
        return EdgeKey(self.name, self.location.file, self.location.start_line)

    def to_dict(self) -> dict:
        return {"name": self.name, "location": self.location.to_dict()}


@dataclass(frozen=True)
class FunctionRecord:
    """A function-like unit and the location it was defined at."""

    name: str
    location: SourceLocation


@dataclass
class FileReport:
    """Functions, dependencies and call edges extracted from one file."""

    functions: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    function_calls: dict[str, list[CallEdge]] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> FileReport:
        return cls()

    def to_dict(self) -> dict:
        return {
            "functions": list(self.functions),
            "dependencies": list(self.dependencies),
            "functionCalls": {
                caller: [edge.to_dict() for edge in edges]
                for caller, edges in self.function_calls.items()
            },
        }


@dataclass
class DirectoryNode:
    """A scanned directory: its analyzed files and immediate subdirectories."""

    files: dict[str, FileReport] = field(default_factory=dict)
    subfolders: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "files": {name: report.to_dict() for name, report in self.files.items()},
            "subfolders": list(self.subfolders),
        }


# Full directory path -> node, in visit order.
ProjectReport = dict[str, DirectoryNode]
