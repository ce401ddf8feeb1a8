"""Walk a tree-sitter CST and collect functions, call edges and dependencies."""

from __future__ import annotations

import logging
from pathlib import Path

from codeatlas.extractors import _grammars
from codeatlas.extractors.base import ReportBuilder
from codeatlas.extractors.generic.rules import LanguageRules, NodeKind
from codeatlas.model import FileReport

logger = logging.getLogger(__name__)


class GenericAnalyzer:
    """Table-driven analyzer for Python, Java, C, C++ and Go sources."""

    def __init__(self, rules: LanguageRules):
        self.rules = rules
        self.language = rules.language

    def analyze(self, file_path: Path, source: bytes) -> FileReport:
        tree = _grammars.parse(self.rules.grammar, source)
        builder = ReportBuilder(file_path)
        self._walk(tree.root_node, builder)
        logger.debug(
            "%s: %d functions, %d dependencies",
            file_path,
            len(builder.report.functions),
            len(builder.report.dependencies),
        )
        return builder.report

    def _walk(self, root, builder: ReportBuilder) -> None:
        """Pre-order walk threading the enclosing function name.

        An explicit stack keeps deeply nested sources clear of the
        interpreter's recursion limit.
        """
        rules = self.rules
        stack: list[tuple[object, str | None]] = [(root, None)]
        while stack:
            node, context = stack.pop()
            kind = rules.classify(node.type)

            if kind is NodeKind.IMPORT:
                builder.add_dependency(_grammars.node_text(node).strip())

            elif kind is NodeKind.FUNCTION:
                name = rules.function_name(node)
                if name:
                    builder.define(name, builder.location(node))
                    _push(stack, rules.function_body(node), name)
                    continue

            elif kind is NodeKind.CALL and context is not None:
                callee = rules.callee_name(node)
                if callee:
                    builder.add_call(context, callee)

            _push(stack, node.children, context)


def _push(stack: list, nodes: list, context: str | None) -> None:
    # Reversed so children pop in source order.
    stack.extend((child, context) for child in reversed(nodes))
