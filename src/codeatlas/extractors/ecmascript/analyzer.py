"""Extract functions, call edges and imports from JS/TS and JSX/TSX sources."""

from __future__ import annotations

import logging
from pathlib import Path

from codeatlas.extractors import _grammars
from codeatlas.extractors.base import ParseError, ReportBuilder
from codeatlas.model import FileReport

logger = logging.getLogger(__name__)

_FUNCTION_DECL_TYPES = {"function_declaration", "generator_function_declaration"}

_CLASS_DECL_TYPES = {"class_declaration", "abstract_class_declaration"}

_VARIABLE_DECL_TYPES = {"lexical_declaration", "variable_declaration"}

# Initializers that make `const name = ...` a function-like unit.  Older
# grammar releases spell function expressions as "function".
_FUNCTION_VALUE_TYPES = {
    "arrow_function",
    "function_expression",
    "function",
    "generator_function",
}


class EcmaScriptAnalyzer:
    """Analyzer for ECMAScript-family files.

    *classes_as_units* treats named class declarations like functions, so UI
    components written as classes get their own call lists.  *unwrap_await*
    also reads the call inside ``await f()`` at the await node.

    By default a unit is the calling context only inside its own subtree.
    With *legacy_context* the context is a single pointer that each new unit
    overwrites and nothing restores, so calls that follow a nested
    declaration are credited to it.  That mode reproduces reports produced
    by older releases.
    """

    def __init__(
        self,
        language: str,
        grammar: str,
        *,
        classes_as_units: bool = False,
        unwrap_await: bool = False,
        legacy_context: bool = False,
    ):
        self.language = language
        self.grammar = grammar
        self.classes_as_units = classes_as_units
        self.unwrap_await = unwrap_await
        self.legacy_context = legacy_context

    def analyze(self, file_path: Path, source: bytes) -> FileReport:
        tree = _grammars.parse(self.grammar, source)
        if tree.root_node.has_error:
            raise ParseError(file_path, self.language, "syntax error")
        builder = ReportBuilder(file_path)
        self._walk(tree.root_node, builder)
        return builder.report

    def _walk(self, root, builder: ReportBuilder) -> None:
        stack: list[tuple[object, str | None]] = [(root, None)]
        current: str | None = None
        while stack:
            node, context = stack.pop()
            if self.legacy_context:
                context = current

            for unit, span in self._units(node):
                builder.define(unit, builder.location(span))
                context = current = unit

            if context is not None:
                callee = self._callee(node)
                if callee:
                    builder.add_call(context, callee)

            if node.type == "import_statement":
                specifier = node.child_by_field_name("source")
                if specifier is not None:
                    builder.add_dependency(_string_value(specifier))

            stack.extend((child, context) for child in reversed(node.children))

    def _units(self, node) -> list[tuple[str, object]]:
        """Function-like units declared at *node*, with the node spanning each."""
        if node.type in _FUNCTION_DECL_TYPES or (
            self.classes_as_units and node.type in _CLASS_DECL_TYPES
        ):
            name = node.child_by_field_name("name")
            return [(_grammars.node_text(name), node)] if name is not None else []

        # Legacy mode registers every declarator of a statement before any
        # initializer is walked, leaving the context on the last one.
        if self.legacy_context:
            if node.type in _VARIABLE_DECL_TYPES:
                return [
                    (name, declarator)
                    for declarator in node.named_children
                    if (name := _declarator_unit(declarator)) is not None
                ]
        elif node.type == "variable_declarator":
            name = _declarator_unit(node)
            return [(name, node)] if name is not None else []

        return []

    def _callee(self, node) -> str | None:
        if node.type == "call_expression":
            return _call_target(node)
        if self.unwrap_await and node.type == "await_expression":
            inner = node.named_children[0] if node.named_children else None
            if inner is not None and inner.type == "call_expression":
                return _call_target(inner)
        return None


def _declarator_unit(declarator) -> str | None:
    if declarator.type != "variable_declarator":
        return None
    name = declarator.child_by_field_name("name")
    value = declarator.child_by_field_name("value")
    if (
        name is not None
        and name.type == "identifier"
        and value is not None
        and value.type in _FUNCTION_VALUE_TYPES
    ):
        return _grammars.node_text(name)
    return None


def _call_target(call) -> str | None:
    function = call.child_by_field_name("function")
    if function is None:
        return None
    if function.type == "member_expression":
        prop = function.child_by_field_name("property")
        return _grammars.node_text(prop) if prop is not None else None
    if function.type == "identifier":
        return _grammars.node_text(function)
    return None


def _string_value(node) -> str:
    text = _grammars.node_text(node)
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"`":
        return text[1:-1]
    return text
