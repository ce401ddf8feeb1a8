"""Per-language node-kind tables for the generic tree-sitter backend.

Each grammar's node type strings are mapped once onto a small closed set of
:class:`NodeKind` values; the analyzer only ever branches on those.  The
extraction helpers receive tree-sitter nodes and return plain strings.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from codeatlas.extractors._grammars import first_descendant, last_descendant, node_text


class NodeKind(enum.Enum):
    FUNCTION = "function"
    CALL = "call"
    IMPORT = "import"


# Recognized as dependencies in every language.
BASE_IMPORT_TYPES = frozenset(
    {
        "import_statement",
        "import_declaration",
        "package_declaration",
        "include_directive",
        "using_declaration",
    }
)


def _imports(*extra: str) -> dict[str, NodeKind]:
    return {t: NodeKind.IMPORT for t in (*BASE_IMPORT_TYPES, *extra)}


@dataclass(frozen=True)
class LanguageRules:
    """How to find functions, calls and imports in one grammar."""

    language: str
    grammar: str
    kinds: Mapping[str, NodeKind] = field(default_factory=dict)
    function_name: Callable[..., str | None] | None = None
    # Nodes to walk with the function as the enclosing context.
    function_body: Callable[..., list] | None = None
    callee_name: Callable[..., str | None] | None = None

    def classify(self, node_type: str) -> NodeKind | None:
        return self.kinds.get(node_type)


# ---------------------------------------------------------------------------
# Python
# ---------------------------------------------------------------------------


def _named_or_first_identifier(node) -> str | None:
    name_node = node.child_by_field_name("name")
    if name_node is None or name_node.type != "identifier":
        name_node = first_descendant(node, "identifier")
    return node_text(name_node) if name_node is not None else None


def _all_children(node) -> list:
    return node.children


def _python_callee(node) -> str | None:
    if not node.children:
        return None
    target = node.children[0]
    if target.type == "attribute":
        member = target.child_by_field_name("attribute")
        if member is not None and member.type == "identifier":
            return node_text(member)
        return None
    if target.type == "identifier":
        return node_text(target)
    return None


PYTHON = LanguageRules(
    language="python",
    grammar="python",
    kinds={
        **_imports("import_from_statement", "future_import_statement"),
        "function_definition": NodeKind.FUNCTION,
        "call": NodeKind.CALL,
    },
    function_name=_named_or_first_identifier,
    function_body=_all_children,
    callee_name=_python_callee,
)


# ---------------------------------------------------------------------------
# Java
# ---------------------------------------------------------------------------


def _java_callee(node) -> str | None:
    # First identifier in the invocation: for a.b().c() this is "a".
    identifier = first_descendant(node, "identifier")
    return node_text(identifier) if identifier is not None else None


JAVA = LanguageRules(
    language="java",
    grammar="java",
    kinds={
        **_imports(),
        "method_declaration": NodeKind.FUNCTION,
        "method_invocation": NodeKind.CALL,
    },
    function_name=_named_or_first_identifier,
    function_body=_all_children,
    callee_name=_java_callee,
)


# ---------------------------------------------------------------------------
# C / C++
# ---------------------------------------------------------------------------

_MEMBER_NAME_TYPES = {"identifier", "field_identifier"}
_MEMBER_ACCESS_TYPES = {"field_expression", "arrow_expression"}


def _function_declarator(node):
    """Walk through pointer/reference wrappers to the function_declarator."""
    declarator = node.child_by_field_name("declarator")
    while declarator is not None and declarator.type != "function_declarator":
        inner = declarator.child_by_field_name("declarator")
        if inner is None and declarator.named_children:
            inner = declarator.named_children[-1]
        declarator = inner
    return declarator


def _c_function_name(node) -> str | None:
    declarator = _function_declarator(node)
    if declarator is not None:
        # The name part only; parameter types may be qualified too.
        name_node = declarator.child_by_field_name("declarator")
    else:
        name_node = node.child_by_field_name("declarator")
    if name_node is None:
        return None
    if name_node.type == "qualified_identifier":
        # Class::method -> method
        last = last_descendant(name_node, "identifier")
        return node_text(last) if last is not None else None
    if name_node.type in _MEMBER_NAME_TYPES:
        return node_text(name_node)
    identifier = first_descendant(name_node, "identifier")
    return node_text(identifier) if identifier is not None else None


def _c_function_body(node) -> list:
    body = node.child_by_field_name("body")
    if body is None or body.type != "compound_statement":
        return []
    return [body]


def _c_callee(node) -> str | None:
    if not node.children:
        return None
    target = node.children[0]
    if target.type in _MEMBER_ACCESS_TYPES:
        if len(target.children) >= 2:
            member = target.children[-1]
            if member.type in _MEMBER_NAME_TYPES:
                return node_text(member)
        return None
    if target.type == "identifier":
        return node_text(target)
    return None


_C_FAMILY_KINDS = {
    "function_definition": NodeKind.FUNCTION,
    "call_expression": NodeKind.CALL,
}

CPP = LanguageRules(
    language="cpp",
    grammar="cpp",
    kinds={**_imports("preproc_include"), **_C_FAMILY_KINDS},
    function_name=_c_function_name,
    function_body=_c_function_body,
    callee_name=_c_callee,
)

C = LanguageRules(
    language="c",
    grammar="c",
    kinds={**_imports("preproc_include"), **_C_FAMILY_KINDS},
    function_name=_c_function_name,
    function_body=_c_function_body,
    callee_name=_c_callee,
)


# ---------------------------------------------------------------------------
# Go
# ---------------------------------------------------------------------------

# Only dependencies are collected for Go.
GO = LanguageRules(
    language="go",
    grammar="go",
    kinds=_imports("package_clause"),
)


RULES: dict[str, LanguageRules] = {
    rules.language: rules for rules in (PYTHON, JAVA, CPP, C, GO)
}
