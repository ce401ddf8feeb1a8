"""Shared tree-sitter grammar loading and parsing."""

from __future__ import annotations

import importlib
import logging
from functools import lru_cache

from tree_sitter import Language, Parser, Tree

logger = logging.getLogger(__name__)

# language name -> (grammar module, function returning the language pointer)
_GRAMMARS: dict[str, tuple[str, str]] = {
    "python": ("tree_sitter_python", "language"),
    "java": ("tree_sitter_java", "language"),
    "cpp": ("tree_sitter_cpp", "language"),
    "c": ("tree_sitter_c", "language"),
    "go": ("tree_sitter_go", "language"),
    "typescript": ("tree_sitter_typescript", "language_typescript"),
    "tsx": ("tree_sitter_typescript", "language_tsx"),
}


@lru_cache(maxsize=None)
def get_language(name: str) -> Language:
    """Return the tree-sitter Language for *name*, loading its grammar once."""
    try:
        module_name, attr = _GRAMMARS[name]
    except KeyError:
        raise ValueError(f"No grammar registered for {name!r}") from None
    module = importlib.import_module(module_name)
    logger.debug("Loaded %s grammar from %s", name, module_name)
    return Language(getattr(module, attr)())


def parse(name: str, source: bytes) -> Tree:
    """Parse *source* with the *name* grammar.

    Parsers are not shared: each call gets its own so that files can be
    analyzed from several threads at once.
    """
    parser = Parser(get_language(name))
    return parser.parse(source)


def node_text(node) -> str:
    return node.text.decode("utf-8", errors="replace")


def first_descendant(node, kind: str, predicate=None):
    """Pre-order search for the first node of *kind* in *node*'s subtree."""
    if node.type == kind and (predicate is None or predicate(node)):
        return node
    for child in node.children:
        found = first_descendant(child, kind, predicate)
        if found is not None:
            return found
    return None


def last_descendant(node, kind: str):
    """Pre-order search for the last node of *kind* in *node*'s subtree."""
    result = node if node.type == kind else None
    for child in node.children:
        found = last_descendant(child, kind)
        if found is not None:
            result = found
    return result
