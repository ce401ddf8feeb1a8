"""Generic tree-sitter backend for Python, Java, C, C++ and Go."""

from __future__ import annotations

from codeatlas.extractors.generic.analyzer import GenericAnalyzer
from codeatlas.extractors.generic.rules import RULES, LanguageRules, NodeKind

__all__ = [
    "GenericAnalyzer",
    "LanguageRules",
    "NodeKind",
    "RULES",
]
