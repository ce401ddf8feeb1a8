"""ECMAScript (JS/TS and JSX/TSX) backends."""

from __future__ import annotations

from codeatlas.extractors.ecmascript.analyzer import EcmaScriptAnalyzer

__all__ = [
    "EcmaScriptAnalyzer",
    "module_analyzer",
    "component_analyzer",
]


def module_analyzer(*, legacy_context: bool = False) -> EcmaScriptAnalyzer:
    """Analyzer for .js/.ts: TypeScript grammar, no JSX, awaits unwrapped."""
    return EcmaScriptAnalyzer(
        "js/ts",
        "typescript",
        unwrap_await=True,
        legacy_context=legacy_context,
    )


def component_analyzer(*, legacy_context: bool = False) -> EcmaScriptAnalyzer:
    """Analyzer for .jsx/.tsx: TSX grammar, class declarations are units."""
    return EcmaScriptAnalyzer(
        "jsx/tsx",
        "tsx",
        classes_as_units=True,
        legacy_context=legacy_context,
    )
