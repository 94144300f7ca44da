"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from saplex.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    collected: list[Diagnostic] = []
    for group in groups:
        collected.extend(group)
    return collected


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic, source: str | None = None) -> str:
    """Render one diagnostic, quoting the offending slice of `source` when given."""
    line = f"- {diagnostic.severity.upper()} {diagnostic.code} {diagnostic.message}"
    span = diagnostic.span
    if span is not None:
        line += f" span={span.as_tuple()}"
        if source is not None:
            line += f" text={source[span.start : span.current]!r}"
    if diagnostic.hint:
        line += f"\n  hint: {diagnostic.hint}"
    return line
