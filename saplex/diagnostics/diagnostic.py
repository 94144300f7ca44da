"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from saplex.diagnostics.codes import DiagnosticSpec, Severity

if TYPE_CHECKING:
    from saplex.lexer.cursor import Cursor, Span


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and builders."""

    code: str
    message: str
    span: Span | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        span: Cursor | Span | None = None,
        *,
        detail: str | None = None,
        severity: Severity | None = None,
    ) -> Diagnostic:
        message = spec.message if detail is None else f"{spec.message} {detail}"
        return Diagnostic(
            code=spec.code,
            message=message,
            span=span.to_span() if span is not None else None,
            severity=severity or spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def __str__(self) -> str:
        location = f"{self.span}: " if self.span is not None else ""
        return f"{location}{self.severity} {self.code} {self.message}"
