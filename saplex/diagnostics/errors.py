"""Exceptions raised by the lexer and the builders.

Every exception wraps a `Diagnostic`, so callers that prefer reporting over
raising (see `saplex.pipeline`) can keep the structured record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from saplex.diagnostics.codes import DiagnosticSpec
from saplex.diagnostics.diagnostic import Diagnostic

if TYPE_CHECKING:
    from saplex.lexer.cursor import Cursor, Span


class SaplexError(Exception):
    """Base class for card-text errors."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic

    @property
    def code(self) -> str:
        return self.diagnostic.code


class LexError(SaplexError):
    """Raised on an unrecognized character or a malformed numeric continuation."""

    def __init__(
        self,
        spec: DiagnosticSpec,
        cursor: Cursor,
        *,
        character: str | None = None,
        reason: str | None = None,
    ) -> None:
        if reason is not None:
            detail = reason
        elif character is not None:
            detail = f"({character!r})"
        else:
            detail = None
        super().__init__(Diagnostic.from_spec(spec, cursor, detail=detail))
        self.cursor = cursor.snapshot()
        self.character = character
        self.reason = reason


class ParseError(SaplexError):
    """Raised when a token sequence cannot be folded into records."""

    @classmethod
    def from_spec(
        cls,
        spec: DiagnosticSpec,
        span: Cursor | Span | None = None,
        *,
        detail: str | None = None,
    ) -> Self:
        return cls(Diagnostic.from_spec(spec, span, detail=detail))


class TriggerSyntaxError(ParseError):
    """Raised for a logical connective with no following value."""


class EffectValidationError(ParseError):
    """Raised when a finalized effect breaks an action rule."""
