"""Scanner cursor."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, TypeAlias

CursorEdge: TypeAlias = Literal["start", "current"]


@dataclass(slots=True)
class Cursor:
    """Offsets of the lexeme being scanned plus the current line.

    Invariant:
    - 0 <= start <= current <= len(source)
    """

    start: int = 0
    current: int = 0
    line: int = 1

    def advance_if(self, source: str, predicate: Callable[[str], bool]) -> str | None:
        """Consume the next character of `source` if it satisfies `predicate`."""
        if self.current >= len(source):
            return None
        ch = source[self.current]
        if not predicate(ch):
            return None
        self.current += 1
        return ch

    def mark_start_at_current(self) -> "Cursor":
        self.start = self.current
        return self

    def shift(self, delta: int, which: CursorEdge = "current", *, limit: int | None = None) -> "Cursor":
        """Move one edge by `delta`, saturating at zero (and at `limit` if given)."""
        value = max(getattr(self, which) + delta, 0)
        if limit is not None:
            value = min(value, limit)
        setattr(self, which, value)
        if self.start > self.current:
            self.start = self.current
        return self

    def snapshot(self) -> "Cursor":
        return Cursor(self.start, self.current, self.line)

    def restore(self, snapshot: "Cursor") -> None:
        self.start = snapshot.start
        self.current = snapshot.current
        self.line = snapshot.line

    def to_span(self) -> "Span":
        """Freeze the current offsets into an immutable span."""
        return Span(self.start, self.current, self.line)

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.current)

    def __str__(self) -> str:
        return f"Line {self.line} ({self.start}-{self.current})"


@dataclass(frozen=True, slots=True)
class Span:
    """Immutable source range carried by tokens and diagnostics."""

    start: int = 0
    current: int = 0
    line: int = 1

    def to_span(self) -> "Span":
        return self

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.current)

    def __str__(self) -> str:
        return f"Line {self.line} ({self.start}-{self.current})"
