"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """How effect validation failures are reported."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Flags controlling effect validation.

    Lexical errors, dangling connectives and malformed usage clauses are
    fatal regardless of mode.
    """

    mode: ParseMode = ParseMode.STRICT
    validate_effects: bool = True

    @property
    def raises_on_invalid(self) -> bool:
        return self.mode == ParseMode.STRICT

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        return ParserOptions(mode=ParseMode(mode), validate_effects=True)
