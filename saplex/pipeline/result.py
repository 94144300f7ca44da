"""Parse-once carrier for a (trigger, effect) card pair."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from saplex.diagnostics import has_errors
from saplex.parser.options import ParserOptions

if TYPE_CHECKING:
    from saplex.diagnostics import Diagnostic
    from saplex.lexer.tokens import Token
    from saplex.parser.effect import Effect
    from saplex.parser.trigger import EffectTrigger


@dataclass(slots=True)
class CardParseResult:
    """Tokens, records and diagnostics of one card.

    A stage that fails leaves its records empty and contributes one error
    diagnostic; permissive-mode validation failures show up as warnings.
    """

    trigger_text: str
    effect_text: str
    options: ParserOptions = field(default_factory=ParserOptions)
    trigger_tokens: list[Token] = field(default_factory=list)
    effect_tokens: list[Token] = field(default_factory=list)
    triggers: list[EffectTrigger] = field(default_factory=list)
    effects: list[Effect] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def trigger(self) -> EffectTrigger | None:
        """Trigger the effects were built against."""
        return self.triggers[0] if self.triggers else None
