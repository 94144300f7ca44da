"""Action rules applied to every finalized effect."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from saplex.diagnostics import (
    EFFECT_CONDITION_WITHOUT_ACTION,
    EFFECT_GAIN_MULTIPLE_POSITIONS,
    EFFECT_GAIN_NON_SELF_POSITION,
    EFFECT_GIVE_MISSING_POSITION,
    Diagnostic,
)
from saplex.lexer.vocabulary import ActionKind, PositionKind

if TYPE_CHECKING:
    from saplex.lexer.cursor import Span
    from saplex.parser.effect import Effect


class EffectRule(Protocol):
    """Validation rule contract for finalized effects."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    def run(self, effect: Effect, span: Span | None = None) -> list[Diagnostic]: ...


def _has_trumpet(effect: Effect) -> bool:
    return any(entity.is_trumpet for entity in effect.entities)


@dataclass(frozen=True, slots=True)
class GainSinglePositionRule:
    code: str = EFFECT_GAIN_MULTIPLE_POSITIONS.code
    name: str = "gainSinglePosition"

    def run(self, effect: Effect, span: Span | None = None) -> list[Diagnostic]:
        if effect.action != ActionKind.GAIN or len(effect.position) <= 1:
            return []
        positions = ", ".join(position.name for position in effect.position)
        return [Diagnostic.from_spec(EFFECT_GAIN_MULTIPLE_POSITIONS, span, detail=f"Got {positions}.")]


@dataclass(frozen=True, slots=True)
class GainSelfPositionRule:
    """Gained entities land on the pet itself; only trumpets go elsewhere."""

    code: str = EFFECT_GAIN_NON_SELF_POSITION.code
    name: str = "gainSelfPosition"

    def run(self, effect: Effect, span: Span | None = None) -> list[Diagnostic]:
        if effect.action != ActionKind.GAIN or len(effect.position) != 1:
            return []
        if effect.position[0] == PositionKind.SELF or _has_trumpet(effect):
            return []
        return [
            Diagnostic.from_spec(
                EFFECT_GAIN_NON_SELF_POSITION,
                span,
                detail=f"Got {effect.position[0].name}.",
            )
        ]


@dataclass(frozen=True, slots=True)
class GiveRequiresPositionRule:
    code: str = EFFECT_GIVE_MISSING_POSITION.code
    name: str = "giveRequiresPosition"

    def run(self, effect: Effect, span: Span | None = None) -> list[Diagnostic]:
        if effect.action != ActionKind.GIVE or effect.position:
            return []
        return [Diagnostic.from_spec(EFFECT_GIVE_MISSING_POSITION, span)]


@dataclass(frozen=True, slots=True)
class ConditionRequiresActionRule:
    code: str = EFFECT_CONDITION_WITHOUT_ACTION.code
    name: str = "conditionRequiresAction"

    def run(self, effect: Effect, span: Span | None = None) -> list[Diagnostic]:
        if effect.action is not None or effect.conditional_trigger is None:
            return []
        return [Diagnostic.from_spec(EFFECT_CONDITION_WITHOUT_ACTION, span)]


DEFAULT_EFFECT_RULES: tuple[EffectRule, ...] = (
    ConditionRequiresActionRule(),
    GainSinglePositionRule(),
    GainSelfPositionRule(),
    GiveRequiresPositionRule(),
)


def apply_action_defaults(effect: Effect) -> None:
    """Fill the implied `[SELF]` position of gain and summon effects."""
    if effect.position:
        return
    if effect.action == ActionKind.GAIN and not _has_trumpet(effect):
        effect.position.append(PositionKind.SELF)
    elif effect.action == ActionKind.SUMMON:
        effect.position.append(PositionKind.SELF)


def validate_effect(
    effect: Effect,
    span: Span | None = None,
    rules: tuple[EffectRule, ...] = DEFAULT_EFFECT_RULES,
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule.run(effect, span))
    return diagnostics
