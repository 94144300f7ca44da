"""Effect builder: folds an effect phrase into `Effect` records."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Final

from saplex.diagnostics import Diagnostic
from saplex.diagnostics.codes import EFFECT_UNSUPPORTED_USAGE_PERIOD
from saplex.diagnostics.errors import EffectValidationError, ParseError
from saplex.lexer.cursor import Span
from saplex.lexer.entity import Entity, EntityKind
from saplex.lexer.tokens import Token
from saplex.lexer.vocabulary import (
    ActionKind,
    LogicKind,
    Numeric,
    NumericKind,
    PositionKind,
    TargetKind,
)
from saplex.parser.options import ParserOptions
from saplex.parser.token_stream import TokenStream
from saplex.parser.trigger import EffectTrigger, fold_sub_trigger
from saplex.parser.validation import (
    DEFAULT_EFFECT_RULES,
    EffectRule,
    apply_action_defaults,
    validate_effect,
)

LOGGER = logging.getLogger(__name__)

MAX_POSITIONS: Final[int] = 2

_SUPERLATIVES: Final[dict[tuple[NumericKind, EntityKind], PositionKind]] = {
    (NumericKind.MAX, EntityKind.ATTACK): PositionKind.STRONGEST,
    (NumericKind.MAX, EntityKind.HEALTH): PositionKind.HEALTHIEST,
    (NumericKind.MIN, EntityKind.ATTACK): PositionKind.WEAKEST,
    (NumericKind.MIN, EntityKind.HEALTH): PositionKind.ILLEST,
}

_SHOP_TIER_ORDER: Final[dict[PositionKind, str]] = {
    PositionKind.AHEAD: "next",
    PositionKind.BEHIND: "previous",
}


@dataclass(slots=True)
class Effect:
    """What happens once a trigger fires.

    `entities` keeps encounter order, so summon stats read attack then
    health. `position` holds a primary and an optional secondary entry.
    """

    trigger: EffectTrigger | None = None
    conditional_trigger: EffectTrigger | None = None
    target: TargetKind | None = None
    entities: list[Entity] = field(default_factory=list)
    position: list[PositionKind] = field(default_factory=list)
    action: ActionKind | None = None
    uses: int | None = None
    temporary: bool = False


def _is_action(token: Token) -> bool:
    return token.is_action


def _is_connective(token: Token) -> bool:
    return token.is_logic(LogicKind.AND, LogicKind.OR)


def _ends_iteration(token: Token) -> bool:
    return token.is_logic(LogicKind.TO) or token.is_action


def _is_bare_superlative_stat(token: Token) -> bool:
    return token.is_entity(EntityKind.ATTACK, EntityKind.HEALTH, bare=True)


def _is_bare_damage(token: Token) -> bool:
    return token.is_entity(EntityKind.DAMAGE, bare=True)


def _is_shop_order(token: Token) -> bool:
    return token.ttype in _SHOP_TIER_ORDER


def _is_shop(token: Token) -> bool:
    return token.ttype == TargetKind.SHOP


def _is_bare_tier(token: Token) -> bool:
    return token.is_entity(EntityKind.TIER, bare=True)


class EffectBuilder:
    """Single pass over an effect phrase.

    Reads an optional `If ...` prefix, then accumulates tokens into the
    current effect, starting a new one whenever `and`/`or` introduces
    another action.
    """

    def __init__(
        self,
        trigger: EffectTrigger | None,
        tokens: Sequence[Token],
        options: ParserOptions | None = None,
        *,
        rules: tuple[EffectRule, ...] = DEFAULT_EFFECT_RULES,
    ) -> None:
        self._trigger = trigger
        self._stream = TokenStream(tokens)
        self._options = options or ParserOptions()
        self._rules = rules
        self._diagnostics: list[Diagnostic] = []
        self._effects: list[Effect] = []
        self._current = Effect(trigger=trigger)
        self._first_token: Token | None = None
        self._last_token: Token | None = None

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Validation warnings recorded in permissive mode."""
        return self._diagnostics

    @property
    def effects(self) -> list[Effect]:
        return self._effects

    def build(self) -> list[Effect]:
        self._read_conditional_prefix()
        while not self._stream.at_end:
            token = self._stream.bump()
            self._track(token)
            self._accumulate(token)
        self._finish_effect()
        LOGGER.debug("Built %d effect(s)", len(self._effects))
        return self._effects

    def _read_conditional_prefix(self) -> None:
        if not self._stream.current.is_logic(LogicKind.IF):
            return
        self._track(self._stream.current)
        self._current.conditional_trigger = fold_sub_trigger(self._stream, _is_action)
        self._track(self._stream.nth(-1))
        # "If ... and gain": the condition governs the action that follows.
        self._stream.eat(_is_connective)

    def _accumulate(self, token: Token) -> None:
        effect = self._current
        match token.ttype:
            case Numeric(kind=NumericKind.MAX | NumericKind.MIN as kind):
                self._read_superlative(kind)
            case Entity() as entity:
                self._add_entity(entity)
            case PositionKind() as position:
                self._add_position(position)
            case TargetKind() as target:
                effect.target = target
            case LogicKind.FOR_EACH:
                effect.conditional_trigger = fold_sub_trigger(
                    self._stream,
                    _ends_iteration,
                    logic=LogicKind.FOR_EACH,
                )
            case LogicKind.UNTIL:
                if self._stream.eat_sequence(
                    lambda t: t.is_logic(LogicKind.END),
                    lambda t: t.is_entity(EntityKind.BATTLE),
                ):
                    effect.temporary = True
            case LogicKind.AND | LogicKind.OR:
                if self._stream.at(_is_action):
                    self._split()
            case LogicKind.WORKS:
                self._read_usage_limit(token)
            case ActionKind() as action:
                effect.action = action
            case _:
                # Counts are carried by the entities they precede.
                pass

    def _read_superlative(self, kind: NumericKind) -> None:
        stat = self._stream.eat(_is_bare_superlative_stat)
        if stat is None:
            return
        self._add_position(_SUPERLATIVES[(kind, stat.ttype.kind)])

    def _add_entity(self, entity: Entity) -> None:
        if entity.kind == EntityKind.PET and entity.is_bare:
            pet = self._read_shop_tier_pet()
            if pet is not None:
                self._current.entities.append(pet)
            return

        self._current.entities.append(entity)
        if entity.kind in (EntityKind.ATTACK, EntityKind.ATTACK_PERCENT):
            # "attack damage"
            self._stream.eat(_is_bare_damage)

    def _read_shop_tier_pet(self) -> Entity | None:
        matched = self._stream.eat_sequence(_is_shop_order, _is_shop, _is_bare_tier)
        if matched is None:
            return None
        order = _SHOP_TIER_ORDER[matched[0].ttype]
        return Entity.pet(attr=f"{order} shop tier")

    def _add_position(self, position: PositionKind) -> None:
        if len(self._current.position) >= MAX_POSITIONS:
            LOGGER.debug("Ignoring extra position %s", position.name)
            return
        self._current.position.append(position)

    def _read_usage_limit(self, works: Token) -> None:
        multiplier = self._stream.eat(lambda t: t.is_numeric(NumericKind.MULTIPLIER))
        if multiplier is None or multiplier.ttype.value is None:
            return
        if self._stream.eat(lambda t: t.is_entity(EntityKind.TURN)) is None:
            period = self._stream.current
            raise ParseError.from_spec(
                EFFECT_UNSUPPORTED_USAGE_PERIOD,
                Span(works.span.start, period.span.current, works.span.line),
                detail=f"Got {period.text or 'end of text'!r}.",
            )
        self._current.uses = int(multiplier.ttype.value)

    def _split(self) -> None:
        self._finish_effect()
        self._current = Effect(trigger=self._trigger)
        LOGGER.debug("Split effect at %s", self._stream.current.span)

    def _finish_effect(self) -> None:
        effect = self._current
        apply_action_defaults(effect)
        if self._options.validate_effects:
            self._report(validate_effect(effect, self._effect_span(), self._rules))
        self._effects.append(effect)
        self._first_token = None
        self._last_token = None

    def _report(self, diagnostics: list[Diagnostic]) -> None:
        if not diagnostics:
            return
        if self._options.raises_on_invalid:
            raise EffectValidationError(diagnostics[0])
        for diagnostic in diagnostics:
            LOGGER.debug("Permissive mode, keeping effect despite %s", diagnostic.code)
            self._diagnostics.append(replace(diagnostic, severity="warning"))

    def _track(self, token: Token) -> None:
        if self._first_token is None:
            self._first_token = token
        self._last_token = token

    def _effect_span(self) -> Span | None:
        if self._first_token is None or self._last_token is None:
            return None
        first = self._first_token.span
        return Span(first.start, self._last_token.span.current, first.line)


def build_effects(
    trigger: EffectTrigger | None,
    tokens: Sequence[Token],
    options: ParserOptions | None = None,
) -> list[Effect]:
    """Fold an effect phrase into one effect per action clause."""
    return EffectBuilder(trigger, tokens, options).build()
