"""Trigger builder: folds a trigger phrase into `EffectTrigger` records."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from saplex.diagnostics.codes import PARSER_DANGLING_CONNECTIVE
from saplex.diagnostics.errors import TriggerSyntaxError
from saplex.lexer.entity import START_OF_BATTLE, Entity, EntityKind
from saplex.lexer.tokens import Token
from saplex.lexer.vocabulary import (
    ActionKind,
    LogicKind,
    Numeric,
    NumericKind,
    PositionKind,
    TargetKind,
)
from saplex.parser.token_stream import TokenPredicate, TokenStream

LOGGER = logging.getLogger(__name__)

START_OF_BATTLE_ABILITY: Final[Entity] = Entity(EntityKind.ABILITY, name=START_OF_BATTLE)


@dataclass(slots=True)
class EffectTrigger:
    """When an effect fires (ex. `Friend ahead faints`).

    `number` comes from a numeral token or from the value carried by an
    entity (`level 3` sets both `entity` and `number`).
    """

    action: ActionKind | None = None
    number: int | None = None
    entity: Entity | None = None
    target: TargetKind | None = None
    logic: LogicKind | None = None
    prim_pos: PositionKind | None = None
    sec_pos: PositionKind | None = None

    @property
    def is_empty(self) -> bool:
        return self == EffectTrigger()

    def fold(self, token: Token) -> None:
        """Accumulate one token into the matching field."""
        match token.ttype:
            case Numeric(kind=NumericKind.NUMBER, value=value) if value is not None:
                self.number = int(value)
            case Entity() as entity:
                self.entity = entity
                if (value := entity.numeric_value()) is not None:
                    self.number = value
            case PositionKind() as position:
                if self.prim_pos is None:
                    self.prim_pos = position
                else:
                    self.sec_pos = position
            case TargetKind() as target:
                self.target = target
            case ActionKind() as action:
                self.action = action
                if action.is_shop_related:
                    self.target = TargetKind.SHOP
            case LogicKind() as logic:
                self.logic = logic
            case _:
                pass


def _is_connective(token: Token) -> bool:
    return token.is_logic(LogicKind.AND, LogicKind.OR)


def _is_bare_battle(token: Token) -> bool:
    return token.is_entity(EntityKind.BATTLE, bare=True)


def _is_bare_ability(token: Token) -> bool:
    return token.is_entity(EntityKind.ABILITY, bare=True)


def fold_sub_trigger(
    stream: TokenStream,
    stop: TokenPredicate,
    *,
    logic: LogicKind | None = None,
) -> EffectTrigger:
    """Fold tokens up to (not including) the first one matching `stop`.

    Used for conditional (`If ...`) and iteration (`For each ...`) clauses.
    Connectives are skipped and `start`, `battle`, `ability` collapses into
    the start-of-battle ability entity. A connective directly followed by an
    action also ends the clause and is left in the stream.
    """
    trigger = EffectTrigger(logic=logic)
    while not stream.at_end and not stream.at(stop):
        if _is_connective(stream.current) and stream.nth(1).is_action:
            break
        token = stream.bump()
        if token.is_logic(LogicKind.START) and stream.eat_sequence(_is_bare_battle, _is_bare_ability):
            trigger.entity = START_OF_BATTLE_ABILITY
            continue
        if _is_connective(token):
            continue
        trigger.fold(token)
    return trigger


def build_triggers(tokens: Sequence[Token]) -> list[EffectTrigger]:
    """Fold a trigger phrase, splitting at `and`/`or`.

    Every split-off trigger starts with the action of the one before it.
    """
    stream = TokenStream(tokens)
    triggers: list[EffectTrigger] = []
    current = EffectTrigger()

    while not stream.at_end:
        token = stream.bump()
        if _is_connective(token):
            if stream.at_end:
                raise TriggerSyntaxError.from_spec(PARSER_DANGLING_CONNECTIVE, token.span)
            triggers.append(current)
            current = EffectTrigger(action=current.action)
            continue
        current.fold(token)

    triggers.append(current)
    LOGGER.debug("Built %d trigger(s)", len(triggers))
    return triggers
