"""Closed card-text vocabulary: keyword kinds and their lookup tables."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final


class NumericKind(StrEnum):
    NUMBER = "number"
    MULTIPLIER = "multiplier"
    PERCENT = "percent"
    PLUS = "plus"
    MINUS = "minus"
    LESS_EQUAL = "less_equal"
    EQUAL = "equal"
    GREATER_EQUAL = "greater_equal"
    SUM = "sum"
    MAX = "max"
    MIN = "min"

    @property
    def takes_value(self) -> bool:
        return self in (NumericKind.NUMBER, NumericKind.MULTIPLIER, NumericKind.PERCENT)


@dataclass(frozen=True, slots=True)
class Numeric:
    """Numeric value or operator token payload.

    A `None` value means the word itself (ex. `times` without a count).
    """

    kind: NumericKind
    value: int | float | None = None

    def with_literal(self, literal: str) -> "Numeric":
        """Attach a trailing numeral to value-bearing kinds; operators are returned unchanged."""
        if not self.kind.takes_value:
            return self
        cleaned = literal.lstrip("+")
        if self.kind == NumericKind.PERCENT:
            return Numeric(self.kind, float(cleaned))
        return Numeric(self.kind, int(cleaned))


class PositionKind(StrEnum):
    SELF = "self"
    NON_SELF = "non_self"
    AHEAD = "ahead"
    BEHIND = "behind"
    NEAREST = "nearest"
    ADJACENT = "adjacent"
    ALL = "all"
    ANY = "any"
    HIGHEST = "highest"
    LOWEST = "lowest"
    LEFT_MOST = "left_most"
    RIGHT_MOST = "right_most"
    TRIGGER = "trigger"  # whoever caused the effect to fire
    ILLEST = "illest"
    HEALTHIEST = "healthiest"
    STRONGEST = "strongest"
    WEAKEST = "weakest"
    OPPOSITE = "opposite"


class TargetKind(StrEnum):
    FRIEND = "friend"
    ENEMY = "enemy"
    SHOP = "shop"


class LogicKind(StrEnum):
    IF = "if"
    IS = "is"
    AND = "and"
    OR = "or"
    START = "start"
    END = "end"
    BEFORE = "before"
    AFTER = "after"
    THEN = "then"
    UNTIL = "until"
    WITH = "with"
    WORKS = "works"
    HAVE = "have"
    FOR = "for"
    EACH = "each"
    FOR_EACH = "for_each"
    EXCEPT = "except"
    TO = "to"
    IN = "in"
    OUTSIDE = "outside"

    @property
    def is_connective(self) -> bool:
        return self in (LogicKind.AND, LogicKind.OR)


class ActionKind(StrEnum):
    CHOOSE = "choose"
    DEAL = "deal"
    GAIN = "gain"
    GIVE = "give"
    PUSH = "push"
    REMOVE = "remove"
    SET = "set"
    SPEND = "spend"
    STOCK = "stock"
    SUMMON = "summon"
    SWAP = "swap"
    BREAK = "break"
    COPY = "copy"
    MAKE = "make"
    INCREASE = "increase"
    RESUMMON = "resummon"
    STEAL = "steal"
    ACTIVATE = "activate"
    DISCOUNT = "discount"
    KNOCK = "knock"
    REDUCE = "reduce"
    SWALLOW = "swallow"
    TAKE = "take"
    TRANSFORM = "transform"
    REPLACE = "replace"
    SHUFFLE = "shuffle"
    FREEZE = "freeze"
    UNFREEZE = "unfreeze"

    # Non-effect (trigger) verbs
    ATTACK = "attack"
    EAT = "eat"
    BUY = "buy"
    SELL = "sell"
    UPGRADE = "upgrade"
    HURT = "hurt"
    FAINT = "faint"

    @property
    def is_shop_related(self) -> bool:
        return self in _SHOP_ACTIONS


_SHOP_ACTIONS: Final[frozenset[ActionKind]] = frozenset(
    {
        ActionKind.SPEND,
        ActionKind.STOCK,
        ActionKind.DISCOUNT,
        ActionKind.FREEZE,
        ActionKind.UNFREEZE,
        ActionKind.EAT,
        ActionKind.BUY,
        ActionKind.SELL,
        ActionKind.UPGRADE,
    }
)


NUMERIC_WORDS: Final[dict[str, Numeric]] = {
    "time": Numeric(NumericKind.MULTIPLIER),
    "times": Numeric(NumericKind.MULTIPLIER),
    "once": Numeric(NumericKind.MULTIPLIER, 1),
    "twice": Numeric(NumericKind.MULTIPLIER, 2),
    "one": Numeric(NumericKind.NUMBER, 1),
    "two": Numeric(NumericKind.NUMBER, 2),
    "three": Numeric(NumericKind.NUMBER, 3),
    "four": Numeric(NumericKind.NUMBER, 4),
    "five": Numeric(NumericKind.NUMBER, 5),
    "six": Numeric(NumericKind.NUMBER, 6),
    "seven": Numeric(NumericKind.NUMBER, 7),
    "double": Numeric(NumericKind.MULTIPLIER, 2),
    "triple": Numeric(NumericKind.MULTIPLIER, 3),
    "lower": Numeric(NumericKind.LESS_EQUAL),
    "equal": Numeric(NumericKind.EQUAL),
    "greater": Numeric(NumericKind.GREATER_EQUAL),
    "sum": Numeric(NumericKind.SUM),
    "most": Numeric(NumericKind.MAX),
    "least": Numeric(NumericKind.MIN),
}

POSITION_WORDS: Final[dict[str, PositionKind]] = {
    "this": PositionKind.SELF,
    "itself": PositionKind.SELF,
    "other": PositionKind.NON_SELF,
    "nonself": PositionKind.NON_SELF,
    "ahead": PositionKind.AHEAD,
    "forward": PositionKind.AHEAD,
    "next": PositionKind.AHEAD,
    "behind": PositionKind.BEHIND,
    "previous": PositionKind.BEHIND,
    "adjacent": PositionKind.ADJACENT,
    "nearest": PositionKind.NEAREST,
    "all": PositionKind.ALL,
    "random": PositionKind.ANY,
    "any": PositionKind.ANY,
    "highest": PositionKind.HIGHEST,
    "lowest": PositionKind.LOWEST,
    "leftmost": PositionKind.LEFT_MOST,
    "last": PositionKind.LEFT_MOST,
    "rightmost": PositionKind.RIGHT_MOST,
    "front": PositionKind.RIGHT_MOST,
    "first": PositionKind.RIGHT_MOST,
    "whoever": PositionKind.TRIGGER,
    "it": PositionKind.TRIGGER,
    "its": PositionKind.TRIGGER,
    "healthiest": PositionKind.HEALTHIEST,
    "illest": PositionKind.ILLEST,
    "strongest": PositionKind.STRONGEST,
    "weakest": PositionKind.WEAKEST,
    "opposite": PositionKind.OPPOSITE,
}

TARGET_WORDS: Final[dict[str, TargetKind]] = {
    "enemy": TargetKind.ENEMY,
    "enemies": TargetKind.ENEMY,
    "opponent": TargetKind.ENEMY,
    "friend": TargetKind.FRIEND,
    "friends": TargetKind.FRIEND,
    "friendly": TargetKind.FRIEND,
    "shop": TargetKind.SHOP,
}

LOGIC_WORDS: Final[dict[str, LogicKind]] = {
    "if": LogicKind.IF,
    "is": LogicKind.IS,
    "and": LogicKind.AND,
    "or": LogicKind.OR,
    "then": LogicKind.THEN,
    "until": LogicKind.UNTIL,
    "start": LogicKind.START,
    "end": LogicKind.END,
    "with": LogicKind.WITH,
    "for": LogicKind.FOR,
    "each": LogicKind.EACH,
    "every": LogicKind.EACH,
    "has": LogicKind.HAVE,
    "have": LogicKind.HAVE,
    "before": LogicKind.BEFORE,
    "after": LogicKind.AFTER,
    "works": LogicKind.WORKS,
    "work": LogicKind.WORKS,
    "except": LogicKind.EXCEPT,
    "in": LogicKind.IN,
    "to": LogicKind.TO,
    "outside": LogicKind.OUTSIDE,
}

ACTION_WORDS: Final[dict[str, ActionKind]] = {
    "choose": ActionKind.CHOOSE,
    "deal": ActionKind.DEAL,
    "gain": ActionKind.GAIN,
    "gained": ActionKind.GAIN,
    "give": ActionKind.GIVE,
    "push": ActionKind.PUSH,
    "pushed": ActionKind.PUSH,
    "remove": ActionKind.REMOVE,
    "set": ActionKind.SET,
    "spend": ActionKind.SPEND,
    "stock": ActionKind.STOCK,
    "summon": ActionKind.SUMMON,
    "summoned": ActionKind.SUMMON,
    "swap": ActionKind.SWAP,
    "break": ActionKind.BREAK,
    "broke": ActionKind.BREAK,
    "copy": ActionKind.COPY,
    "make": ActionKind.MAKE,
    "increase": ActionKind.INCREASE,
    "resummon": ActionKind.RESUMMON,
    "steal": ActionKind.STEAL,
    "activate": ActionKind.ACTIVATE,
    "discount": ActionKind.DISCOUNT,
    "knock": ActionKind.KNOCK,
    "knocked": ActionKind.KNOCK,
    "reduce": ActionKind.REDUCE,
    "swallow": ActionKind.SWALLOW,
    "take": ActionKind.TAKE,
    "transform": ActionKind.TRANSFORM,
    "replace": ActionKind.REPLACE,
    "shuffle": ActionKind.SHUFFLE,
    "freeze": ActionKind.FREEZE,
    "unfreeze": ActionKind.UNFREEZE,
    "attacks": ActionKind.ATTACK,
    "eat": ActionKind.EAT,
    "eats": ActionKind.EAT,
    "buy": ActionKind.BUY,
    "bought": ActionKind.BUY,
    "sell": ActionKind.SELL,
    "sold": ActionKind.SELL,
    "upgrade": ActionKind.UPGRADE,
    "hurt": ActionKind.HURT,
    "hurts": ActionKind.HURT,
    "faint": ActionKind.FAINT,
    "faints": ActionKind.FAINT,
    "fainting": ActionKind.FAINT,
}
