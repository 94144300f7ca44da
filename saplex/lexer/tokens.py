"""Lexer tokens."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TypeAlias

from saplex.lexer.cursor import Cursor, Span
from saplex.lexer.entity import Entity, EntityKind
from saplex.lexer.vocabulary import (
    ACTION_WORDS,
    LOGIC_WORDS,
    NUMERIC_WORDS,
    POSITION_WORDS,
    TARGET_WORDS,
    ActionKind,
    LogicKind,
    Numeric,
    NumericKind,
    PositionKind,
    TargetKind,
)


class EndOfText(Enum):
    """Sentinel closing every token sequence."""

    END = "end"


TokenType: TypeAlias = Numeric | Entity | PositionKind | TargetKind | LogicKind | ActionKind | EndOfText


class TokenKind(IntEnum):
    """Token category, i.e. which variant of `TokenType` a token carries."""

    END = 1
    NUMERIC = 10
    ENTITY = 20
    POSITION = 30
    TARGET = 40
    LOGIC = 50
    ACTION = 60


def token_kind_of(ttype: TokenType) -> TokenKind:
    match ttype:
        case Numeric():
            return TokenKind.NUMERIC
        case Entity():
            return TokenKind.ENTITY
        case PositionKind():
            return TokenKind.POSITION
        case TargetKind():
            return TokenKind.TARGET
        case LogicKind():
            return TokenKind.LOGIC
        case ActionKind():
            return TokenKind.ACTION
        case EndOfText():
            return TokenKind.END
        case _:
            raise TypeError(f"Not a token type: {ttype!r}")


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `text` is the slice of source the token was built from and `span` the
    frozen cursor range that produced it.
    """

    ttype: TokenType
    text: str
    span: Span

    @property
    def kind(self) -> TokenKind:
        return token_kind_of(self.ttype)

    @property
    def is_end(self) -> bool:
        return self.ttype is EndOfText.END

    @property
    def is_action(self) -> bool:
        return isinstance(self.ttype, ActionKind)

    def is_logic(self, *kinds: LogicKind) -> bool:
        if not isinstance(self.ttype, LogicKind):
            return False
        return not kinds or self.ttype in kinds

    def is_entity(self, *kinds: EntityKind, bare: bool = False) -> bool:
        ttype = self.ttype
        if not isinstance(ttype, Entity):
            return False
        if kinds and ttype.kind not in kinds:
            return False
        return ttype.is_bare or not bare

    def is_numeric(self, *kinds: NumericKind) -> bool:
        if not isinstance(self.ttype, Numeric):
            return False
        return not kinds or self.ttype.kind in kinds

    def __str__(self) -> str:
        return f"{self.span} ({self.ttype!r}) ({self.text})"


def end_token(cursor: Cursor | Span) -> Token:
    return Token(EndOfText.END, "", cursor.to_span())


def token_type_from_word(word: str, literal: str | None = None) -> TokenType | None:
    """Resolve a word against the vocabulary tables.

    Tables are checked in order: entity, position, numeric, action, target,
    logic. A digit run resolves to a plain number. When `literal` is given it
    is attached to value-bearing entities and numerics.
    """
    lowered = word.lower()
    if not lowered:
        return None

    if lowered.isascii() and lowered.isdigit():
        return Numeric(NumericKind.NUMBER, int(lowered))

    if (entity := Entity.from_keyword(lowered)) is not None:
        return entity.with_literal(literal) if literal is not None else entity
    if (position := POSITION_WORDS.get(lowered)) is not None:
        return position
    if (numeric := NUMERIC_WORDS.get(lowered)) is not None:
        return numeric.with_literal(literal) if literal is not None else numeric
    if (action := ACTION_WORDS.get(lowered)) is not None:
        return action
    if (target := TARGET_WORDS.get(lowered)) is not None:
        return target
    return LOGIC_WORDS.get(lowered)
