"""Lexer."""

from saplex.lexer.cursor import Cursor, Span
from saplex.lexer.entity import START_OF_BATTLE, Entity, EntityKind
from saplex.lexer.lexer import (
    Lexer,
    describe_token_type,
    dump_tokens,
    format_token,
    token_text,
    tokenize,
)
from saplex.lexer.tokens import EndOfText, Token, TokenKind, TokenType, token_type_from_word
from saplex.lexer.vocabulary import (
    ActionKind,
    LogicKind,
    Numeric,
    NumericKind,
    PositionKind,
    TargetKind,
)

__all__ = [
    "START_OF_BATTLE",
    "ActionKind",
    "Cursor",
    "EndOfText",
    "Entity",
    "EntityKind",
    "Lexer",
    "LogicKind",
    "Numeric",
    "NumericKind",
    "PositionKind",
    "Span",
    "TargetKind",
    "Token",
    "TokenKind",
    "TokenType",
    "describe_token_type",
    "dump_tokens",
    "format_token",
    "token_text",
    "token_type_from_word",
    "tokenize",
]
