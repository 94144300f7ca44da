"""Lexer and builders for game-card trigger and effect text."""

from saplex.diagnostics import (
    Diagnostic,
    EffectValidationError,
    LexError,
    ParseError,
    SaplexError,
    TriggerSyntaxError,
)
from saplex.export import dumps, to_data
from saplex.lexer import Entity, EntityKind, Token, tokenize
from saplex.parser import (
    Effect,
    EffectTrigger,
    ParseMode,
    ParserOptions,
    parse_effects,
    parse_triggers,
)
from saplex.pipeline import CardParseResult, parse_card, parse_cards

__all__ = [
    "CardParseResult",
    "Diagnostic",
    "Effect",
    "EffectTrigger",
    "EffectValidationError",
    "Entity",
    "EntityKind",
    "LexError",
    "ParseError",
    "ParseMode",
    "ParserOptions",
    "SaplexError",
    "Token",
    "TriggerSyntaxError",
    "dumps",
    "parse_card",
    "parse_cards",
    "parse_effects",
    "parse_triggers",
    "to_data",
    "tokenize",
]
