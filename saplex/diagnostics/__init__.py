"""Diagnostics."""

from saplex.diagnostics.codes import (
    EFFECT_CONDITION_WITHOUT_ACTION,
    EFFECT_GAIN_MULTIPLE_POSITIONS,
    EFFECT_GAIN_NON_SELF_POSITION,
    EFFECT_GIVE_MISSING_POSITION,
    EFFECT_UNSUPPORTED_USAGE_PERIOD,
    LEXER_INVALID_CHARACTER,
    LEXER_MALFORMED_NUMBER,
    LEXER_MISSING_ATTRIBUTE,
    LEXER_NO_PERCENT_VARIANT,
    PARSER_DANGLING_CONNECTIVE,
    DiagnosticSpec,
    Severity,
)
from saplex.diagnostics.diagnostic import Diagnostic
from saplex.diagnostics.errors import (
    EffectValidationError,
    LexError,
    ParseError,
    SaplexError,
    TriggerSyntaxError,
)
from saplex.diagnostics.report import collect_diagnostics, format_diagnostic, has_errors

__all__ = [
    "EFFECT_CONDITION_WITHOUT_ACTION",
    "EFFECT_GAIN_MULTIPLE_POSITIONS",
    "EFFECT_GAIN_NON_SELF_POSITION",
    "EFFECT_GIVE_MISSING_POSITION",
    "EFFECT_UNSUPPORTED_USAGE_PERIOD",
    "LEXER_INVALID_CHARACTER",
    "LEXER_MALFORMED_NUMBER",
    "LEXER_MISSING_ATTRIBUTE",
    "LEXER_NO_PERCENT_VARIANT",
    "PARSER_DANGLING_CONNECTIVE",
    "Diagnostic",
    "DiagnosticSpec",
    "EffectValidationError",
    "LexError",
    "ParseError",
    "SaplexError",
    "Severity",
    "TriggerSyntaxError",
    "collect_diagnostics",
    "format_diagnostic",
    "has_errors",
]
