"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_INVALID_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_CHARACTER",
    message="Invalid character.",
    hint="Card text may only contain letters, digits, `+ - % / . ,` and whitespace.",
    category="lexer",
)

LEXER_MALFORMED_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_MALFORMED_NUMBER",
    message="Malformed numeric literal.",
    hint="Write summon stats as `A/B` and signed values as `+N attribute` or `+N% attribute`.",
    category="lexer",
)

LEXER_MISSING_ATTRIBUTE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_MISSING_ATTRIBUTE",
    message="No attribute after signed numerical characters.",
    hint="Follow the signed number with an attribute word (ex. `+2 attack`).",
    category="lexer",
)

LEXER_NO_PERCENT_VARIANT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_NO_PERCENT_VARIANT",
    message="Entity has no percent variant.",
    hint="Only attack, health, damage, gold and trumpets can be given as a percent.",
    category="lexer",
)

PARSER_DANGLING_CONNECTIVE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DANGLING_CONNECTIVE",
    message="Syntax error. Logical connective without an associated value.",
    category="parser",
)

EFFECT_CONDITION_WITHOUT_ACTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EFFECT_CONDITION_WITHOUT_ACTION",
    message="Condition without an action.",
    hint="A conditional clause must govern an action (ex. `If ..., gain +1 attack.`).",
    category="effect",
)

EFFECT_GAIN_MULTIPLE_POSITIONS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EFFECT_GAIN_MULTIPLE_POSITIONS",
    message="Gain effect with more than one position.",
    category="effect",
)

EFFECT_GAIN_NON_SELF_POSITION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EFFECT_GAIN_NON_SELF_POSITION",
    message="Gain effect applied to a position other than itself.",
    hint="Use `Give` for effects on other pets; only trumpets may be gained elsewhere.",
    category="effect",
)

EFFECT_GIVE_MISSING_POSITION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EFFECT_GIVE_MISSING_POSITION",
    message="Give effect without a position.",
    category="effect",
)

EFFECT_UNSUPPORTED_USAGE_PERIOD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EFFECT_UNSUPPORTED_USAGE_PERIOD",
    message="Usage limit must be given per turn.",
    hint="Only `Works N times per turn.` is supported.",
    category="effect",
)
