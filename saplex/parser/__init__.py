"""Parser (token stream + trigger and effect builders)."""

from saplex.parser.card import parse_effects, parse_triggers, resolve_options
from saplex.parser.effect import MAX_POSITIONS, Effect, EffectBuilder, build_effects
from saplex.parser.options import ParseMode, ParserOptions
from saplex.parser.token_stream import TokenPredicate, TokenStream, TokenStreamCheckpoint
from saplex.parser.trigger import (
    START_OF_BATTLE_ABILITY,
    EffectTrigger,
    build_triggers,
    fold_sub_trigger,
)
from saplex.parser.validation import (
    DEFAULT_EFFECT_RULES,
    ConditionRequiresActionRule,
    EffectRule,
    GainSelfPositionRule,
    GainSinglePositionRule,
    GiveRequiresPositionRule,
    apply_action_defaults,
    validate_effect,
)

__all__ = [
    "DEFAULT_EFFECT_RULES",
    "MAX_POSITIONS",
    "START_OF_BATTLE_ABILITY",
    "ConditionRequiresActionRule",
    "Effect",
    "EffectBuilder",
    "EffectRule",
    "EffectTrigger",
    "GainSelfPositionRule",
    "GainSinglePositionRule",
    "GiveRequiresPositionRule",
    "ParseMode",
    "ParserOptions",
    "TokenPredicate",
    "TokenStream",
    "TokenStreamCheckpoint",
    "apply_action_defaults",
    "build_effects",
    "build_triggers",
    "fold_sub_trigger",
    "parse_effects",
    "parse_triggers",
    "resolve_options",
]
