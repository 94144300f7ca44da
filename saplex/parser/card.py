"""High-level parse entrypoints for lexed card text."""

from collections.abc import Sequence

from saplex.lexer.tokens import Token
from saplex.parser.effect import Effect, EffectBuilder
from saplex.parser.options import ParseMode, ParserOptions
from saplex.parser.trigger import EffectTrigger, build_triggers


def resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse_triggers(tokens: Sequence[Token]) -> list[EffectTrigger]:
    return build_triggers(tokens)


def parse_effects(
    trigger: EffectTrigger | None,
    tokens: Sequence[Token],
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> list[Effect]:
    """Build the effects of one phrase, raising on the first invalid effect in strict mode."""
    builder = EffectBuilder(trigger, tokens, resolve_options(options=options, mode=mode))
    return builder.build()
