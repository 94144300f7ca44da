"""Entrypoints that run lexer and builders over whole cards without raising."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeAlias

from tqdm import tqdm

from saplex.diagnostics import Diagnostic, SaplexError, collect_diagnostics
from saplex.lexer import tokenize
from saplex.parser import EffectBuilder, ParseMode, ParserOptions, build_triggers, resolve_options
from saplex.pipeline.result import CardParseResult

LOGGER = logging.getLogger(__name__)

CardText: TypeAlias = tuple[str, str]


def parse_card(
    trigger_text: str,
    effect_text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> CardParseResult:
    """Parse one card, reporting card-text errors as diagnostics.

    The effect phrase is built against the first trigger. Blank text yields
    no records for that phrase.
    """
    resolved_options = resolve_options(options=options, mode=mode)
    result = CardParseResult(trigger_text, effect_text, options=resolved_options)
    trigger_errors: list[Diagnostic] = []
    effect_errors: list[Diagnostic] = []

    try:
        result.trigger_tokens = tokenize(trigger_text)
        if trigger_text.strip():
            result.triggers = build_triggers(result.trigger_tokens)
    except SaplexError as exc:
        LOGGER.debug("Trigger %r failed: %s", trigger_text, exc)
        trigger_errors.append(exc.diagnostic)

    builder: EffectBuilder | None = None
    try:
        result.effect_tokens = tokenize(effect_text)
        if effect_text.strip():
            builder = EffectBuilder(result.trigger, result.effect_tokens, resolved_options)
            result.effects = builder.build()
    except SaplexError as exc:
        LOGGER.debug("Effect %r failed: %s", effect_text, exc)
        result.effects = []
        effect_errors.append(exc.diagnostic)

    warnings = builder.diagnostics if builder is not None else []
    result.diagnostics = collect_diagnostics(trigger_errors, warnings, effect_errors)
    return result


def parse_cards(
    cards: Iterable[CardText],
    options: ParserOptions | None = None,
    *,
    show_progress: bool = False,
) -> list[CardParseResult]:
    """Parse many `(trigger_text, effect_text)` pairs with the same options."""
    pending = list(cards)
    resolved_options = resolve_options(options=options, mode=None)
    iterator = tqdm(pending, desc="cards", unit="card") if show_progress else pending

    results = [parse_card(trigger, effect, resolved_options) for trigger, effect in iterator]
    failed = sum(1 for result in results if result.has_errors)
    LOGGER.info("Parsed %d card(s), %d with errors", len(results), failed)
    return results
