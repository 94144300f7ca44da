#!/usr/bin/env python
"""Print tokens, triggers, effects and diagnostics for one card."""

import argparse
import logging

from saplex.diagnostics import format_diagnostic
from saplex.export import dumps
from saplex.lexer import format_token
from saplex.logging_config import setup_logging
from saplex.parser import ParseMode
from saplex.pipeline import parse_card


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump the parse of one trigger/effect card pair")
    parser.add_argument("trigger", help='Trigger text (ex. "Start of battle")')
    parser.add_argument("effect", help='Effect text (ex. "Gain +2 attack and +2 health.")')
    parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.STRICT,
        help="Parser mode (default: strict)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    result = parse_card(args.trigger, args.effect, mode=args.mode)

    for label, tokens in (("Trigger", result.trigger_tokens), ("Effect", result.effect_tokens)):
        print(f"{label} tokens:")
        for idx, token in enumerate(tokens):
            print(format_token(idx, token))
        print()

    print("Triggers:")
    print(dumps(result.triggers, indent=2))
    print("\nEffects:")
    print(dumps(result.effects, indent=2))

    if result.diagnostics:
        print("\nDiagnostics:")
        for diagnostic in result.diagnostics:
            print(format_diagnostic(diagnostic))
    return 1 if result.has_errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
