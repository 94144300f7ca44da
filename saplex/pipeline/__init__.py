"""Card-level parse carriers and entrypoints."""

from saplex.pipeline.entrypoints import CardText, parse_card, parse_cards
from saplex.pipeline.result import CardParseResult

__all__ = [
    "CardParseResult",
    "CardText",
    "parse_card",
    "parse_cards",
]
