"""Card-text lexer."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import Final

from saplex.diagnostics import Diagnostic, format_diagnostic
from saplex.diagnostics.codes import (
    LEXER_INVALID_CHARACTER,
    LEXER_MALFORMED_NUMBER,
    LEXER_MISSING_ATTRIBUTE,
    LEXER_NO_PERCENT_VARIANT,
)
from saplex.diagnostics.errors import LexError
from saplex.lexer.cursor import Cursor
from saplex.lexer.entity import START_OF_BATTLE, Entity, EntityKind
from saplex.lexer.tokens import EndOfText, Token, TokenType, end_token, token_type_from_word
from saplex.lexer.vocabulary import LogicKind, Numeric, NumericKind, PositionKind

LOGGER = logging.getLogger(__name__)

_SKIPPED: Final[frozenset[str]] = frozenset({".", ",", " ", "\t", "/"})
_NUMERAL_DELIMITERS: Final[frozenset[str]] = frozenset({" ", "-", "%"})

_PET_ATTRIBUTE_WORDS: Final[frozenset[str]] = frozenset({"friend", "friends", "pet", "pets"})
_PERK_MARKERS: Final[frozenset[str]] = frozenset({"perk", "Perk"})

_HAVE_WORDS: Final[frozenset[str]] = frozenset({"has", "have"})
_EACH_WORDS: Final[frozenset[str]] = frozenset({"each", "every"})
_START_OF_BATTLE_ABILITY: Final[tuple[frozenset[str], ...]] = (
    frozenset({"of"}),
    frozenset({"battle"}),
    frozenset({"ability"}),
)


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_word_char(ch: str) -> bool:
    return _is_letter(ch) or ch == "'"


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def _is_space(ch: str) -> bool:
    return ch == " "


class Lexer:
    """Single forward pass over one card-text string.

    Dispatches on the class of the current character: letters start a word,
    `+`/`-` a signed number, digits a number. Punctuation is skipped and any
    other character is fatal.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._cursor = Cursor()
        self._tokens: list[Token] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def is_eof(self) -> bool:
        return self._cursor.current >= len(self._source)

    def lex(self) -> list[Token]:
        if self._tokens and self._tokens[-1].is_end:
            return self._tokens

        while not self.is_eof:
            self._cursor.mark_start_at_current()
            self._lex_token()

        self._cursor.mark_start_at_current()
        self._tokens.append(end_token(self._cursor))
        return self._tokens

    def _lex_token(self) -> None:
        ch = self._advance()

        if _is_letter(ch):
            self._lex_word()
        elif ch == "+" or ch == "-":
            self._lex_signed_number()
        elif ch == "\n":
            self._cursor.line += 1
        elif ch in _SKIPPED:
            return
        elif _is_digit(ch):
            self._lex_number()
        else:
            raise LexError(LEXER_INVALID_CHARACTER, self._cursor, character=ch)

    # Words

    def _lex_word(self) -> None:
        start = self._cursor.start
        self._eat_while(_is_word_char)
        word = self._source[start : self._cursor.current]

        # Names are only recognized after some other text.
        if word[0].isupper() and start > 0:
            self._lex_capitalized(word)
        else:
            self._lex_keyword(word)

    def _lex_capitalized(self, first_word: str) -> None:
        start = self._cursor.start
        end = self._cursor.current
        words = [first_word]
        attribute_end: int | None = None

        while self._cursor.advance_if(self._source, _is_space) is not None:
            word = self._eat_while(_is_word_char)
            if word in _PET_ATTRIBUTE_WORDS:
                attribute_end = self._cursor.current
                break
            if not (word in _PERK_MARKERS or word[:1].isupper()):
                break
            words.append(word)
            end = self._cursor.current

        name = self._source[start:end]
        # A keyword opening a sentence keeps its meaning before "friend"/"pet".
        opens_sentence = (
            len(words) == 1
            and token_type_from_word(first_word) is not None
            and self._starts_sentence(start)
        )

        if attribute_end is not None and not opens_sentence:
            self._cursor.current = attribute_end
            self._emit(Entity.pet(attr=name))
            return

        self._cursor.current = end
        after_with = self._previous_is(LogicKind.WITH)
        if len(words) > 1 or after_with:
            if words[-1] in _PERK_MARKERS or after_with:
                self._emit(Entity.food(name))
            else:
                self._emit(Entity.pet(name))
            return

        self._lex_keyword(first_word, fallback=Entity.pet(first_word))

    def _lex_keyword(self, word: str, *, fallback: TokenType | None = None) -> None:
        ttype = token_type_from_word(word)
        if ttype is None:
            if fallback is not None:
                self._emit(fallback)
            return

        match ttype:
            case Entity() if ttype.kind.takes_value:
                digits = self._lookahead_digits()
                self._emit(ttype.with_literal(digits) if digits else ttype)
            case PositionKind.SELF if self._lookahead_words(_HAVE_WORDS):
                self._emit(LogicKind.HAVE)
            case LogicKind.FOR:
                # A lone `for` carries no meaning.
                if self._lookahead_words(_EACH_WORDS):
                    self._emit(LogicKind.FOR_EACH)
            case LogicKind.START if self._lookahead_words(*_START_OF_BATTLE_ABILITY):
                self._emit(Entity(EntityKind.ABILITY, name=START_OF_BATTLE))
            case _:
                self._emit(ttype)

    def _lookahead_words(self, *expected: frozenset[str]) -> bool:
        """Consume space-separated words matching `expected` in order, or nothing at all."""
        snapshot = self._cursor.snapshot()
        for accepted in expected:
            if self._cursor.advance_if(self._source, _is_space) is None:
                self._cursor.restore(snapshot)
                return False
            if self._eat_while(_is_word_char).lower() not in accepted:
                self._cursor.restore(snapshot)
                return False
        return True

    def _lookahead_digits(self) -> str | None:
        snapshot = self._cursor.snapshot()
        if self._cursor.advance_if(self._source, _is_space) is None:
            return None
        digits = self._eat_while(_is_digit)
        if not digits:
            self._cursor.restore(snapshot)
            return None
        return digits

    # Numbers

    def _lex_signed_number(self) -> None:
        if not self._eat_while(_is_digit):
            raise LexError(
                LEXER_MALFORMED_NUMBER,
                self._cursor,
                character=self._current_char() or None,
                reason="No digits after sign.",
            )
        literal = self._source[self._cursor.start : self._cursor.current]

        ch = self._current_char()
        if ch == " ":
            self._advance()
            percent = False
        elif ch == "%":
            self._advance()
            self._cursor.advance_if(self._source, _is_space)
            percent = True
        elif not ch:
            raise LexError(
                LEXER_MALFORMED_NUMBER,
                self._cursor,
                reason="No attribute after signed numerical characters.",
            )
        else:
            raise LexError(
                LEXER_MALFORMED_NUMBER,
                self._cursor,
                character=ch,
                reason=f"Non-whitespace {ch!r} after digit.",
            )

        word = self._eat_while(_is_word_char)
        entity = Entity.from_keyword(word) if word else None
        if entity is None or not entity.kind.takes_value:
            raise LexError(LEXER_MISSING_ATTRIBUTE, self._cursor, reason=f"Got {word!r}.")

        entity = entity.with_literal(literal)
        if percent:
            entity = self._percent_variant(entity)
        self._emit(entity)

    def _lex_number(self) -> None:
        self._eat_while(_is_digit)
        start = self._cursor.start
        number_end = self._cursor.current
        literal = self._source[start:number_end]

        ch = self._current_char()
        if ch == "/":
            self._emit(Entity(EntityKind.ATTACK, int(literal)))
            self._advance()
            self._cursor.mark_start_at_current()
            health = self._eat_while(_is_digit)
            if not health:
                raise LexError(
                    LEXER_MALFORMED_NUMBER,
                    self._cursor,
                    character=self._current_char() or None,
                    reason="No health after summon stats '/'.",
                )
            self._emit(Entity(EntityKind.HEALTH, int(health)))
            return

        if ch not in _NUMERAL_DELIMITERS:
            self._emit(Numeric(NumericKind.NUMBER, int(literal)))
            return

        percent = ch == "%"
        self._advance()
        if percent:
            self._cursor.advance_if(self._source, _is_space)
        resume = self._cursor.current

        word = self._eat_while(_is_word_char)
        attached = self._attach_numeral(word, literal, percent=percent)
        if attached is not None:
            self._emit(attached)
            return

        # Leave the word for the main loop.
        self._cursor.current = resume
        if percent:
            self._emit(Numeric(NumericKind.PERCENT, float(literal)), end=number_end + 1)
        else:
            self._emit(Numeric(NumericKind.NUMBER, int(literal)), end=number_end)

    def _attach_numeral(self, word: str, literal: str, *, percent: bool) -> TokenType | None:
        ttype = token_type_from_word(word) if word else None
        match ttype:
            case Entity() if ttype.kind.takes_value:
                entity = ttype.with_literal(literal)
                return self._percent_variant(entity) if percent else entity
            case Numeric() if ttype.kind.takes_value and not percent:
                return ttype.with_literal(literal)
            case _:
                return None

    def _percent_variant(self, entity: Entity) -> Entity:
        converted = entity.to_percent()
        if converted is None:
            raise LexError(LEXER_NO_PERCENT_VARIANT, self._cursor, reason=f"({entity.kind})")
        return converted

    # Primitives

    def _emit(self, ttype: TokenType, *, end: int | None = None) -> None:
        span = self._cursor.to_span()
        if end is not None:
            span = replace(span, current=end)
        self._tokens.append(Token(ttype, self._source[span.start : span.current], span))

    def _starts_sentence(self, start: int) -> bool:
        preceding = self._source[:start].rstrip()
        return not preceding or preceding.endswith(".")

    def _previous_is(self, ttype: TokenType) -> bool:
        return bool(self._tokens) and self._tokens[-1].ttype == ttype

    def _eat_while(self, predicate: Callable[[str], bool]) -> str:
        start = self._cursor.current
        while self._cursor.advance_if(self._source, predicate) is not None:
            pass
        return self._source[start : self._cursor.current]

    def _current_char(self) -> str:
        if self.is_eof:
            return ""
        return self._source[self._cursor.current]

    def _advance(self) -> str:
        ch = self._current_char()
        self._cursor.shift(1, limit=len(self._source))
        return ch


def tokenize(text: str) -> list[Token]:
    """Tokenize one card-text string, ending with the `End` sentinel."""
    tokens = Lexer(text).lex()
    LOGGER.debug("Lexed %d tokens from %r", len(tokens), text)
    return tokens


def token_text(token: Token, null_char_on_end: bool = False) -> str:
    """Get the source text of a token."""
    if token.is_end:
        return "\0" if null_char_on_end else ""
    return token.text


def describe_token_type(ttype: TokenType) -> str:
    match ttype:
        case Numeric(kind=kind, value=None):
            return kind.name
        case Numeric(kind=kind, value=value):
            return f"{kind.name}({value})"
        case Entity(kind=kind, value=value, name=name, attr=attr):
            fields = (("value", value), ("name", name), ("attr", attr))
            payload = [f"{key}={item!r}" for key, item in fields if item is not None]
            return f"{kind.name}({', '.join(payload)})" if payload else kind.name
        case EndOfText():
            return "END"
        case _:
            return ttype.name


def format_token(index: int, token: Token) -> str:
    return (
        f"{index:03d} {token.kind.name:<8} {describe_token_type(token.ttype):<32} "
        f"span={token.span.as_tuple()} line={token.span.line} text={token_text(token)!r}"
    )


def dump_tokens(tokens: Iterable[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print tokens with kind, type, span and text for debugging."""
    for i, tok in enumerate(tokens):
        print(format_token(i, tok))

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(format_diagnostic(d))
