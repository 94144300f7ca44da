"""Token stream with lookahead and rollback over a lexed card text."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from saplex.lexer.cursor import Span
from saplex.lexer.tokens import Token, end_token

TokenPredicate: TypeAlias = Callable[[Token], bool]


@dataclass(frozen=True, slots=True)
class TokenStreamCheckpoint:
    position: int


class TokenStream:
    """Explicit position over a token list, always ending with `End`.

    `bump` never moves past the sentinel, so `current` is always valid.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        if not self._tokens or not self._tokens[-1].is_end:
            last = self._tokens[-1].span if self._tokens else Span()
            self._tokens.append(end_token(Span(last.current, last.current, last.line)))
        self._position = 0

    @property
    def tokens(self) -> list[Token]:
        return self._tokens

    @property
    def position(self) -> int:
        return self._position

    @property
    def current(self) -> Token:
        return self._tokens[self._position]

    @property
    def at_end(self) -> bool:
        return self.current.is_end

    @property
    def checkpoint(self) -> TokenStreamCheckpoint:
        return TokenStreamCheckpoint(self._position)

    def rewind(self, checkpoint: TokenStreamCheckpoint) -> None:
        self._position = checkpoint.position

    def nth(self, n: int) -> Token:
        index = min(self._position + n, len(self._tokens) - 1)
        return self._tokens[index]

    def at(self, predicate: TokenPredicate) -> bool:
        return predicate(self.current)

    def bump(self) -> Token:
        token = self.current
        if not token.is_end:
            self._position += 1
        return token

    def eat(self, predicate: TokenPredicate) -> Token | None:
        if self.at_end or not predicate(self.current):
            return None
        return self.bump()

    def eat_sequence(self, *predicates: TokenPredicate) -> list[Token] | None:
        """Consume one token per predicate, or nothing if any of them fails."""
        checkpoint = self.checkpoint
        eaten: list[Token] = []
        for predicate in predicates:
            token = self.eat(predicate)
            if token is None:
                self.rewind(checkpoint)
                return None
            eaten.append(token)
        return eaten
