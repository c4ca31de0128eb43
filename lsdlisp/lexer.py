"""Tokenizer for LSD source text."""

from __future__ import annotations

import enum
import string
from collections.abc import Iterator
from dataclasses import dataclass

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


class TokenType(enum.Enum):
    """Kinds of token the lexer produces."""

    END = enum.auto()
    WTF = enum.auto()
    LP = enum.auto()
    RP = enum.auto()
    IDENT = enum.auto()
    NUM = enum.auto()


@dataclass(frozen=True)
class Token:
    """A single token with the text it was read from."""

    type: TokenType
    lexeme: str


class Lexer:
    """Splits source text into tokens, one call to ``next`` at a time."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._cursor = 0

    def is_done(self) -> bool:
        """Return True once the cursor has reached the end of the source."""
        return self._cursor >= len(self._source)

    def next(self) -> Token:
        """Read and return the next token; END once the source is exhausted."""
        source = self._source
        while self._cursor < len(source) and source[self._cursor] in _WHITESPACE:
            self._cursor += 1

        if self.is_done():
            return Token(TokenType.END, "")

        char = source[self._cursor]
        if char == "(":
            self._cursor += 1
            return Token(TokenType.LP, "(")
        if char == ")":
            self._cursor += 1
            return Token(TokenType.RP, ")")
        if char in _DIGITS:
            return Token(TokenType.NUM, self._take_run(_DIGITS))
        if char in _LETTERS:
            return Token(TokenType.IDENT, self._take_run(_LETTERS))

        self._cursor += 1
        return Token(TokenType.WTF, char)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next()).type is not TokenType.END:
            yield token

    def _take_run(self, allowed: frozenset[str]) -> str:
        start = self._cursor
        source = self._source
        while self._cursor < len(source) and source[self._cursor] in allowed:
            self._cursor += 1
        return source[start:self._cursor]