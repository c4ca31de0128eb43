"""Builds list trees from a token stream."""

from __future__ import annotations

import sys

from lsdlisp.interpreter import Tree
from lsdlisp.lexer import Lexer, TokenType


class Parser:
    """Reads one top-level list at a time; errors are reported on stderr."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._failed = False

    def has_failed(self) -> bool:
        """Return True if any parse error has been reported."""
        return self._failed

    def is_done(self) -> bool:
        """Return True once the underlying lexer has consumed all input."""
        return self._lexer.is_done()

    def get_next_list(self) -> Tree:
        """Parse the next parenthesised list; an empty tree on error."""
        return self._parse_list()

    def _parse_list(self, check_left: bool = True) -> Tree:
        if check_left and not self._expect(TokenType.LP):
            return Tree()

        tree = Tree()
        while True:
            token = self._lexer.next()
            if token.type is TokenType.END:
                sys.stderr.write("Unexpected end of stream\n")
                self._failed = True
                return Tree()
            if token.type is TokenType.WTF:
                sys.stderr.write(f"Unrecognized character {token.lexeme}\n")
                self._failed = True
                return Tree()
            if token.type is TokenType.NUM:
                tree.content.append(int(token.lexeme))
            elif token.type is TokenType.IDENT:
                tree.content.append(token.lexeme)
            elif token.type is TokenType.LP:
                tree.content.append(self._parse_list(check_left=False))
            elif token.type is TokenType.RP:
                return tree

    def _expect(self, token_type: TokenType) -> bool:
        token = self._lexer.next()
        if token.type is not token_type:
            sys.stderr.write(f"Error on token {token.lexeme}: Expected the token (")
            self._failed = True
            return False
        return True