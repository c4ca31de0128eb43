import pytest

from lsdlisp.lexer import Lexer, Token, TokenType


def test_simple_list_tokens():
    tokens = list(Lexer("(add 12 x)"))
    assert tokens == [
        Token(TokenType.LP, "("),
        Token(TokenType.IDENT, "add"),
        Token(TokenType.NUM, "12"),
        Token(TokenType.IDENT, "x"),
        Token(TokenType.RP, ")"),
    ]


def test_end_token_has_empty_lexeme_and_repeats():
    lexer = Lexer("a")
    assert lexer.next() == Token(TokenType.IDENT, "a")
    assert lexer.next() == Token(TokenType.END, "")
    assert lexer.next() == Token(TokenType.END, "")


def test_whitespace_is_skipped():
    lexer = Lexer(" \t\n\r\v\f(")
    assert lexer.next() == Token(TokenType.LP, "(")


def test_letters_and_digits_split():
    tokens = list(Lexer("abc123"))
    assert tokens == [Token(TokenType.IDENT, "abc"), Token(TokenType.NUM, "123")]


@pytest.mark.parametrize("char", ["+", "-", "é", "_", "."])
def test_unrecognized_character(char):
    lexer = Lexer(char + "x")
    assert lexer.next() == Token(TokenType.WTF, char)
    assert lexer.next() == Token(TokenType.IDENT, "x")


def test_is_done_on_empty_source():
    assert Lexer("").is_done() is True


def test_is_done_with_trailing_whitespace():
    lexer = Lexer("()  ")
    lexer.next()
    lexer.next()
    assert lexer.is_done() is False
    assert lexer.next().type is TokenType.END
    assert lexer.is_done() is True


def test_lexemes_reassemble_source_without_spaces():
    source = "(set foo (add 1 22))"
    joined = "".join(token.lexeme for token in Lexer(source))
    assert joined == source.replace(" ", "")