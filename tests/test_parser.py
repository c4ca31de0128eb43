from lsdlisp.interpreter import Tree
from lsdlisp.lexer import Lexer
from lsdlisp.parser import Parser


def parse(source):
    return Parser(Lexer(source))


def test_nested_list():
    parser = parse("(add 1 (sub 3 2))")
    assert parser.get_next_list() == Tree(["add", 1, Tree(["sub", 3, 2])])
    assert parser.has_failed() is False
    assert parser.is_done() is True


def test_sequence_of_lists():
    parser = parse("(a 1) (b 2)")
    assert parser.get_next_list() == Tree(["a", 1])
    assert parser.is_done() is False
    assert parser.get_next_list() == Tree(["b", 2])
    assert parser.is_done() is True


def test_empty_list():
    parser = parse("()")
    assert parser.get_next_list() == Tree()
    assert parser.has_failed() is False


def test_missing_left_paren(capsys):
    parser = parse("x")
    assert parser.get_next_list() == Tree()
    assert parser.has_failed() is True
    assert "Error on token x: Expected the token (" in capsys.readouterr().err


def test_unexpected_end(capsys):
    parser = parse("(add 1")
    assert parser.get_next_list() == Tree()
    assert parser.has_failed() is True
    assert "Unexpected end of stream" in capsys.readouterr().err


def test_unexpected_end_reported_per_open_list(capsys):
    parser = parse("(a (b")
    assert parser.get_next_list() == Tree()
    assert capsys.readouterr().err.count("Unexpected end of stream") == 2


def test_unrecognized_character(capsys):
    parser = parse("(add +)")
    assert parser.get_next_list() == Tree()
    assert parser.has_failed() is True
    assert "Unrecognized character +" in capsys.readouterr().err


def test_numbers_become_ints():
    parser = parse("(n 42)")
    tree = parser.get_next_list()
    assert tree.content[1] == int("42")
    assert isinstance(tree.content[1], int)