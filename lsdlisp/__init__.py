"""A tiny Lisp interpreter with a lexer, parser, evaluator and REPL."""

__version__ = "0.1.0"