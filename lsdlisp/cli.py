"""Command-line entry point: run a file or start the interactive REPL."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterator
from contextlib import redirect_stderr, redirect_stdout
from typing import TextIO

from lsdlisp.interpreter import Environment, LsdError, Tree, Value, format_value
from lsdlisp.lexer import Lexer
from lsdlisp.parser import Parser

WELCOME = 'Welcome to the LSD REPL. "quit" or "exit" to terminate this REPL.\n'
PROMPT = "(lsd) "


def read_file_content(path: str) -> str:
    """Return the file's text, or an empty string if it cannot be read."""
    try:
        with open(path, "rb") as handle:
            return handle.read().decode("utf-8", errors="replace")
    except OSError:
        return ""


def _evaluate(source: str, env: Environment) -> Iterator[Value]:
    parser = Parser(Lexer(source))
    while not parser.is_done():
        yield parser.get_next_list().eval(env)


def run_source(source: str, env: Environment | None = None) -> Value:
    """Evaluate every top-level list in ``source``; return the last result."""
    if env is None:
        env = Environment()
    result: Value = Tree()
    for result in _evaluate(source, env):
        pass
    return result


def run_repl(
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
    error_stream: TextIO | None = None,
) -> None:
    """Read, evaluate and print lines until "quit", "exit" or end of input."""
    stdin = input_stream if input_stream is not None else sys.stdin
    out = output_stream if output_stream is not None else sys.stdout
    err = error_stream if error_stream is not None else sys.stderr

    with redirect_stdout(out), redirect_stderr(err):
        out.write(WELCOME)
        while True:
            out.write(PROMPT)
            out.flush()
            line = stdin.readline()
            if not line:
                break
            line = line.rstrip("\n")
            if line in ("quit", "exit"):
                break

            env = Environment()
            start = time.perf_counter_ns()
            duration = 0
            result: Value = Tree()
            try:
                for result in _evaluate(line, env):
                    duration = time.perf_counter_ns() - start
                out.write(format_value(result))
            except LsdError as error:
                err.write(str(error))

            out.write("\n")
            out.write(f"Evaluation time: {duration} ns\n")


def main(argv: list[str] | None = None) -> int:
    """Run the file named first in ``argv``, or the REPL if none is given."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        run_repl()
        return 0
    try:
        run_source(read_file_content(args[0]), Environment())
    except LsdError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())