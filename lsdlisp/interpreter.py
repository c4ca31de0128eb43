"""Syntax tree, environment and primitive functions of the LSD language."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Union


class LsdError(RuntimeError):
    """Raised when evaluation of an LSD program fails."""


@dataclass
class Tree:
    """A parenthesised list; its items are nested trees, numbers or symbols."""

    content: list = field(default_factory=list)

    def eval(self, env: Environment) -> Value:
        """Evaluate this list as a function call in ``env``."""
        if not self.content:
            return Tree()
        head = self.content[0]
        if not isinstance(head, str):
            print(f"Not a function: {format_value(head)}", file=sys.stderr)
            return Tree()
        function = env.functions.get(head)
        if function is None:
            raise LsdError(f"Function {head} not defined")
        return function(self.content[1:], env)

    def __str__(self) -> str:
        return format_value(self)


Value = Union[Tree, int, float, str]
Function = Callable[[Sequence[Value], "Environment"], Value]


def format_value(value: Value) -> str:
    """Render a value the way the interpreter prints it."""
    if isinstance(value, Tree):
        if not value.content:
            return "nil"
        return "(" + "".join(f"{format_value(item)} " for item in value.content) + "\b)"
    if isinstance(value, str):
        return f"Symbol({value})"
    if isinstance(value, float):
        return f"{value:g}"
    return f"int({value})"


def get_value(value: Value, env: Environment) -> Value:
    """Evaluate trees, resolve symbols through aliases and variables."""
    if isinstance(value, Tree):
        return value.eval(env)
    if isinstance(value, str):
        name = env.aliases.get(value, value)
        if name not in env.variables:
            raise LsdError(f"Variable {value} doesn't exist")
        return get_value(env.variables[name], env)
    return value


def is_number(value: Value) -> bool:
    """Return True for integer and float atoms."""
    return isinstance(value, (int, float))


def is_truthy(value: Value) -> bool:
    """Symbols and non-zero numbers are true; zero and lists are false."""
    if isinstance(value, Tree):
        return False
    if isinstance(value, str):
        return True
    return value != 0


def _int_operands(args: Sequence[Value], env: Environment):
    for arg in args:
        value = get_value(arg, env)
        if isinstance(value, Tree):
            raise LsdError("Bad type in argument")
        if isinstance(value, str):
            raise LsdError("UNREACHABLE")
        if isinstance(value, float):
            raise LsdError("Floats are not yet supported")
        yield value


def primitive_add(args: Sequence[Value], env: Environment) -> Value:
    """Sum all arguments; zero when there are none."""
    return sum(_int_operands(args, env))


def primitive_sub(args: Sequence[Value], env: Environment) -> Value:
    """Subtract every later argument from the first; zero when there are none."""
    operands = _int_operands(args, env)
    first = next(operands, 0)
    return first - sum(operands)


def primitive_print(args: Sequence[Value], env: Environment) -> Value:
    """Write the unevaluated arguments to standard output."""
    sys.stdout.write("".join(f"{format_value(arg)} " for arg in args) + "\b")
    return Tree()


def primitive_set(args: Sequence[Value], env: Environment) -> Value:
    """Bind a symbol to an unevaluated expression."""
    if len(args) < 2:
        raise LsdError("Not enough arguments passed to set")
    if len(args) > 2:
        raise LsdError("Too many arguments passed to set")
    name, value = args
    if not isinstance(name, str):
        raise LsdError("set expects a symbol as first argument")
    env.variables[name] = value
    return Tree()


def primitive_if(args: Sequence[Value], env: Environment) -> Value:
    """Evaluate the second argument if the first is truthy, else the third."""
    if len(args) != 3:
        raise LsdError(
            "Too many arguments passed to if"
            if len(args) > 3
            else "Expected more arguments to if"
        )
    condition, then_branch, else_branch = args
    chosen = then_branch if is_truthy(get_value(condition, env)) else else_branch
    return get_value(chosen, env)


def primitive_quote(args: Sequence[Value], env: Environment) -> Value:
    """Return the single argument without evaluating it."""
    if len(args) != 1:
        raise LsdError("quote takes exactly one argument")
    return args[0]


def primitive_alias(args: Sequence[Value], env: Environment) -> Value:
    """Make the second symbol refer to the variable named by the first."""
    if len(args) != 2:
        raise LsdError(
            "Too many arguments passed to alias"
            if len(args) > 2
            else "Expected more arguments to alias"
        )
    target, alias = args
    if not (isinstance(target, str) and isinstance(alias, str)):
        raise LsdError("Both arguments of alias expect a symbol")
    if target not in env.variables:
        raise LsdError("Cannot alias a variable that does not exist")
    if alias in env.variables:
        raise LsdError("Cannot alias as an already existing symbol")
    env.aliases.setdefault(alias, target)
    return Tree()


class Environment:
    """Functions, variables and aliases visible to a running program."""

    def __init__(self) -> None:
        self.functions: dict[str, Function] = {
            "add": primitive_add,
            "sub": primitive_sub,
            "print": primitive_print,
            "set": primitive_set,
            "if": primitive_if,
            "quote": primitive_quote,
            "alias": primitive_alias,
        }
        self.variables: dict[str, Value] = {"true": 1, "false": 0}
        self.aliases: dict[str, str] = {}

    def has_function(self, symbol: str) -> bool:
        """Return True if ``symbol`` names a known function."""
        return symbol in self.functions