# lsdlisp

A small Lisp interpreter. Programs are sequences of parenthesised lists that
hold non-negative integers, symbols made of ASCII letters, and nested lists.

## Installation

```
pip install .
```

## Usage

Run a script file:

```
lsd program.lsd
```

A file that cannot be read is treated as empty. If evaluation raises an
error, the message is printed to standard error and the command exits with
status 1.

Start the interactive REPL by giving no arguments:

```
lsd
```

Type `quit` or `exit` (or send end of input) to leave the REPL. Each line you
enter is evaluated in a fresh environment, so variables do not carry over
from one line to the next. The REPL prints the result of the last list on the
line and how long evaluation took, in nanoseconds.

## Language

Every top-level form must be a list whose first element names a built-in
function. A list headed by something other than a symbol prints
`Not a function: ...` to standard error and evaluates to `nil`; an unknown
function name is an error.

| Function | Meaning |
|----------|---------|
| `(add a b ...)` | sum of the integer arguments (0 with none) |
| `(sub a b ...)` | first argument minus the rest (0 with none) |
| `(print x ...)` | print the arguments as written, unevaluated |
| `(set name value)` | bind `name` to `value`, stored unevaluated |
| `(if cond then else)` | evaluate `then` unless `cond` is `0` or a list, else `else` |
| `(quote x)` | return `x` unevaluated |
| `(alias existing new)` | make `new` another name for the variable `existing` |

Arguments to `add`, `sub` and `if` are evaluated: nested lists are called,
and symbols are looked up (through aliases) among the variables. Because
`set` stores its value unevaluated, a variable bound to a list is evaluated
again each time it is read.

The variables `true` (1) and `false` (0) are predefined.

Values print as `int(5)`, `Symbol(x)`, or `(...)` for lists; an empty list
prints as `nil`.

Example:

```
(set x 40)
(alias x y)
(if false (quote no) (add y 2))
```

## Using it from Python

```python
from lsdlisp.interpreter import Environment, format_value
from lsdlisp.cli import run_source

env = Environment()
result = run_source("(set x 5) (add x 37)", env)
print(format_value(result))  # int(42)
```

`run_repl(input_stream, output_stream, error_stream)` in `lsdlisp.cli` runs
the REPL over any text streams. `lsdlisp.lexer.Lexer` and
`lsdlisp.parser.Parser` give access to the token stream and the parsed
`Tree` objects directly. Evaluation errors are raised as
`lsdlisp.interpreter.LsdError`; parse errors are reported on standard error
and recorded by `Parser.has_failed()`.

## Limitations

There are no user-defined functions, no strings, no floating-point or
negative number literals, and no comparison or multiplication primitives.