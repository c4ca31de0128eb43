[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lsdlisp"
version = "0.1.0"
description = "A tiny Lisp interpreter with a REPL and a script runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "interpreter", "repl", "s-expression"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lsd = "lsdlisp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lsdlisp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
